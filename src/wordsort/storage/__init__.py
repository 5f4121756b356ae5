"""Auxiliary storage for sorted runs."""

from wordsort.storage.run_store import RunHandle, RunStore

__all__ = [
    "RunHandle",
    "RunStore",
]
