"""In-memory collections used while building sorted runs."""

from wordsort.collections.working_set import WorkingSet

__all__ = [
    "WorkingSet",
]
