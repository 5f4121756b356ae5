"""
wordsort: external sorting of the unique words in a large text file.

Words are split on whitespace, stripped to ASCII letters, deduplicated and
ordered case-insensitively. Memory-bounded sorted runs are written to disk and
merged pairwise until a single sorted file remains.
"""

from wordsort.config import SortConfig
from wordsort.exceptions import (
    WordSortError,
    InputUnavailable,
    StorageUnavailable,
    RunNotFound,
    ResourceExhausted,
    RunIOError,
    MergeIOError,
)
from wordsort.tokenizer import sanitize, tokenize
from wordsort.collections import WorkingSet
from wordsort.memory import CapacityOracle, MemoryMonitor, TokenBudgetOracle
from wordsort.session import SortSession
from wordsort.storage import RunHandle, RunStore
from wordsort.algorithms import (
    BoundedRunBuilder,
    SortResult,
    external_sort_file,
    merge_runs,
    reduce_runs,
    sort_in_memory,
)

__version__ = "0.1.0"
__license__ = "Apache-2.0"

__all__ = [
    "SortConfig",
    "WordSortError",
    "InputUnavailable",
    "StorageUnavailable",
    "RunNotFound",
    "ResourceExhausted",
    "RunIOError",
    "MergeIOError",
    "sanitize",
    "tokenize",
    "WorkingSet",
    "CapacityOracle",
    "MemoryMonitor",
    "TokenBudgetOracle",
    "SortSession",
    "RunHandle",
    "RunStore",
    "BoundedRunBuilder",
    "SortResult",
    "external_sort_file",
    "merge_runs",
    "reduce_runs",
    "sort_in_memory",
]
