"""External sort: run building, pairwise merging and the full pipeline."""

from wordsort.algorithms.builder import BoundedRunBuilder
from wordsort.algorithms.merge import merge_runs, merge_sorted
from wordsort.algorithms.reduction import ReductionResult, reduce_runs
from wordsort.algorithms.external_sort import (
    SortResult,
    external_sort_file,
    sort_in_memory,
)

__all__ = [
    "BoundedRunBuilder",
    "merge_runs",
    "merge_sorted",
    "ReductionResult",
    "reduce_runs",
    "SortResult",
    "external_sort_file",
    "sort_in_memory",
]
