"""
Pairwise reduction of all runs down to a single run.
"""

import logging
from dataclasses import dataclass

from wordsort.algorithms.merge import merge_runs
from wordsort.exceptions import MergeIOError, RunIOError
from wordsort.storage import RunHandle, RunStore

logger = logging.getLogger(__name__)


@dataclass
class ReductionResult:
    """Outcome of the merge phase."""
    final: RunHandle
    merges: int
    initial_runs: int


def reduce_runs(store: RunStore) -> ReductionResult:
    """
    Merge runs two at a time until one remains.

    The two oldest runs are taken from the front of the queue, merged, and
    the result is appended to the back; the consumed runs are then deleted.
    N initial runs take exactly N - 1 merges. With no runs at all (empty
    input) an empty run is created and returned as is.
    """
    if not store.has_runs():
        logger.info("No sorted runs to merge; input held no tokens")
        return ReductionResult(final=store.create_run([]), merges=0, initial_runs=0)

    runs = store.list_runs()
    initial_runs = len(runs)
    logger.info(f"Merging {initial_runs} initial sorted runs")

    merges = 0
    while len(runs) > 1:
        first = runs.popleft()
        second = runs.popleft()
        # Feed the run holding earlier input first so its casing wins ties
        if second.origin < first.origin:
            first, second = second, first

        runs.append(merge_runs(store, first, second))
        merges += 1

        try:
            store.delete(first)
            store.delete(second)
        except RunIOError as e:
            raise MergeIOError(f"Failed to delete merged run: {e}") from e

    return ReductionResult(final=runs.popleft(), merges=merges, initial_runs=initial_runs)
