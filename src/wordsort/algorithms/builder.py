"""
Memory-bounded construction of the initial sorted runs.
"""

import logging
from typing import Iterable, List, Optional

from wordsort.collections import WorkingSet
from wordsort.exceptions import ResourceExhausted
from wordsort.memory import (
    CapacityOracle, MemoryManager, NullMemoryManager, TokenBudgetOracle
)
from wordsort.storage import RunHandle, RunStore
from wordsort.tokenizer import tokenize

logger = logging.getLogger(__name__)


class BoundedRunBuilder:
    """
    Accumulate unique tokens in memory and flush them as sorted runs whenever
    the capacity oracle reports less room than ``flush_threshold``.
    """

    def __init__(self,
                 store: RunStore,
                 oracle: CapacityOracle,
                 memory_manager: Optional[MemoryManager] = None,
                 flush_threshold: Optional[float] = None,
                 working_set: Optional[WorkingSet] = None):
        """
        Initialize run builder.

        Args:
            store: Where flushed runs are persisted
            oracle: Remaining-capacity oracle, sampled before each admission
            memory_manager: Reclamation hint issued after each flush
            flush_threshold: Flush below this much remaining capacity
                (defaults to the session's configured threshold)
            working_set: Buffer to fill (a fresh one if omitted)
        """
        self.store = store
        self.oracle = oracle
        self.memory_manager = memory_manager or NullMemoryManager()
        if flush_threshold is None:
            flush_threshold = store.config.flush_threshold
        self.flush_threshold = flush_threshold
        self.working_set = working_set if working_set is not None else WorkingSet()
        if isinstance(oracle, TokenBudgetOracle) and oracle.working_set is None:
            oracle.bind(self.working_set)
        self.runs: List[RunHandle] = []
        self.tokens_admitted = 0

    def admit(self, token: str) -> bool:
        """Buffer a token; case-insensitive duplicates keep the first casing."""
        self.tokens_admitted += 1
        return self.working_set.add(token)

    def should_flush(self) -> bool:
        """
        Check whether the buffer must be written out before admitting more.

        Raises:
            ResourceExhausted: capacity is short and nothing is buffered
        """
        remaining = self.oracle.remaining_capacity()
        if remaining >= self.flush_threshold:
            return False
        if not self.working_set:
            raise ResourceExhausted(
                f"Not enough memory: remaining capacity {remaining} is below "
                f"{self.flush_threshold} with nothing buffered to flush"
            )
        return True

    def flush(self) -> Optional[RunHandle]:
        """
        Persist the buffered tokens as a new sorted run and empty the buffer.

        Returns:
            The new run, or None if there was nothing to flush
        """
        if not self.working_set:
            logger.debug("No data to flush to disk")
            return None

        count = len(self.working_set)
        handle = self.store.create_run(self.working_set.drain())
        self.runs.append(handle)
        logger.debug(f"Flushed {count} tokens to run {handle.number}")

        if self.store.config.reclaim_after_flush:
            self.memory_manager.hint_reclaim()
        return handle

    def consume(self, lines: Iterable[str]) -> List[RunHandle]:
        """
        Tokenize every line into sorted runs.

        Capacity is checked before each token is admitted; end of input always
        flushes whatever is still buffered.
        """
        for line in lines:
            for token in tokenize(line):
                while self.should_flush():
                    self.flush()
                self.admit(token)
        self.flush()
        return self.runs
