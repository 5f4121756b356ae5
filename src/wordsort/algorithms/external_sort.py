"""
External sorting of the words in a text file.

Phase 1 reads the input line by line and builds memory-bounded sorted runs.
Phase 2 merges the runs pairwise until one remains, which becomes the output.
"""

import time
import logging
from pathlib import Path
from dataclasses import dataclass
from typing import Iterator, Optional, Union

from wordsort.algorithms.builder import BoundedRunBuilder
from wordsort.algorithms.reduction import reduce_runs
from wordsort.config import SortConfig, config as default_config
from wordsort.exceptions import InputUnavailable, RunIOError
from wordsort.memory import (
    CapacityOracle,
    GarbageCollectionManager,
    MemoryManager,
    MemoryMonitor,
    UnboundedCapacityOracle,
)
from wordsort.session import SortSession
from wordsort.storage import RunStore

logger = logging.getLogger(__name__)


@dataclass
class SortResult:
    """Summary of a completed sort."""
    output_path: Path
    initial_runs: int
    merges: int
    tokens: int
    elapsed: float


def read_lines(path: Path, config: Optional[SortConfig] = None) -> Iterator[str]:
    """
    Yield the lines of the input file.

    Raises:
        InputUnavailable: if the file cannot be opened or read
    """
    config = config or default_config
    try:
        with open(path, 'r', encoding=config.encoding, errors=config.encoding_errors) as f:
            yield from f
    except OSError as e:
        raise InputUnavailable(f"Cannot read input file {path}: {e}") from e


def external_sort_file(
    input_path: Union[str, Path],
    config: Optional[SortConfig] = None,
    oracle: Optional[CapacityOracle] = None,
    memory_manager: Optional[MemoryManager] = None,
    session: Optional[SortSession] = None
) -> SortResult:
    """
    Sort the unique words of a file too large to sort in memory.

    Args:
        input_path: Text file to read
        config: Configuration (global configuration if omitted)
        oracle: Capacity oracle deciding when to flush (psutil monitor if omitted)
        memory_manager: Reclamation hint after each flush (gc if omitted)
        session: Invocation state; supplies naming and run numbering

    Returns:
        SortResult describing the output file, one token per line
    """
    start = time.time()
    session = session or SortSession(input_path, config=config)
    config = session.config

    if oracle is None or memory_manager is None:
        monitor = MemoryMonitor(config=config)
        oracle = oracle or monitor
        memory_manager = memory_manager or GarbageCollectionManager(monitor)

    input_path = session.input_path
    if not input_path.is_file():
        raise InputUnavailable(f"Input file does not exist: {input_path}")

    store = RunStore(session)
    builder = BoundedRunBuilder(store, oracle, memory_manager)

    logger.info(f"Starting external sort of {input_path}")
    builder.consume(read_lines(input_path, config))
    logger.info(f"Created {len(builder.runs)} sorted runs from "
                f"{builder.tokens_admitted} tokens, starting the merge step")

    reduction = reduce_runs(store)
    output_path = store.promote(reduction.final, session.output_path)
    store.cleanup()

    tokens = _count_lines(output_path, config)
    elapsed = time.time() - start
    logger.info(f"Completed external sort in {elapsed:.2f}s "
                f"({reduction.merges} merges, {tokens} unique tokens)")
    logger.info(f"Output file created: {output_path}")

    return SortResult(
        output_path=output_path,
        initial_runs=reduction.initial_runs,
        merges=reduction.merges,
        tokens=tokens,
        elapsed=elapsed
    )


def sort_in_memory(
    input_path: Union[str, Path],
    config: Optional[SortConfig] = None,
    session: Optional[SortSession] = None
) -> SortResult:
    """
    Sort with capacity checks disabled, producing a single run.

    Used to verify external sort output against an all-in-memory result.
    """
    return external_sort_file(
        input_path,
        config=config,
        oracle=UnboundedCapacityOracle(),
        memory_manager=GarbageCollectionManager(MemoryMonitor(config=config)),
        session=session
    )


def _count_lines(path: Path, config: SortConfig) -> int:
    try:
        with open(path, 'r', encoding=config.encoding) as f:
            return sum(1 for _ in f)
    except OSError as e:
        raise RunIOError(f"Could not read output file {path}: {e}") from e
