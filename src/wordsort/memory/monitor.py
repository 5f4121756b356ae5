"""Memory probing: how much room is left for the working set."""

import math
import time
from enum import Enum
from typing import Optional, Sized
from dataclasses import dataclass
from abc import ABC, abstractmethod

import psutil

from wordsort.config import SortConfig, config as default_config


class MemoryPressureLevel(Enum):
    """Memory pressure levels."""
    NONE = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    CRITICAL = 4

    def __gt__(self, other):
        if not isinstance(other, MemoryPressureLevel):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other):
        if not isinstance(other, MemoryPressureLevel):
            return NotImplemented
        return self.value >= other.value


@dataclass
class MemoryInfo:
    """Memory usage information."""
    limit: int
    available: int
    process_rss: int
    percent: float
    pressure_level: MemoryPressureLevel
    timestamp: float

    @property
    def remaining(self) -> int:
        """Bytes the process may still grow by before hitting its limit."""
        return max(0, min(self.available, self.limit - self.process_rss))

    def __str__(self) -> str:
        return (f"Memory: {self.percent:.1f}% of limit used "
                f"(rss {self.process_rss / 1024 ** 2:.1f} MB, "
                f"remaining {self.remaining / 1024 ** 2:.1f} MB), "
                f"Pressure: {self.pressure_level.name}")


class CapacityOracle(ABC):
    """Reports how much working memory is left, in the oracle's own unit."""

    @abstractmethod
    def remaining_capacity(self) -> float:
        """Current remaining capacity."""
        pass


class MemoryMonitor(CapacityOracle):
    """
    Measure process and system memory with psutil.

    Remaining capacity is the smaller of the system's available memory and the
    configured limit minus this process's resident set size. It is a coarse,
    best-effort reading: interpreter overhead and fragmentation are outside
    the working set's control.
    """

    def __init__(self,
                 memory_limit: Optional[int] = None,
                 config: Optional[SortConfig] = None):
        """
        Initialize memory monitor.

        Args:
            memory_limit: Custom memory limit in bytes (None for configured limit)
            config: Configuration to read the default limit from
        """
        config = config or default_config
        self.memory_limit = memory_limit or config.memory_limit
        self._process = psutil.Process()

    def get_memory_info(self) -> MemoryInfo:
        """Get current memory information."""
        mem = psutil.virtual_memory()
        rss = self._process.memory_info().rss

        limit = min(mem.total, self.memory_limit)
        percent = (rss / limit) * 100 if limit else 100.0

        if percent >= 95:
            level = MemoryPressureLevel.CRITICAL
        elif percent >= 85:
            level = MemoryPressureLevel.HIGH
        elif percent >= 70:
            level = MemoryPressureLevel.MEDIUM
        elif percent >= 50:
            level = MemoryPressureLevel.LOW
        else:
            level = MemoryPressureLevel.NONE

        return MemoryInfo(
            limit=limit,
            available=mem.available,
            process_rss=rss,
            percent=percent,
            pressure_level=level,
            timestamp=time.time()
        )

    def remaining_capacity(self) -> float:
        return self.get_memory_info().remaining


class UnboundedCapacityOracle(CapacityOracle):
    """Never reports exhaustion; everything is sorted in a single run."""

    def remaining_capacity(self) -> float:
        return math.inf


class TokenBudgetOracle(CapacityOracle):
    """
    Capacity measured in tokens rather than bytes.

    Remaining capacity is ``max_tokens`` minus the number of tokens currently
    buffered, which makes run boundaries deterministic. Pair it with a flush
    threshold of 1 to cap each run at ``max_tokens`` tokens.
    """

    def __init__(self, max_tokens: int, working_set: Optional[Sized] = None):
        if max_tokens < 0:
            raise ValueError("max_tokens must be non-negative")
        self.max_tokens = max_tokens
        self.working_set = working_set

    def bind(self, working_set: Sized) -> None:
        """Attach the buffer whose size is being budgeted."""
        self.working_set = working_set

    def remaining_capacity(self) -> float:
        used = len(self.working_set) if self.working_set is not None else 0
        return self.max_tokens - used
