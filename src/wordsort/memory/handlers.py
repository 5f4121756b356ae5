"""Reclamation hints issued after a run has been flushed."""

import gc
import time
import logging
from typing import Optional
from abc import ABC, abstractmethod

from wordsort.config import config
from wordsort.memory.monitor import MemoryMonitor, MemoryPressureLevel

logger = logging.getLogger(__name__)


class MemoryManager(ABC):
    """Abstract base class for reclamation strategies."""

    @abstractmethod
    def hint_reclaim(self) -> int:
        """Ask the runtime to release memory. Returns bytes freed, if known."""
        pass


class NullMemoryManager(MemoryManager):
    """Leave reclamation to the interpreter."""

    def hint_reclaim(self) -> int:
        return 0


class GarbageCollectionManager(MemoryManager):
    """Trigger a full garbage collection so the next capacity reading is truer."""

    def __init__(self,
                 monitor: Optional[MemoryMonitor] = None,
                 min_interval: float = 0.0):
        self.monitor = monitor or MemoryMonitor()
        self.min_interval = min_interval
        self._last_gc = 0.0

    def hint_reclaim(self) -> int:
        now = time.time()

        # Don't GC too frequently
        if now - self._last_gc < self.min_interval:
            return 0

        self._last_gc = now

        before = self.monitor.get_memory_info().process_rss
        collected = gc.collect()
        info = self.monitor.get_memory_info()
        freed = max(0, before - info.process_rss)

        level = logging.DEBUG
        if info.pressure_level >= MemoryPressureLevel.HIGH:
            # Still under pressure after a full collection
            level = logging.WARNING
        logger.log(level, f"gc collected {collected} objects, freed "
                          f"{config.format_bytes(freed)}; {info}")
        return freed
