"""Capacity probing and reclamation for the run builder."""

from wordsort.memory.monitor import (
    CapacityOracle,
    MemoryMonitor,
    MemoryPressureLevel,
    MemoryInfo,
    TokenBudgetOracle,
    UnboundedCapacityOracle,
)
from wordsort.memory.handlers import (
    MemoryManager,
    GarbageCollectionManager,
    NullMemoryManager,
)

__all__ = [
    "CapacityOracle",
    "MemoryMonitor",
    "MemoryPressureLevel",
    "MemoryInfo",
    "TokenBudgetOracle",
    "UnboundedCapacityOracle",
    "MemoryManager",
    "GarbageCollectionManager",
    "NullMemoryManager",
]
