#!/usr/bin/env python3
"""
Tests for capacity probing and reclamation hints.
"""

import logging
import math
import unittest
from unittest import mock

import psutil

from wordsort import SortConfig
from wordsort.collections import WorkingSet
from wordsort.memory import (
    GarbageCollectionManager,
    MemoryMonitor,
    MemoryPressureLevel,
    NullMemoryManager,
    TokenBudgetOracle,
    UnboundedCapacityOracle,
)
from wordsort.memory import handlers


class TestMemoryMonitor(unittest.TestCase):
    """Test the psutil-backed capacity oracle."""

    def test_remaining_capacity_is_bounded_by_limit(self):
        rss = psutil.Process().memory_info().rss
        limit = rss + 64 * 1024 * 1024
        monitor = MemoryMonitor(memory_limit=limit)

        remaining = monitor.remaining_capacity()

        self.assertGreaterEqual(remaining, 0)
        self.assertLessEqual(remaining, limit)

    def test_tiny_limit_leaves_no_capacity(self):
        monitor = MemoryMonitor(memory_limit=1)
        info = monitor.get_memory_info()
        self.assertEqual(info.remaining, 0)
        self.assertEqual(info.pressure_level, MemoryPressureLevel.CRITICAL)
        self.assertIn("CRITICAL", str(info))

    def test_limit_defaults_to_config(self):
        config = SortConfig(memory_limit=123456789)
        self.assertEqual(MemoryMonitor(config=config).memory_limit, 123456789)

    def test_pressure_levels_are_ordered(self):
        self.assertGreater(MemoryPressureLevel.HIGH, MemoryPressureLevel.LOW)
        self.assertGreaterEqual(MemoryPressureLevel.NONE, MemoryPressureLevel.NONE)


class TestOracles(unittest.TestCase):
    """Test the deterministic oracles."""

    def test_unbounded(self):
        self.assertEqual(UnboundedCapacityOracle().remaining_capacity(), math.inf)

    def test_token_budget_tracks_working_set(self):
        ws = WorkingSet()
        oracle = TokenBudgetOracle(3, ws)
        self.assertEqual(oracle.remaining_capacity(), 3)
        ws.add("a")
        ws.add("A")
        ws.add("b")
        self.assertEqual(oracle.remaining_capacity(), 1)

    def test_unbound_token_budget_reports_full_budget(self):
        self.assertEqual(TokenBudgetOracle(5).remaining_capacity(), 5)

    def test_negative_budget_rejected(self):
        with self.assertRaises(ValueError):
            TokenBudgetOracle(-1)


class TestMemoryManagers(unittest.TestCase):
    """Test reclamation hints."""

    def test_garbage_collection_reports_non_negative(self):
        manager = GarbageCollectionManager()
        self.assertGreaterEqual(manager.hint_reclaim(), 0)

    def test_garbage_collection_rate_limit(self):
        manager = GarbageCollectionManager(min_interval=3600)
        manager.hint_reclaim()
        self.assertEqual(manager.hint_reclaim(), 0)

    def test_warns_when_pressure_remains_high(self):
        manager = GarbageCollectionManager(MemoryMonitor(memory_limit=1))
        with self.assertLogs("wordsort.memory.handlers", level="WARNING") as logs:
            manager.hint_reclaim()
        self.assertIn("CRITICAL", logs.output[0])

    def test_quiet_when_pressure_is_low(self):
        rss = psutil.Process().memory_info().rss
        manager = GarbageCollectionManager(MemoryMonitor(memory_limit=rss * 100))
        with mock.patch.object(handlers.logger, "log") as log:
            manager.hint_reclaim()
        self.assertEqual(log.call_args.args[0], logging.DEBUG)

    def test_null_manager(self):
        self.assertEqual(NullMemoryManager().hint_reclaim(), 0)


if __name__ == "__main__":
    unittest.main()
