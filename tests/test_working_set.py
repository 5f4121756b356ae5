#!/usr/bin/env python3
"""
Tests for the ordered, case-insensitively unique working set.
"""

import random
import unittest

from wordsort.collections import WorkingSet
from wordsort.tokenizer import token_key


class TestWorkingSet(unittest.TestCase):
    """Test WorkingSet ordering and deduplication."""

    def test_iterates_in_case_insensitive_order(self):
        ws = WorkingSet()
        for token in ["the", "Fox", "jumps", "A", "over"]:
            ws.add(token)
        self.assertEqual(list(ws), ["A", "Fox", "jumps", "over", "the"])

    def test_first_seen_casing_wins(self):
        ws = WorkingSet()
        self.assertTrue(ws.add("The"))
        self.assertFalse(ws.add("the"))
        self.assertFalse(ws.add("THE"))
        self.assertEqual(list(ws), ["The"])
        self.assertEqual(len(ws), 1)

    def test_contains_is_case_insensitive(self):
        ws = WorkingSet()
        ws.add("Fox")
        self.assertIn("fox", ws)
        self.assertIn("FOX", ws)
        self.assertNotIn("dog", ws)
        self.assertNotIn(3, ws)

    def test_drain_empties_the_set(self):
        ws = WorkingSet()
        for token in ["b", "a", "c"]:
            ws.add(token)
        self.assertEqual(list(ws.drain()), ["a", "b", "c"])
        self.assertEqual(len(ws), 0)
        self.assertFalse(ws)

    def test_random_inserts_stay_sorted_and_unique(self):
        random.seed(11)
        words = ["".join(random.choice("abcABC") for _ in range(3)) for _ in range(500)]
        ws = WorkingSet()
        for word in words:
            ws.add(word)

        keys = [token_key(t) for t in ws]
        self.assertEqual(keys, sorted(set(keys)))
        self.assertEqual(len(ws), len({token_key(w) for w in words}))

        first_seen = {}
        for word in words:
            first_seen.setdefault(token_key(word), word)
        self.assertEqual(list(ws), [first_seen[k] for k in keys])


if __name__ == "__main__":
    unittest.main()
