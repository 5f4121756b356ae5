"""
WorkingSet: the ordered, duplicate-free token buffer behind each sorted run.
"""

from bisect import bisect_left
from typing import Dict, Iterator, List
from collections.abc import Collection

from wordsort.tokenizer import token_key


class WorkingSet(Collection):
    """
    Tokens kept in case-insensitive order with no two case-insensitively equal
    entries.

    Keys are held in a sorted list (sorted insert via bisect) alongside a
    key -> token mapping that remembers the casing seen first.
    """

    def __init__(self):
        self._keys: List[str] = []
        self._tokens: Dict[str, str] = {}

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[str]:
        for key in self._keys:
            yield self._tokens[key]

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and token_key(token) in self._tokens

    def __repr__(self) -> str:
        return f"WorkingSet({list(self)!r})"

    def add(self, token: str) -> bool:
        """
        Insert token unless a case-insensitive equal is already present.

        Returns:
            True if the token was inserted, False if it was coalesced
        """
        key = token_key(token)
        if key in self._tokens:
            return False
        self._keys.insert(bisect_left(self._keys, key), key)
        self._tokens[key] = token
        return True

    def drain(self) -> Iterator[str]:
        """Yield tokens in order, emptying the set once exhausted."""
        try:
            yield from self
        finally:
            self.clear()

    def clear(self) -> None:
        """Remove all tokens."""
        self._keys.clear()
        self._tokens.clear()
