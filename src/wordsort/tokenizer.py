"""
Token extraction and case-insensitive comparison.

A token is a non-empty string of ASCII letters. Case is preserved; ordering
and equality ignore it.
"""

import re
from typing import Iterator

_NON_LETTERS = re.compile(r'[^A-Za-z]')
_WHITESPACE = re.compile(r'\s+', re.ASCII)


def sanitize(piece: str) -> str:
    """Strip every character that is not an ASCII letter."""
    return _NON_LETTERS.sub('', piece)


def tokenize(line: str) -> Iterator[str]:
    """
    Lazily yield the tokens of one line of text.

    The line is split on runs of ASCII whitespace and each piece is sanitized;
    pieces left empty are dropped.
    """
    for piece in _WHITESPACE.split(line):
        token = sanitize(piece)
        if token:
            yield token


def token_key(token: str) -> str:
    """Sort key giving case-insensitive order."""
    return token.lower()


def compare_tokens(a: str, b: str) -> int:
    """Three-way case-insensitive comparison: negative, zero or positive."""
    ka, kb = token_key(a), token_key(b)
    return (ka > kb) - (ka < kb)
