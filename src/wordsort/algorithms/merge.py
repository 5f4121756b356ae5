"""
Two-way merge of sorted runs with cross-run duplicate elimination.
"""

import logging
from typing import Iterable, Iterator

from wordsort.exceptions import MergeIOError, RunIOError
from wordsort.storage import RunHandle, RunStore
from wordsort.tokenizer import token_key

logger = logging.getLogger(__name__)

_END = object()


def merge_sorted(first: Iterable[str], second: Iterable[str]) -> Iterator[str]:
    """
    Merge two strictly increasing token streams into one.

    Heads are compared case-insensitively. When they are equal the head of
    ``first`` is emitted once and both streams advance. Once one stream runs
    out the other is drained as is.
    """
    it1, it2 = iter(first), iter(second)
    word1 = next(it1, _END)
    word2 = next(it2, _END)

    while word1 is not _END and word2 is not _END:
        key1, key2 = token_key(word1), token_key(word2)
        if key1 < key2:
            yield word1
            word1 = next(it1, _END)
        elif key1 > key2:
            yield word2
            word2 = next(it2, _END)
        else:
            yield word1
            word1 = next(it1, _END)
            word2 = next(it2, _END)

    if word1 is not _END:
        yield word1
        yield from it1
    if word2 is not _END:
        yield word2
        yield from it2


def merge_runs(store: RunStore, first: RunHandle, second: RunHandle) -> RunHandle:
    """
    Merge two persisted runs into a new run without buffering the result.

    On ties the casing from ``first`` is kept.

    Raises:
        MergeIOError: if either input cannot be read or the output written.
            A partially written output run is left in place.
    """
    logger.debug(f"Merging run {first.number} with run {second.number}")
    try:
        return store.create_run(
            merge_sorted(store.read_run(first), store.read_run(second)),
            origin=min(first.origin, second.origin)
        )
    except RunIOError as e:
        raise MergeIOError(
            f"Failed to merge runs {first.number} and {second.number}: {e}"
        ) from e
