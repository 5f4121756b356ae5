"""Errors raised by the sort pipeline. Every one of them aborts the sort."""


class WordSortError(Exception):
    """Base class for wordsort failures."""


class InputUnavailable(WordSortError):
    """The input file is missing or unreadable."""


class StorageUnavailable(WordSortError):
    """The run directory could not be created."""


class RunNotFound(WordSortError):
    """No persisted runs exist, or the run directory is absent."""


class ResourceExhausted(WordSortError):
    """Capacity is exhausted and the working set has nothing to flush."""

    def __init__(self, message: str = "Not enough memory: nothing buffered to flush"):
        super().__init__(message)


class RunIOError(WordSortError):
    """A run artifact could not be written, moved or removed."""


class MergeIOError(RunIOError):
    """A run artifact could not be read or written during the merge phase."""
