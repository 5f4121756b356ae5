"""
Persistence of sorted runs.

Each run is a plain text file holding one token per line, named by its run
number inside the session's run directory.
"""

import logging
from collections import deque
from dataclasses import dataclass
from pathlib import Path
from typing import Deque, Iterable, Iterator, Optional

from wordsort.exceptions import RunIOError, RunNotFound, StorageUnavailable
from wordsort.session import SortSession

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunHandle:
    """A sorted run on disk."""
    number: int
    path: Path
    origin: int  # Lowest initial run number whose tokens it holds

    @property
    def size(self) -> int:
        return self.path.stat().st_size


class RunStore:
    """Creates, enumerates, deletes and promotes run artifacts."""

    def __init__(self, session: SortSession):
        self.session = session
        self.config = session.config
        self.directory = session.run_dir

    def _ensure_directory(self) -> None:
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageUnavailable(
                f"Could not create run directory {self.directory}: {e}"
            ) from e

    def has_runs(self) -> bool:
        """True if at least one run artifact is currently persisted."""
        if not self.directory.is_dir():
            return False
        return any(p.name.isdigit() for p in self.directory.iterdir())

    def create_run(self, ordered_tokens: Iterable[str], origin: Optional[int] = None) -> RunHandle:
        """
        Write tokens, in the order given, to a freshly numbered run.

        The tokens are streamed to disk, so ``ordered_tokens`` may be a
        generator producing more data than fits in memory.
        """
        self._ensure_directory()
        number = self.session.next_run_number()
        path = self.directory / str(number)

        count = 0
        try:
            with open(path, 'w', encoding=self.config.encoding, newline='\n') as f:
                for token in ordered_tokens:
                    f.write(token)
                    f.write('\n')
                    count += 1
        except OSError as e:
            raise RunIOError(f"Could not write run {number} to {path}: {e}") from e

        handle = RunHandle(number=number, path=path,
                           origin=number if origin is None else origin)
        logger.debug(f"Created run {number} with {count} tokens")
        return handle

    def read_run(self, handle: RunHandle) -> Iterator[str]:
        """Lazily yield the tokens of a run."""
        with open(handle.path, 'r', encoding=self.config.encoding, newline='\n') as f:
            for line in f:
                yield line.rstrip('\n')

    def list_runs(self) -> Deque[RunHandle]:
        """
        Enumerate persisted runs, oldest first.

        Raises:
            RunNotFound: if the run directory is absent or holds no runs
        """
        if not self.directory.is_dir():
            raise RunNotFound(f"Run directory does not exist: {self.directory}")

        numbers = sorted(int(p.name) for p in self.directory.iterdir() if p.name.isdigit())
        if not numbers:
            raise RunNotFound(f"No runs found in {self.directory}")

        return deque(RunHandle(number=n, path=self.directory / str(n), origin=n)
                     for n in numbers)

    def delete(self, handle: RunHandle) -> None:
        """Remove a run that has been merged."""
        try:
            handle.path.unlink()
        except OSError as e:
            raise RunIOError(f"Could not delete run {handle.number}: {e}") from e
        logger.debug(f"Deleted run {handle.number}")

    def promote(self, handle: RunHandle, output_path: Path) -> Path:
        """Move the surviving run to its final location."""
        output_path = Path(output_path)
        try:
            handle.path.replace(output_path)
        except OSError as e:
            raise RunIOError(
                f"Could not move run {handle.number} to {output_path}: {e}"
            ) from e
        logger.debug(f"Promoted run {handle.number} to {output_path}")
        return output_path

    def cleanup(self) -> None:
        """Remove the run directory once it holds nothing."""
        if self.directory.is_dir() and not any(self.directory.iterdir()):
            try:
                self.directory.rmdir()
            except OSError as e:
                raise RunIOError(f"Could not remove run directory {self.directory}: {e}") from e
