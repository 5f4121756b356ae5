"""
Per-invocation state: naming timestamp, locations and run numbering.
"""

import time
from pathlib import Path
from typing import Optional, Union

from wordsort.config import SortConfig, config as default_config


class SortSession:
    """
    State shared by the components of one sort invocation.

    The session owns the timestamp used for naming the run directory and the
    output file, and the run-number counter. Numbers are handed out in
    increasing order across initial runs and merge results and never reused.
    """

    def __init__(self,
                 input_path: Union[str, Path],
                 config: Optional[SortConfig] = None,
                 timestamp: Optional[int] = None):
        self.config = config or default_config
        self.input_path = Path(input_path)
        self.timestamp = timestamp if timestamp is not None else int(time.time() * 1000)
        self._next_run = 0

    @property
    def run_dir(self) -> Path:
        root = Path(self.config.storage_path) if self.config.storage_path else self.input_path.parent
        return root / f"{self.config.run_dir_prefix}{self.timestamp}"

    @property
    def output_path(self) -> Path:
        return self.input_path.parent / f"{self.timestamp}{self.config.output_suffix}"

    @property
    def runs_created(self) -> int:
        return self._next_run

    def next_run_number(self) -> int:
        number = self._next_run
        self._next_run += 1
        return number

    def __repr__(self) -> str:
        return f"SortSession(input={str(self.input_path)!r}, timestamp={self.timestamp})"
