"""
Configuration management for wordsort operations.
"""

from typing import Optional
from dataclasses import dataclass, field
import psutil


MB = 1024 * 1024


@dataclass
class SortConfig:
    """Global configuration for external word sorting."""

    # Memory limits
    memory_limit: int = field(default_factory=lambda: int(psutil.virtual_memory().total * 0.8))
    flush_threshold: int = 2 * MB  # Flush when remaining capacity drops below this
    reclaim_after_flush: bool = True

    # Storage
    storage_path: Optional[str] = None  # None: alongside the input file
    run_dir_prefix: str = "temp-"
    output_suffix: str = ".out"

    # Text handling
    encoding: str = "utf-8"
    encoding_errors: str = "replace"

    _instance: Optional['SortConfig'] = None

    @classmethod
    def get_instance(cls) -> 'SortConfig':
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def format_bytes(self, bytes: float) -> str:
        """Format bytes as human-readable string."""
        for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
            if abs(bytes) < 1024.0:
                return f"{bytes:.2f} {unit}"
            bytes /= 1024.0
        return f"{bytes:.2f} PB"


def parse_size(value: str) -> int:
    """Parse a size such as ``512K``, ``2M`` or ``1G`` into bytes."""
    value = value.strip()
    if not value:
        raise ValueError("empty size")
    suffix = value[-1].lower()
    multipliers = {'k': 1024, 'm': MB, 'g': 1024 * MB}
    if suffix in multipliers:
        return int(value[:-1]) * multipliers[suffix]
    return int(value)


# Global configuration instance
config = SortConfig.get_instance()
