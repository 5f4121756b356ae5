"""
Command line entry point: ``wordsort <input-file>``.
"""

import argparse
import logging
import sys
from typing import List, Optional

from wordsort.algorithms import external_sort_file, sort_in_memory
from wordsort.config import SortConfig, parse_size
from wordsort.exceptions import ResourceExhausted, WordSortError
from wordsort.memory import TokenBudgetOracle
from wordsort.utils.logging import configure_logging

logger = logging.getLogger("wordsort")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordsort",
        description="Sort the unique words of a large text file using bounded memory."
    )
    parser.add_argument("input", metavar="<input-file>",
                        help="absolute or relative path of the input file")
    parser.add_argument("--storage-dir", default=None,
                        help="where to create the run directory (default: next to the input)")
    parser.add_argument("--flush-threshold", type=parse_size, default=None,
                        help="flush a run when remaining memory drops below this (e.g. 2M)")
    parser.add_argument("--memory-limit", type=parse_size, default=None,
                        help="memory the process may use (e.g. 512M)")
    parser.add_argument("--max-tokens", type=int, default=None,
                        help="cap each run at this many unique tokens instead of probing memory")
    parser.add_argument("--in-memory", action="store_true",
                        help="sort in a single run, for verifying external sort output")
    parser.add_argument("--log-level", default=None,
                        help="logging level (default: $WORDSORT_LOG_LEVEL or INFO)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    config = SortConfig()
    if args.storage_dir:
        config.storage_path = args.storage_dir
    if args.flush_threshold is not None:
        config.flush_threshold = args.flush_threshold
    if args.memory_limit is not None:
        config.memory_limit = args.memory_limit

    try:
        if args.in_memory:
            result = sort_in_memory(args.input, config=config)
        elif args.max_tokens is not None:
            config.flush_threshold = 1
            result = external_sort_file(args.input, config=config,
                                        oracle=TokenBudgetOracle(args.max_tokens))
        else:
            result = external_sort_file(args.input, config=config)
    except ResourceExhausted as e:
        logger.error(f"{e}; exiting")
        return 1
    except WordSortError as e:
        logger.error(f"Sort terminated: {e}")
        return 1

    print(result.output_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
