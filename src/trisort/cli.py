from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .algorithms import ALGORITHMS
from .config import TrisortConfig
from .formatting import format_sequence
from .sorter import SortResult, Sorter

logger = logging.getLogger(__name__)

_ALL = "all"


def _find_project_root(start: Path) -> Path:
    current = start if start.is_dir() else start.parent
    for ancestor in [current, *current.parents]:
        if (ancestor / "pyproject.toml").exists():
            return ancestor
    return current


def _print_result(
    values: list[int], result: SortResult, separator: str, *, show_stats: bool
) -> None:
    print(f"Sorted array ({result.algorithm})")
    print(format_sequence(values, separator))
    if show_stats:
        stats = result.stats
        print(
            f"comparisons={stats.comparisons} swaps={stats.swaps} "
            f"shifts={stats.shifts} passes={stats.passes}"
        )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Sort integers with bubble, selection, or insertion sort."
    )
    parser.add_argument(
        "values",
        nargs="*",
        type=int,
        help="Integers to sort (defaults to the configured sample)",
    )
    parser.add_argument(
        "--algorithm",
        choices=[*ALGORITHMS, _ALL],
        help="Algorithm to run, or 'all' to run every one on the same input",
    )
    parser.add_argument(
        "--stats", action="store_true", help="Print comparison and move counters"
    )
    parser.add_argument(
        "--root", type=Path, help="Override the project root used for config"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(getattr(logging, args.log_level))

    root = args.root.resolve() if args.root else _find_project_root(Path.cwd())
    config = TrisortConfig.load(root)
    logger.info("Using configuration from %s", root)

    values = list(args.values) if args.values else config.sample.copy()
    sorter = Sorter(config)

    print("Original array")
    print(format_sequence(values, config.separator))

    if args.algorithm == _ALL:
        for sorted_values, result in sorter.compare(values):
            _print_result(
                sorted_values, result, config.separator, show_stats=args.stats
            )
        return 0

    result = sorter.sort(values, args.algorithm)
    _print_result(values, result, config.separator, show_stats=args.stats)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
