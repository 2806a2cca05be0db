from __future__ import annotations

import logging
from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass
from typing import Any

from .algorithms import ALGORITHMS, SortStats, get_algorithm
from .config import TrisortConfig

logger = logging.getLogger(__name__)


@dataclass
class SortResult:
    algorithm: str
    changed: bool
    stats: SortStats


class Sorter:
    def __init__(self, config: TrisortConfig | None = None) -> None:
        self.config = config or TrisortConfig()

    def sort(
        self, items: MutableSequence[Any], algorithm: str | None = None
    ) -> SortResult:
        """Sort ``items`` in place and report the work it took.

        ``algorithm`` overrides the configured default. Unknown names raise
        ``ValueError`` before ``items`` is touched.
        """
        name = (algorithm or self.config.algorithm).strip().lower()
        sort_function = get_algorithm(name)
        stats = SortStats()
        sort_function(items, stats)
        changed = stats.swaps > 0 or stats.shifts > 0
        logger.debug(
            "%s sort of %d items: %d comparisons, %d swaps, %d shifts, %d passes",
            name,
            len(items),
            stats.comparisons,
            stats.swaps,
            stats.shifts,
            stats.passes,
        )
        return SortResult(algorithm=name, changed=changed, stats=stats)

    def compare(self, items: Sequence[Any]) -> list[tuple[list[Any], SortResult]]:
        """Sort a fresh copy of ``items`` with every registered algorithm."""
        outcomes: list[tuple[list[Any], SortResult]] = []
        for name in ALGORITHMS:
            working = list(items)
            outcomes.append((working, self.sort(working, name)))
        return outcomes
