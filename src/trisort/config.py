from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .algorithms import ALGORITHMS

logger = logging.getLogger(__name__)

DEFAULT_ALGORITHM = "insertion"
DEFAULT_SEPARATOR = " "
DEFAULT_SAMPLE: list[int] = [1, 5, 99, 14, 56, 4, 78, 100, 45, 87, 1]


def _normalize_algorithm(name: str | None) -> str:
    if name is None:
        return DEFAULT_ALGORITHM
    cleaned = str(name).strip().lower()
    if cleaned in ALGORITHMS:
        return cleaned
    logger.warning(
        "Ignoring unknown algorithm %r in configuration; using %r.",
        name,
        DEFAULT_ALGORITHM,
    )
    return DEFAULT_ALGORITHM


def _normalize_sample(sample: Any) -> list[int]:
    if sample is None:
        return DEFAULT_SAMPLE.copy()
    if not isinstance(sample, list):
        logger.warning(
            "Ignoring non-list sample %r in configuration; using the default.",
            sample,
        )
        return DEFAULT_SAMPLE.copy()
    # bool is an int subclass but never a meaningful sample value
    return [
        value
        for value in sample
        if isinstance(value, int) and not isinstance(value, bool)
    ]


def _table(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key, {})
    if isinstance(value, dict):
        return value
    logger.warning("Ignoring non-table %r entry in pyproject.toml.", key)
    return {}


@dataclass
class TrisortConfig:
    algorithm: str = DEFAULT_ALGORITHM
    separator: str = DEFAULT_SEPARATOR
    sample: list[int] = field(default_factory=lambda: DEFAULT_SAMPLE.copy())

    @classmethod
    def load(cls, root: Path) -> TrisortConfig:
        pyproject = root / "pyproject.toml"
        algorithm: str | None = None
        separator = DEFAULT_SEPARATOR
        sample: Any = None

        if pyproject.exists():
            with pyproject.open("rb") as handle:
                data = tomllib.load(handle)
            tool_cfg = _table(_table(data, "tool"), "trisort")
            algorithm = tool_cfg.get("algorithm")
            separator = tool_cfg.get("separator", separator)
            sample = tool_cfg.get("sample")
            logger.debug("Loaded [tool.trisort] from %s: %r", pyproject, tool_cfg)

        return cls(
            algorithm=_normalize_algorithm(algorithm),
            separator=str(separator),
            sample=_normalize_sample(sample),
        )
