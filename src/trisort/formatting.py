from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def format_sequence(items: Iterable[Any], separator: str = " ") -> str:
    return separator.join(str(item) for item in items)
