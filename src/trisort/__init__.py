"""trisort implements bubble, selection, and insertion sort over mutable sequences."""

from .algorithms import (
    ALGORITHMS,
    SortStats,
    bubble_sort,
    get_algorithm,
    insertion_sort,
    selection_sort,
)
from .config import TrisortConfig
from .formatting import format_sequence
from .sorter import SortResult, Sorter

__all__ = [
    "ALGORITHMS",
    "SortResult",
    "SortStats",
    "Sorter",
    "TrisortConfig",
    "bubble_sort",
    "format_sequence",
    "get_algorithm",
    "insertion_sort",
    "selection_sort",
]
