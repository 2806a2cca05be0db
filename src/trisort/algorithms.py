from __future__ import annotations

from collections.abc import MutableSequence
from dataclasses import dataclass
from typing import Any, Protocol, TypeVar


class SupportsLessThan(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...


T = TypeVar("T", bound=SupportsLessThan)


@dataclass
class SortStats:
    """Counters describing the work done by one sort call."""

    comparisons: int = 0
    swaps: int = 0
    shifts: int = 0
    passes: int = 0


class SortFunction(Protocol):
    def __call__(
        self, items: MutableSequence[Any], stats: SortStats | None = None
    ) -> None: ...


def bubble_sort(items: MutableSequence[T], stats: SortStats | None = None) -> None:
    """Sort ``items`` in place by swapping adjacent out-of-order pairs.

    Each pass settles the largest unsorted element at the end of the scan, so
    the scan shrinks by one per pass. A pass without swaps ends the sort.
    """
    counter = stats if stats is not None else SortStats()
    end = len(items) - 1
    while end > 0:
        counter.passes += 1
        swapped = False
        for index in range(end):
            counter.comparisons += 1
            if items[index + 1] < items[index]:
                items[index], items[index + 1] = items[index + 1], items[index]
                counter.swaps += 1
                swapped = True
        if not swapped:
            break
        end -= 1


def selection_sort(items: MutableSequence[T], stats: SortStats | None = None) -> None:
    """Sort ``items`` in place by moving the suffix minimum into each slot."""
    counter = stats if stats is not None else SortStats()
    size = len(items)
    for position in range(size - 1):
        smallest = position
        for candidate in range(position + 1, size):
            counter.comparisons += 1
            if items[candidate] < items[smallest]:
                smallest = candidate
        if smallest != position:
            items[position], items[smallest] = items[smallest], items[position]
            counter.swaps += 1


def insertion_sort(items: MutableSequence[T], stats: SortStats | None = None) -> None:
    """Sort ``items`` in place, growing a sorted prefix one element at a time.

    Prefix elements move right only while strictly greater than the element
    being inserted, which keeps equal elements in their input order.
    """
    counter = stats if stats is not None else SortStats()
    for index in range(1, len(items)):
        current = items[index]
        slot = index
        while slot > 0:
            counter.comparisons += 1
            if not current < items[slot - 1]:
                break
            items[slot] = items[slot - 1]
            counter.shifts += 1
            slot -= 1
        items[slot] = current


ALGORITHMS: dict[str, SortFunction] = {
    "bubble": bubble_sort,
    "selection": selection_sort,
    "insertion": insertion_sort,
}


def get_algorithm(name: str) -> SortFunction:
    key = name.strip().lower()
    try:
        return ALGORITHMS[key]
    except KeyError:
        known = ", ".join(ALGORITHMS)
        raise ValueError(
            f"Unknown sorting algorithm {name!r}; expected one of: {known}."
        ) from None
