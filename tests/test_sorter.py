from __future__ import annotations

import logging

import pytest

from trisort import ALGORITHMS, SortResult, Sorter, TrisortConfig

SAMPLE = [1, 5, 99, 14, 56, 4, 78, 100, 45, 87, 1]
SAMPLE_SORTED = [1, 1, 4, 5, 14, 45, 56, 78, 87, 99, 100]


def test_sorter_uses_configured_algorithm() -> None:
    sorter = Sorter(TrisortConfig(algorithm="bubble"))
    values = SAMPLE.copy()

    result = sorter.sort(values)

    assert values == SAMPLE_SORTED
    assert result.algorithm == "bubble"
    assert result.changed
    assert result.stats.swaps > 0


def test_sorter_defaults_to_insertion() -> None:
    result = Sorter().sort([3, 1, 2])
    assert result.algorithm == "insertion"
    assert result.stats.shifts == 2


def test_sorter_override_normalizes_name() -> None:
    result = Sorter().sort([2, 1], " Selection ")
    assert result.algorithm == "selection"


def test_sorter_reports_unchanged_for_sorted_input() -> None:
    for name in ALGORITHMS:
        result = Sorter().sort([1, 2, 3], name)
        assert not result.changed


def test_sorter_unknown_algorithm_leaves_input_untouched() -> None:
    values = [3, 2, 1]
    with pytest.raises(ValueError):
        Sorter().sort(values, "heap")
    assert values == [3, 2, 1]


def test_compare_runs_every_algorithm_on_copies() -> None:
    values = SAMPLE.copy()

    outcomes = Sorter().compare(values)

    assert values == SAMPLE
    assert [result.algorithm for _, result in outcomes] == list(ALGORITHMS)
    for sorted_values, _ in outcomes:
        assert sorted_values == SAMPLE_SORTED
        assert sorted_values is not values


def test_compare_on_empty_input() -> None:
    outcomes = Sorter().compare([])
    assert all(sorted_values == [] for sorted_values, _ in outcomes)
    assert not any(result.changed for _, result in outcomes)


def test_sorter_logs_counters_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="trisort.sorter"):
        Sorter().sort([2, 1], "bubble")
    assert "bubble sort of 2 items: 1 comparisons, 1 swaps" in caplog.text


def test_sort_result_requires_stats() -> None:
    with pytest.raises(TypeError):
        SortResult(algorithm="bubble", changed=False)  # type: ignore[call-arg]
