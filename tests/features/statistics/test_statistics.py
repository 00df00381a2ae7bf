"""Tests for aggregate statistics functions."""

from __future__ import annotations

import pytest

from datafilter.features.statistics import (
    EmptyCollectionError,
    count_elements,
    max_length,
    max_value,
    mean_value,
    min_length,
    min_value,
    sum_values,
)


def test_count_elements() -> None:
    assert count_elements([]) == 0
    assert count_elements([1, 1, 1]) == 3
    assert count_elements(["", "a"]) == 2


def test_sum_values_converts_to_float() -> None:
    total = sum_values([1, 2, 3])
    assert total == 6.0
    assert isinstance(total, float)
    assert sum_values([]) == 0.0


def test_sum_values_adds_in_insertion_order() -> None:
    """Plain left-to-right addition, no compensation."""
    values = [1e16, 1.0, -1e16]
    assert sum_values(values) == (1e16 + 1.0) + -1e16
    assert sum_values(values) == 0.0


@pytest.mark.parametrize(
    "values",
    [[1.0, 2.0], [5], [-3, 4, 10], [0.1, 0.2, 0.3]],
)
def test_mean_is_sum_over_count(values: list[float]) -> None:
    assert mean_value(values) == sum_values(values) / count_elements(values)


def test_min_max_single_element() -> None:
    assert min_value([7]) == 7.0
    assert max_value([7]) == 7.0


def test_min_max_all_negative() -> None:
    """No sentinel leaks through when every value is negative."""
    values = [-5, -2, -9]
    assert min_value(values) == -9.0
    assert max_value(values) == -2.0


def test_min_max_mixed_floats() -> None:
    values = [2.5, -0.5, 10.25, 0.0]
    assert min_value(values) == -0.5
    assert max_value(values) == 10.25


def test_string_lengths() -> None:
    values = ["hello", "", "abc", "longest line"]
    assert min_length(values) == 0
    assert max_length(values) == 12


def test_string_lengths_count_code_points() -> None:
    assert max_length(["héllo", "日本"]) == 5
    assert min_length(["héllo", "日本"]) == 2


@pytest.mark.parametrize(
    "operation",
    [mean_value, min_value, max_value, min_length, max_length],
)
def test_empty_collection_is_rejected(operation) -> None:
    with pytest.raises(EmptyCollectionError):
        _ = operation([])


def test_empty_collection_error_is_value_error() -> None:
    assert issubclass(EmptyCollectionError, ValueError)
