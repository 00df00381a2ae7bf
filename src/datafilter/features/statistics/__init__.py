"""Aggregate statistics over classified collections."""

from .domain.statistics import (
    EmptyCollectionError,
    count_elements,
    max_length,
    max_value,
    mean_value,
    min_length,
    min_value,
    sum_values,
)

__all__ = [
    "EmptyCollectionError",
    "count_elements",
    "max_length",
    "max_value",
    "mean_value",
    "min_length",
    "min_value",
    "sum_values",
]
