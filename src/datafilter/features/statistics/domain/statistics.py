"""Pure aggregate functions over one numeric or text collection.

Numeric results are floats: every element is converted before it is compared
or added, so integer and float collections are reported the same way.
"""

from __future__ import annotations

from collections.abc import Sequence, Sized


class EmptyCollectionError(ValueError):
    """Raised when an aggregate that needs at least one element gets none."""


def _require_elements(collection: Sized, operation: str) -> None:
    if len(collection) == 0:
        raise EmptyCollectionError(f"Cannot compute {operation} of an empty collection")


def count_elements(collection: Sized) -> int:
    """Return the number of elements in ``collection``."""
    return len(collection)


def sum_values(collection: Sequence[int | float]) -> float:
    """Sum the elements as floats, left to right.

    Plain sequential addition keeps the rounding reproducible for a given
    insertion order; ``math.fsum`` and the builtin ``sum`` both compensate.
    """
    result = 0.0
    for element in collection:
        result += float(element)
    return result


def mean_value(collection: Sequence[int | float]) -> float:
    """Return ``sum_values(collection) / count_elements(collection)``.

    Raises:
        EmptyCollectionError: If ``collection`` is empty.
    """
    _require_elements(collection, "the mean")
    return sum_values(collection) / count_elements(collection)


def min_value(collection: Sequence[int | float]) -> float:
    """Return the smallest element as a float.

    Raises:
        EmptyCollectionError: If ``collection`` is empty.
    """
    _require_elements(collection, "the minimum")
    result = float(collection[0])
    for element in collection[1:]:
        if float(element) < result:
            result = float(element)
    return result


def max_value(collection: Sequence[int | float]) -> float:
    """Return the largest element as a float.

    Raises:
        EmptyCollectionError: If ``collection`` is empty.
    """
    _require_elements(collection, "the maximum")
    result = float(collection[0])
    for element in collection[1:]:
        if float(element) > result:
            result = float(element)
    return result


def min_length(collection: Sequence[str]) -> int:
    """Return the length of the shortest string.

    Raises:
        EmptyCollectionError: If ``collection`` is empty.
    """
    _require_elements(collection, "the shortest length")
    return min(len(element) for element in collection)


def max_length(collection: Sequence[str]) -> int:
    """Return the length of the longest string.

    Raises:
        EmptyCollectionError: If ``collection`` is empty.
    """
    _require_elements(collection, "the longest length")
    return max(len(element) for element in collection)


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
