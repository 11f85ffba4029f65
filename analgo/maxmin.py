"""Finding the largest and smallest element of a sequence."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def _extremes(values: Sequence[Any], low: int, high: int) -> tuple[Any, Any]:
    if low < high - 1:
        middle = (low + high) // 2
        left_max, left_min = _extremes(values, low, middle)
        right_max, right_min = _extremes(values, middle + 1, high)
        return (
            left_max if left_max > right_max else right_max,
            left_min if left_min < right_min else right_min,
        )
    if low == high - 1:
        if values[low] > values[high]:
            return values[low], values[high]
        return values[high], values[low]
    return values[low], values[low]


def max_min_recursive(values: Iterable[Any]) -> tuple[Any, Any]:
    """Return ``(maximum, minimum)`` by splitting the sequence in halves."""
    items = list(values)
    if not items:
        raise ValueError("no values to examine")
    return _extremes(items, 0, len(items) - 1)


def max_min_iterative(values: Iterable[Any]) -> tuple[Any, Any]:
    """Return ``(maximum, minimum)`` in a single pass."""
    iterator = iter(values)
    try:
        first = next(iterator)
    except StopIteration:
        raise ValueError("no values to examine") from None
    largest = smallest = first
    for value in iterator:
        if value > largest:
            largest = value
        if value < smallest:
            smallest = value
    return largest, smallest