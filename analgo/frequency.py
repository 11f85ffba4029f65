"""Counting how often each value occurs in a sorted sequence."""

from __future__ import annotations

import itertools
from collections.abc import Hashable, Iterable
from typing import TypeVar

T = TypeVar("T", bound=Hashable)


def frequencies_divide(values: Iterable[T]) -> dict[T, int]:
    """Count occurrences in the sorted *values* by splitting ranges in half.

    A range whose first and last elements are equal is counted at once, so
    long runs are never walked element by element. The result is ordered by
    value. The input must be sorted.
    """
    items = list(values)
    counts: dict[T, int] = {}
    if not items:
        return counts

    def count(low: int, high: int) -> None:
        if items[low] == items[high]:
            counts[items[low]] = counts.get(items[low], 0) + high - low + 1
            return
        middle = (low + high) // 2
        count(low, middle)
        count(middle + 1, high)

    count(0, len(items) - 1)
    return dict(sorted(counts.items()))


def frequencies_linear(values: Iterable[T]) -> list[tuple[T, int]]:
    """Return ``(value, run_length)`` for each run of equal neighbours, in order."""
    return [(value, sum(1 for _ in run)) for value, run in itertools.groupby(values)]