"""0/1 knapsack by dynamic programming and fractional knapsack by a greedy choice."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .sorting import sort_with


@dataclass(frozen=True)
class Item:
    """An object that can be packed."""

    profit: int
    weight: int

    @property
    def ratio(self) -> float:
        return self.profit / self.weight


@dataclass(frozen=True)
class KnapsackResult:
    """Best total value, the items considered and how much of each was taken."""

    value: float
    items: tuple[Item, ...]
    selection: tuple[float, ...]


def knapsack_01(
    capacity: int, weights: Sequence[int], values: Sequence[int]
) -> KnapsackResult:
    """Pack whole items to maximise value without exceeding *capacity*."""
    if len(weights) != len(values):
        raise ValueError("weights and values differ in length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")

    table: list[list[int]] = []
    previous = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        row = [
            previous[room]
            if weight > room
            else max(value + previous[room - weight], previous[room])
            for room in range(capacity + 1)
        ]
        table.append(row)
        previous = row

    selection = [0] * len(weights)
    remaining = capacity
    for i in reversed(range(len(weights))):
        if i == 0 or table[i][remaining] != table[i - 1][remaining]:
            if remaining >= weights[i]:
                selection[i] = 1
                remaining -= weights[i]

    items = tuple(Item(value, weight) for weight, value in zip(weights, values))
    best = table[-1][capacity] if table else 0
    return KnapsackResult(best, items, tuple(selection))


def _by_ratio(first: Item, second: Item) -> int:
    if first.ratio > second.ratio:
        return -1
    if first.ratio < second.ratio:
        return 1
    return 0


def fractional_knapsack(capacity: float, items: Iterable[Item]) -> KnapsackResult:
    """Fill *capacity* taking items by best profit per weight, the last one possibly in part.

    The result lists the items in the order they were considered.
    """
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    candidates = list(items)
    if any(item.weight <= 0 for item in candidates):
        raise ValueError("weights must be positive")
    ordered = sort_with(candidates, _by_ratio)
    selection = [0.0] * len(ordered)
    total = 0.0
    remaining = capacity
    for index, item in enumerate(ordered):
        if item.weight <= remaining:
            selection[index] = 1.0
            remaining -= item.weight
            total += item.profit
        else:
            fraction = remaining / item.weight
            selection[index] = fraction
            total += item.profit * fraction
            break
    return KnapsackResult(total, tuple(ordered), tuple(selection))