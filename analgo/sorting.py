"""Comparison sorts, plus helpers that build, load and store their inputs."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path
from typing import Any, TypeVar

T = TypeVar("T")

DEFAULT_INPUT_FILE = "numeros10millones.txt"


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Return a sorted copy of *values* using bubble sort."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def _sift_down(items: list[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[T]) -> list[T]:
    """Return a sorted copy of *values* using an in-place max-heap."""
    items = list(values)
    size = len(items)
    for parent in range(size // 2 - 1, -1, -1):
        _sift_down(items, size, parent)
    for last in range(size - 1, 0, -1):
        items[0], items[last] = items[last], items[0]
        _sift_down(items, last, 0)
    return items


def selection_sort(values: Iterable[T]) -> list[T]:
    """Return a sorted copy of *values* using selection sort."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[T]) -> list[T]:
    """Return a sorted copy of *values* using stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    split = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:split]), merge_sort(items[split:]))


def _random_pivot_partition(items: list[Any], low: int, high: int, rng: random.Random) -> int:
    chosen = rng.randint(low, high)
    items[low], items[chosen] = items[chosen], items[low]
    pivot = items[low]
    down, up = low, high
    while down < up:
        while items[down] <= pivot and down < high:
            down += 1
        while items[up] > pivot:
            up -= 1
        if down < up:
            items[down], items[up] = items[up], items[down]
    items[low] = items[up]
    items[up] = pivot
    return up


def quick_sort(values: Iterable[T], rng: random.Random | None = None) -> list[T]:
    """Return a sorted copy of *values* using quicksort with a random pivot."""
    rng = rng if rng is not None else random.Random()
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        split = _random_pivot_partition(items, low, high, rng)
        pending.append((low, split - 1))
        pending.append((split + 1, high))
    return items


def sort_with(items: Iterable[T], compare: Callable[[T, T], int]) -> list[T]:
    """Return *items* ordered by *compare* (negative, zero or positive result).

    Uses quicksort with the last element of each range as pivot.
    """
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = result[high]
        boundary = low - 1
        for j in range(low, high):
            if compare(result[j], pivot) < 0:
                boundary += 1
                result[boundary], result[j] = result[j], result[boundary]
        split = boundary + 1
        result[split], result[high] = result[high], result[split]
        pending.append((low, split - 1))
        pending.append((split + 1, high))
    return result


def ascending(count: int) -> list[int]:
    """Return the numbers 1..count in increasing order (best case input)."""
    return list(range(1, count + 1))


def descending(count: int) -> list[int]:
    """Return the numbers count..1 in decreasing order (worst case input)."""
    return list(range(count, 0, -1))


def read_numbers(path: str | Path = DEFAULT_INPUT_FILE, count: int | None = None) -> list[int]:
    """Read whitespace-separated integers from *path*.

    With *count* given, exactly that many numbers are returned; a file holding
    fewer raises ValueError.
    """
    with open(path, encoding="utf-8") as handle:
        tokens = handle.read().split()
    if count is not None:
        if count < 0:
            raise ValueError("count must not be negative")
        if len(tokens) < count:
            raise ValueError(f"{path} holds {len(tokens)} numbers, {count} requested")
        tokens = tokens[:count]
    return [int(token) for token in tokens]


def write_numbers(values: Sequence[int], path: str | Path | None = None) -> Path:
    """Write *values* one per line, by default to ``sorted<n>.txt``; return the path."""
    target = Path(path) if path is not None else Path(f"sorted{len(values)}.txt")
    with open(target, "w", encoding="utf-8") as handle:
        handle.writelines(f"{value}\n" for value in values)
    return target