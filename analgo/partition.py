"""Splitting a row of books or boards into contiguous parts with the smallest maximum load."""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence


def is_possible(pages: Iterable[int], students: int, limit: int) -> bool:
    """Tell whether the books fit among *students* readers with at most *limit* pages each."""
    required = 1
    current = 0
    for count in pages:
        if count > limit:
            return False
        if current + count > limit:
            required += 1
            current = count
            if required > students:
                return False
        else:
            current += count
    return True


def _validate(pages: Sequence[int], students: int) -> None:
    if students < 1:
        raise ValueError("there must be at least one student")
    if len(pages) < students:
        raise ValueError("fewer books than students")


def find_pages(pages: Iterable[int], students: int) -> int:
    """Return the smallest possible maximum of pages any one student reads (binary search)."""
    books = list(pages)
    _validate(books, students)
    start, end = max(books), sum(books)
    result = end
    while start <= end:
        middle = (start + end) // 2
        if is_possible(books, students, middle):
            result = middle
            end = middle - 1
        else:
            start = middle + 1
    return result


def find_pages_brute(pages: Iterable[int], students: int) -> int:
    """Return the same minimum as find_pages by trying every split."""
    books = list(pages)
    _validate(books, students)
    total = len(books)
    best: int | None = None

    def explore(index: int, left: int, worst: int) -> None:
        nonlocal best
        if left == 1:
            worst = max(worst, sum(books[index:]))
            if best is None or worst < best:
                best = worst
            return
        running = 0
        for split in range(index, total - left + 1):
            running += books[split]
            explore(split + 1, left - 1, max(worst, running))

    explore(0, students, 0)
    assert best is not None
    return best


def painters_needed(boards: Iterable[int], limit: int) -> int:
    """Return how many painters are needed when none may work more than *limit*."""
    total = 0
    painters = 1
    for length in boards:
        total += length
        if total > limit:
            total = length
            painters += 1
    return painters


def painters_partition(boards: Iterable[int], painters: int) -> int:
    """Return the least time in which *painters* can paint all boards, each a contiguous run."""
    lengths = list(boards)
    if not lengths:
        raise ValueError("no boards to paint")
    if painters < 1:
        raise ValueError("there must be at least one painter")
    low, high = max(lengths), sum(lengths)
    while low < high:
        middle = low + (high - low) // 2
        if painters_needed(lengths, middle) <= painters:
            high = middle
        else:
            low = middle + 1
    return low


def random_books(count: int, rng: random.Random | None = None) -> list[int]:
    """Return *count* random page counts between 10 and 109."""
    if count < 0:
        raise ValueError("count must not be negative")
    rng = rng if rng is not None else random.Random()
    return [rng.randint(10, 109) for _ in range(count)]