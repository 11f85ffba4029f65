"""Integer square root (rounded down) by linear scan and by binary search."""

from __future__ import annotations


def _check(x: int) -> None:
    if x < 0:
        raise ValueError("square root of a negative number")


def isqrt_linear(x: int) -> int:
    """Return floor(sqrt(x)) by trying 1, 2, 3, ... until the square exceeds x."""
    _check(x)
    if x < 2:
        return x
    root = 1
    while root * root <= x:
        root += 1
    return root - 1


def isqrt_binary(x: int) -> int:
    """Return floor(sqrt(x)) by binary search over [1, x // 2]."""
    _check(x)
    if x < 2:
        return x
    start, end, answer = 1, x // 2, 0
    while start <= end:
        middle = (start + end) // 2
        square = middle * middle
        if square == x:
            return middle
        if square < x:
            start = middle + 1
            answer = middle
        else:
            end = middle - 1
    return answer


def _isqrt_between(x: int, start: int, end: int) -> int:
    if start > end:
        return end
    middle = (start + end) // 2
    square = middle * middle
    if square == x:
        return middle
    if square < x:
        return _isqrt_between(x, middle + 1, end)
    return _isqrt_between(x, start, middle - 1)


def isqrt_recursive(x: int) -> int:
    """Return floor(sqrt(x)) by recursive binary search over [1, x // 2]."""
    _check(x)
    if x < 2:
        return x
    return _isqrt_between(x, 1, x // 2)