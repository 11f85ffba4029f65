"""Factorial, Fibonacci and Towers of Hanoi, each solved iteratively and recursively."""

from __future__ import annotations

Move = tuple[int, str, str]


def factorial_iterative(n: int) -> int:
    """Return n! by multiplying 1..n in a loop."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    result = 1
    for factor in range(1, n + 1):
        result *= factor
    return result


def factorial_recursive(n: int) -> int:
    """Return n! as n * (n - 1)!."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    if n <= 1:
        return 1
    return n * factorial_recursive(n - 1)


def fibonacci_iterative(n: int) -> int:
    """Return the n-th Fibonacci number (n >= 1) by walking the sequence."""
    if n < 1:
        raise ValueError("invalid number of terms")
    previous, current = 0, 1
    for _ in range(2, n + 1):
        previous, current = current, previous + current
    return current


def fibonacci_recursive(n: int) -> int:
    """Return the n-th Fibonacci number with F(0) = 0 and F(1) = 1, by plain recursion."""
    if n < 0:
        raise ValueError("invalid number of terms")
    if n <= 1:
        return n
    return fibonacci_recursive(n - 1) + fibonacci_recursive(n - 2)


def hanoi_recursive(
    disks: int, source: str = "A", target: str = "C", spare: str = "B"
) -> list[Move]:
    """Return the moves ``(disk, from_peg, to_peg)`` that carry *disks* from *source* to *target*."""
    if disks < 0:
        raise ValueError("number of disks must not be negative")
    moves: list[Move] = []

    def solve(count: int, origin: str, destination: str, helper: str) -> None:
        if count == 0:
            return
        solve(count - 1, origin, helper, destination)
        moves.append((count, origin, destination))
        solve(count - 1, helper, destination, origin)

    solve(disks, source, target, spare)
    return moves


def _move_between(pegs: dict[str, list[int]], first: str, second: str) -> Move:
    """Make the one legal move between two pegs and return it."""
    one, two = pegs[first], pegs[second]
    if not one or (two and one[-1] > two[-1]):
        disk = two.pop()
        one.append(disk)
        return (disk, second, first)
    disk = one.pop()
    two.append(disk)
    return (disk, first, second)


def hanoi_iterative(disks: int) -> list[Move]:
    """Return the moves carrying *disks* from peg A to peg C, computed with three stacks."""
    if disks < 0:
        raise ValueError("number of disks must not be negative")
    source, target, spare = "A", "C", "B"
    if disks % 2 == 0:
        target, spare = spare, target
    pegs: dict[str, list[int]] = {
        "A": list(range(disks, 0, -1)),
        "B": [],
        "C": [],
    }
    cycle = ((source, target), (source, spare), (spare, target))
    return [
        _move_between(pegs, *cycle[step % 3]) for step in range(2**disks - 1)
    ]