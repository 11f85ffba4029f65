"""Cutting a chocolate bar into pieces of the allowed lengths."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

DEFAULT_CUTS = (12, 10, 8, 6, 4)
ODD_LEFTOVER = 3


@dataclass
class CutPlan:
    """How a bar is cut: number of pieces, pieces of each length and what is left."""

    length: int
    demand: int
    counts: dict[int, int] = field(default_factory=dict)
    leftover: int = 0


def _check_cuts(cuts: Sequence[int]) -> None:
    if any(cut <= 0 for cut in cuts):
        raise ValueError("cut lengths must be positive")


def _search(cuts: Sequence[int], length: int, demand: int) -> tuple[int, ...] | None:
    """Return the pieces that use up *length* in exactly *demand* cuts, or None."""
    failed: set[tuple[int, int, int]] = set()

    def solve(remaining: int, wanted: int, index: int) -> tuple[int, ...] | None:
        if remaining == 0 and wanted == 0:
            return ()
        if remaining < 0 or wanted < 0 or index >= len(cuts):
            return None
        state = (remaining, wanted, index)
        if state in failed:
            return None
        taken = solve(remaining - cuts[index], wanted - 1, index)
        if taken is not None:
            return (cuts[index],) + taken
        skipped = solve(remaining, wanted, index + 1)
        if skipped is None:
            failed.add(state)
        return skipped

    return solve(length, demand, 0)


def _tally(cuts: Sequence[int], pieces: Sequence[int]) -> dict[int, int]:
    counts = dict.fromkeys(cuts, 0)
    for piece in pieces:
        counts[piece] += 1
    return counts


def possible_cuts(cuts: Sequence[int], length: int, demand: int) -> bool:
    """Tell whether *length* splits into exactly *demand* pieces of the allowed lengths."""
    _check_cuts(cuts)
    return _search(cuts, length, demand) is not None


def plan_cuts(cuts: Sequence[int], length: int, demand: int) -> CutPlan | None:
    """Plan *demand* pieces from a bar of *length*; an odd bar first loses 3 units.

    Returns None when no such plan exists.
    """
    _check_cuts(cuts)
    if length <= 2:
        raise ValueError("the bar must be longer than 2")
    if demand <= 0:
        raise ValueError("the demand must be positive")
    leftover = ODD_LEFTOVER if length % 2 else 0
    pieces = _search(cuts, length - leftover, demand)
    if pieces is None:
        return None
    return CutPlan(length, demand, _tally(cuts, pieces), leftover)


def min_cuts(cuts: Sequence[int], length: int) -> CutPlan | None:
    """Cut *length* exactly into as few pieces as possible, or return None if it cannot be done."""
    _check_cuts(cuts)
    if length < 0:
        raise ValueError("length must not be negative")
    best: list[tuple[int, ...] | None] = [()] + [None] * length
    for total in range(1, length + 1):
        for cut in cuts:
            if cut > total:
                continue
            previous = best[total - cut]
            if previous is None:
                continue
            current = best[total]
            if current is None or len(previous) + 1 < len(current):
                best[total] = previous + (cut,)
    pieces = best[length]
    if pieces is None:
        return None
    return CutPlan(length, len(pieces), _tally(cuts, pieces), 0)