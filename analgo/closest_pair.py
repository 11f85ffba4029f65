"""Smallest distance between two points of a set in the plane."""

from __future__ import annotations

import math
import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point with integer coordinates."""

    x: int
    y: int


def distance(p: Point, q: Point) -> float:
    """Return the Euclidean distance between *p* and *q*."""
    return math.hypot(p.x - q.x, p.y - q.y)


def brute_force(points: Sequence[Point]) -> float:
    """Return the smallest pairwise distance by checking every pair (inf for fewer than two)."""
    best = math.inf
    for i, p in enumerate(points):
        for q in points[i + 1 :]:
            best = min(best, distance(p, q))
    return best


def strip_closest(strip: Iterable[Point], d: float) -> float:
    """Return the smallest distance in *strip* if below *d*, otherwise *d*."""
    ordered = sorted(strip, key=lambda point: point.y)
    best = d
    for i, p in enumerate(ordered):
        for q in ordered[i + 1 :]:
            if q.y - p.y >= best:
                break
            best = min(best, distance(p, q))
    return best


def _closest(points: Sequence[Point]) -> float:
    if len(points) <= 3:
        return brute_force(points)
    middle = len(points) // 2
    pivot = points[middle]
    d = min(_closest(points[:middle]), _closest(points[middle:]))
    strip = [point for point in points if abs(point.x - pivot.x) < d]
    return min(d, strip_closest(strip, d))


def closest_distance(points: Iterable[Point]) -> float:
    """Return the smallest pairwise distance by divide and conquer (inf for fewer than two)."""
    return _closest(sorted(points, key=lambda point: point.x))


def random_points(count: int, rng: random.Random | None = None) -> list[Point]:
    """Return *count* random points with coordinates between 0 and 49."""
    if count < 0:
        raise ValueError("count must not be negative")
    rng = rng if rng is not None else random.Random()
    return [Point(rng.randrange(50), rng.randrange(50)) for _ in range(count)]