import math
import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from analgo.closest_pair import (
    Point,
    brute_force,
    closest_distance,
    distance,
    random_points,
    strip_closest,
)

points_strategy = st.lists(
    st.builds(Point, st.integers(min_value=0, max_value=60), st.integers(min_value=0, max_value=60)),
    max_size=40,
)


def test_distance_of_three_four_five_triangle():
    assert distance(Point(0, 0), Point(3, 4)) == pytest.approx(5.0)


@given(points_strategy)
def test_divide_matches_brute_force(points):
    assert closest_distance(points) == pytest.approx(brute_force(points))


def test_fewer_than_two_points_is_infinite():
    assert closest_distance([]) == math.inf
    assert closest_distance([Point(1, 1)]) == math.inf


def test_duplicate_points_have_zero_distance():
    assert closest_distance([Point(5, 5), Point(9, 1), Point(5, 5), Point(0, 40)]) == 0


def test_strip_never_exceeds_bound():
    strip = [Point(0, 0), Point(0, 30)]
    assert strip_closest(strip, 2.5) == 2.5


@given(points_strategy)
def test_distance_symmetric_and_strip_consistent(points):
    for p, q in zip(points, points[1:]):
        assert distance(p, q) == distance(q, p)
    assert strip_closest(points, math.inf) == pytest.approx(brute_force(points))


def test_random_points_range_and_reproducible():
    first = random_points(25, random.Random(7))
    second = random_points(25, random.Random(7))
    assert first == second
    assert len(first) == 25
    assert all(0 <= p.x < 50 and 0 <= p.y < 50 for p in first)


def test_random_points_rejects_negative():
    with pytest.raises(ValueError):
        random_points(-1)