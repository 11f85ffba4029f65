import pytest
from hypothesis import given
from hypothesis import strategies as st

from analgo.chocolate import DEFAULT_CUTS, min_cuts, plan_cuts, possible_cuts


def _used_length(plan):
    return sum(cut * count for cut, count in plan.counts.items())


def test_possible_cuts_single_size():
    assert possible_cuts([4], 8, 2) is True
    assert possible_cuts([4], 8, 3) is False


def test_plan_even_bar():
    plan = plan_cuts(DEFAULT_CUTS, 24, 2)
    assert plan is not None
    assert plan.leftover == 0
    assert sum(plan.counts.values()) == 2
    assert _used_length(plan) == 24
    assert set(plan.counts) == set(DEFAULT_CUTS)


def test_plan_odd_bar_leaves_three():
    plan = plan_cuts(DEFAULT_CUTS, 27, 3)
    assert plan is not None
    assert plan.leftover == 3
    assert _used_length(plan) == 24
    assert sum(plan.counts.values()) == 3


def test_plan_impossible():
    assert plan_cuts(DEFAULT_CUTS, 24, 1) is None
    assert plan_cuts(DEFAULT_CUTS, 24, 7) is None


def test_plan_rejects_short_bar_and_bad_demand():
    with pytest.raises(ValueError):
        plan_cuts(DEFAULT_CUTS, 2, 1)
    with pytest.raises(ValueError):
        plan_cuts(DEFAULT_CUTS, 10, 0)


def test_nonpositive_cut_rejected():
    with pytest.raises(ValueError):
        possible_cuts([4, 0], 8, 2)


def test_min_cuts_exact():
    plan = min_cuts(DEFAULT_CUTS, 24)
    assert plan is not None
    assert plan.demand == 2
    assert _used_length(plan) == 24


def test_min_cuts_impossible_and_zero():
    assert min_cuts((4, 6), 5) is None
    zero = min_cuts(DEFAULT_CUTS, 0)
    assert zero is not None
    assert zero.demand == 0


def test_min_cuts_negative_length():
    with pytest.raises(ValueError):
        min_cuts(DEFAULT_CUTS, -1)


@given(st.integers(3, 80), st.integers(1, 12))
def test_plan_uses_whole_usable_length(length, demand):
    plan = plan_cuts(DEFAULT_CUTS, length, demand)
    if plan is None:
        assert not possible_cuts(DEFAULT_CUTS, length - (length % 2) * 3, demand)
    else:
        assert _used_length(plan) + plan.leftover == length
        assert sum(plan.counts.values()) == demand


@given(st.integers(0, 80))
def test_min_cuts_is_no_more_than_any_feasible_demand(length):
    best = min_cuts(DEFAULT_CUTS, length)
    feasible = [d for d in range(0, 21) if possible_cuts(DEFAULT_CUTS, length, d)]
    if best is None:
        assert feasible == []
    else:
        assert _used_length(best) == length
        assert best.demand in feasible
        assert best.demand == min(feasible)