import pytest
from hypothesis import given
from hypothesis import strategies as st

from analgo.maxmin import max_min_iterative, max_min_recursive


@pytest.mark.parametrize("finder", [max_min_recursive, max_min_iterative])
def test_empty_raises(finder):
    with pytest.raises(ValueError):
        finder([])


@pytest.mark.parametrize("finder", [max_min_recursive, max_min_iterative])
def test_single_element(finder):
    assert finder([42]) == (42, 42)


@pytest.mark.parametrize("finder", [max_min_recursive, max_min_iterative])
def test_two_elements_either_order(finder):
    assert finder([3, 9]) == (9, 3)
    assert finder([9, 3]) == (9, 3)


@given(st.lists(st.integers(), min_size=1))
def test_recursive_matches_builtins(data):
    assert max_min_recursive(data) == (max(data), min(data))


@given(st.lists(st.integers(), min_size=1))
def test_both_agree(data):
    assert max_min_recursive(data) == max_min_iterative(data)


def test_iterative_accepts_generator():
    assert max_min_iterative(x * x for x in range(-3, 3)) == (9, 0)