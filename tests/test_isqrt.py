import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from analgo.isqrt import isqrt_binary, isqrt_linear, isqrt_recursive


def test_small_values_match_standard_library():
    for x in range(200):
        expected = math.isqrt(x)
        assert isqrt_linear(x) == expected
        assert isqrt_binary(x) == expected
        assert isqrt_recursive(x) == expected


@given(st.integers(min_value=0, max_value=10**6))
def test_linear_matches_standard_library(x):
    assert isqrt_linear(x) == math.isqrt(x)


@given(st.integers(min_value=0, max_value=2**64 - 1))
def test_binary_versions_bracket_root(x):
    for func in (isqrt_binary, isqrt_recursive):
        root = func(x)
        assert root * root <= x < (root + 1) * (root + 1)


@given(st.integers(min_value=0, max_value=10**9))
def test_perfect_squares(root):
    square = root * root
    assert isqrt_binary(square) == root
    assert isqrt_recursive(square) == root


def test_negative_rejected():
    with pytest.raises(ValueError):
        isqrt_linear(-4)
    with pytest.raises(ValueError):
        isqrt_binary(-4)
    with pytest.raises(ValueError):
        isqrt_recursive(-4)