import pytest
from hypothesis import given
from hypothesis import strategies as st

from arraycraft.longest_subarray import (
    longest_subarray_brute_force,
    longest_subarray_prefix,
    longest_subarray_window,
)


def _window_sums(nums, length):
    return [sum(nums[i : i + length]) for i in range(len(nums) - length + 1)]


@given(st.lists(st.integers(-10, 10), max_size=25), st.integers(-15, 15))
def test_prefix_is_longest(nums, k):
    result = longest_subarray_prefix(nums, k)
    if result:
        assert k in _window_sums(nums, result)
    for length in range(result + 1, len(nums) + 1):
        assert k not in _window_sums(nums, length)


def test_prefix_empty():
    assert longest_subarray_prefix([], 5) == 0


@given(st.lists(st.integers(1, 10), min_size=1, max_size=25), st.integers(1, 30))
def test_brute_force_matches_prefix_beyond_single_elements(nums, k):
    expected = longest_subarray_prefix(nums, k)
    assert longest_subarray_brute_force(nums, k) == (expected if expected >= 2 else 0)


def test_brute_force_ignores_single_element():
    assert longest_subarray_brute_force([7], 7) == 0


@given(st.lists(st.integers(0, 10), min_size=1, max_size=25), st.integers(0, 30))
def test_window_matches_prefix_for_non_negative(nums, k):
    assert longest_subarray_window(nums, k) == max(1, longest_subarray_prefix(nums, k))


def test_window_floor_is_one():
    assert longest_subarray_window([5], 1) == 1


def test_window_empty_raises():
    with pytest.raises(ValueError):
        longest_subarray_window([], 3)