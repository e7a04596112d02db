from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from arraycraft.k_sum import four_sum, four_sum_hashed, three_sum, three_sum_hashed

small_lists = st.lists(st.integers(min_value=-8, max_value=8), max_size=14)


def test_three_sum_worked_example():
    nums = [-1, 0, 1, 2, -1, -4]
    expected = [[-1, -1, 2], [-1, 0, 1]]
    assert three_sum(nums) == expected
    assert three_sum_hashed(nums) == expected


def test_four_sum_worked_example():
    nums = [1, 0, -1, 0, -2, 2]
    expected = [[-2, -1, 1, 2], [-2, 0, 0, 2], [-1, 0, 0, 1]]
    assert four_sum(nums, 0) == expected
    assert four_sum_hashed(nums, 0) == expected


@pytest.mark.parametrize("nums", [[], [1], [1, 2, 3]])
def test_four_sum_short_input_is_empty(nums):
    assert four_sum(nums, 6) == []
    assert four_sum_hashed(nums, 6) == []


def test_three_sum_input_not_modified():
    nums = [3, -1, -2, 0, 1]
    three_sum(nums)
    four_sum(nums, 0)
    assert nums == [3, -1, -2, 0, 1]


@given(small_lists)
def test_three_sum_methods_agree(values):
    assert three_sum(values) == three_sum_hashed(values)


@given(small_lists, st.integers(min_value=-10, max_value=10))
def test_four_sum_methods_agree(values, target):
    assert four_sum(values, target) == four_sum_hashed(values, target)


def _is_sub_multiset(part, whole):
    available = Counter(whole)
    return all(available[value] >= count for value, count in Counter(part).items())


@given(small_lists)
def test_three_sum_results_are_valid(values):
    result = three_sum(values)
    assert len({tuple(t) for t in result}) == len(result)
    for triplet in result:
        assert sum(triplet) == 0
        assert triplet == sorted(triplet)
        assert _is_sub_multiset(triplet, values)


@given(small_lists, st.integers(min_value=-10, max_value=10))
def test_four_sum_results_are_valid(values, target):
    result = four_sum(values, target)
    assert result == sorted(result)
    assert len({tuple(q) for q in result}) == len(result)
    for quadruplet in result:
        assert sum(quadruplet) == target
        assert quadruplet == sorted(quadruplet)
        assert _is_sub_multiset(quadruplet, values)


@given(small_lists)
def test_three_sum_ignores_input_order(values):
    assert three_sum(values) == three_sum(list(reversed(values)))