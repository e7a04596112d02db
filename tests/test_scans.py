import pytest
from hypothesis import given
from hypothesis import strategies as st

from arraycraft.scans import (
    leaders,
    max_consecutive_ones,
    max_profit,
    move_zeroes_copy,
    move_zeroes_in_place,
)

int_lists = st.lists(st.integers(-50, 50), min_size=1, max_size=30)


def test_max_profit_empty_raises():
    with pytest.raises(ValueError):
        max_profit([])


def test_max_profit_decreasing_prices_give_nothing():
    assert max_profit([9, 7, 5, 3, 1]) == 0


@given(int_lists)
def test_max_profit_is_best_pair(prices):
    profit = max_profit(prices)
    assert profit >= 0
    pairs = [
        later - earlier
        for i, earlier in enumerate(prices)
        for later in prices[i + 1 :]
    ]
    assert all(diff <= profit for diff in pairs)
    assert profit == 0 or profit in pairs


def test_leaders_empty():
    assert leaders([]) == []


@given(int_lists)
def test_leaders_invariants(arr):
    result = leaders(arr)
    assert result[0] == max(arr)
    assert result[-1] == arr[-1]
    assert all(a > b for a, b in zip(result, result[1:]))
    for value in result:
        position = len(arr) - 1 - arr[::-1].index(value)
        assert all(other < value for other in arr[position + 1 :])


@given(st.integers(0, 10), st.integers(0, 10))
def test_max_consecutive_ones_two_runs(first, second):
    nums = [1] * first + [0] + [1] * second
    assert max_consecutive_ones(nums) == max(first, second)


@given(st.lists(st.sampled_from([0, 1]), max_size=40))
def test_max_consecutive_ones_is_longest_run(nums):
    result = max_consecutive_ones(nums)
    text = "".join(map(str, nums))
    assert "1" * result in text
    assert "1" * (result + 1) not in text


@given(st.lists(st.integers(-5, 5), max_size=30))
def test_move_zeroes_in_place(nums):
    original = list(nums)
    assert move_zeroes_in_place(nums) is None
    non_zero = [value for value in original if value != 0]
    assert nums[: len(non_zero)] == non_zero
    assert nums[len(non_zero) :] == [0] * (len(original) - len(non_zero))


@given(st.lists(st.integers(-5, 5), max_size=30))
def test_move_zeroes_copy_matches_in_place(nums):
    original = list(nums)
    copied = move_zeroes_copy(nums)
    assert nums == original
    move_zeroes_in_place(nums)
    assert copied == nums