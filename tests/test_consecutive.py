import random

from hypothesis import given
from hypothesis import strategies as st

from arraycraft.consecutive import longest_consecutive_set, longest_consecutive_sorted


def test_empty_input_gives_zero():
    assert longest_consecutive_sorted([]) == 0
    assert longest_consecutive_set([]) == 0


def test_worked_example():
    assert longest_consecutive_sorted([100, 4, 200, 1, 3, 2]) == 4
    assert longest_consecutive_set([100, 4, 200, 1, 3, 2]) == 4


def test_single_value():
    assert longest_consecutive_sorted([7]) == 1
    assert longest_consecutive_set([7]) == 1


@given(
    start=st.integers(-50, 50),
    length=st.integers(1, 20),
    seed=st.integers(0, 1000),
)
def test_shuffled_run_with_duplicates(start, length, seed):
    values = list(range(start, start + length)) * 2
    random.Random(seed).shuffle(values)
    assert longest_consecutive_sorted(values) == length
    assert longest_consecutive_set(values) == length


@given(st.lists(st.integers(-30, 30), max_size=40))
def test_approaches_agree(nums):
    assert longest_consecutive_sorted(nums) == longest_consecutive_set(nums)


@given(st.lists(st.integers(-30, 30), min_size=1, max_size=40))
def test_bounded_by_distinct_count(nums):
    result = longest_consecutive_set(nums)
    assert 1 <= result <= len(set(nums))


@given(st.lists(st.integers(-30, 30), max_size=30))
def test_input_not_modified(nums):
    original = list(nums)
    longest_consecutive_sorted(nums)
    assert nums == original