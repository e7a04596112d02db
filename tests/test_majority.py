from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from arraycraft.majority import majority_element_hashed, majority_element_moore


@st.composite
def with_majority(draw):
    majority = draw(st.integers(-20, 20))
    others = draw(st.lists(st.integers(-20, 20).filter(lambda v: v != majority), max_size=15))
    extra = draw(st.integers(1, 5))
    values = [majority] * (len(others) + extra) + others
    return majority, draw(st.permutations(values))


@given(with_majority())
def test_both_find_majority(case):
    majority, nums = case
    assert majority_element_hashed(nums) == majority
    assert majority_element_moore(nums) == majority


@given(st.lists(st.integers(-5, 5), min_size=1, max_size=30))
def test_hashed_returns_most_frequent(nums):
    counts = Counter(nums)
    assert counts[majority_element_hashed(nums)] == max(counts.values())


def test_hashed_tie_goes_to_first_to_reach_count():
    assert majority_element_hashed([1, 2, 2, 1]) == 2


@pytest.mark.parametrize("func", [majority_element_hashed, majority_element_moore])
def test_empty_raises(func):
    with pytest.raises(ValueError):
        func([])