import pytest
from hypothesis import given
from hypothesis import strategies as st

from arraycraft.intervals import merge_intervals, merge_intervals_brute_force

interval = st.tuples(st.integers(0, 30), st.integers(0, 10)).map(
    lambda pair: (pair[0], pair[0] + pair[1])
)
interval_lists = st.lists(interval, max_size=15)


def test_example():
    data = [[1, 3], [2, 6], [8, 10], [15, 18]]
    expected = [[1, 6], [8, 10], [15, 18]]
    assert merge_intervals(data) == expected
    assert merge_intervals_brute_force(data) == expected


def test_touching_intervals_merge():
    assert merge_intervals([(4, 5), (1, 4)]) == [[1, 5]]
    assert merge_intervals_brute_force([(4, 5), (1, 4)]) == [[1, 5]]


def test_empty():
    assert merge_intervals([]) == []
    assert merge_intervals_brute_force([]) == []


def test_malformed_interval_raises():
    with pytest.raises(ValueError):
        merge_intervals([[1, 2, 3]])
    with pytest.raises(ValueError):
        merge_intervals_brute_force([[1, 2, 3]])


def test_input_untouched():
    data = [[5, 7], [1, 6]]
    merge_intervals(data)
    merge_intervals_brute_force(data)
    assert data == [[5, 7], [1, 6]]


@given(interval_lists)
def test_approaches_agree(intervals):
    assert merge_intervals(intervals) == merge_intervals_brute_force(intervals)


@given(interval_lists)
def test_merged_intervals_are_disjoint_and_cover_input(intervals):
    merged = merge_intervals(intervals)
    for (_, prev_end), (next_start, _) in zip(merged, merged[1:]):
        assert prev_end < next_start
    for start, end in intervals:
        assert any(low <= start and end <= high for low, high in merged)
    starts = {start for start, _ in intervals}
    ends = {end for _, end in intervals}
    for low, high in merged:
        assert low in starts
        assert high in ends