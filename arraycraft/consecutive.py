"""Length of the longest run of consecutive integers in an unordered sequence."""

from __future__ import annotations

from collections.abc import Iterable


def longest_consecutive_sorted(nums: Iterable[int]) -> int:
    """Sort a copy and count runs of values that each exceed the last by one.

    Repeated values neither extend nor break a run.
    """
    values = sorted(nums)
    if not values:
        return 0
    best = length = 1
    for previous, current in zip(values, values[1:]):
        if previous == current:
            continue
        if previous + 1 == current:
            length += 1
        else:
            best = max(best, length)
            length = 1
    return max(best, length)


def longest_consecutive_set(nums: Iterable[int]) -> int:
    """Walk forward only from values that start a run, using a set for lookups."""
    present = set(nums)
    best = 0
    for value in present:
        if value - 1 in present:
            continue
        end = value
        while end + 1 in present:
            end += 1
        best = max(best, end - value + 1)
    return best