"""Length of the longest contiguous subarray summing to k."""

from __future__ import annotations

from collections.abc import Iterable


def longest_subarray_brute_force(nums: Iterable[int], k: int) -> int:
    """Check subarrays of two or more elements; assumes positive values.

    Each scan stops once the running sum reaches k, so single elements are
    never counted.
    """
    values = list(nums)
    best = 0
    for i, first in enumerate(values):
        total = first
        for length, value in enumerate(values[i + 1 :], start=2):
            total += value
            if total == k and length > best:
                best = length
            elif total >= k:
                break
    return best


def longest_subarray_prefix(nums: Iterable[int], k: int) -> int:
    """Prefix sums with first positions; works for any integers."""
    first_seen: dict[int, int] = {}
    total = 0
    best = 0
    for index, value in enumerate(nums):
        total += value
        if total == k:
            best = index + 1
        earlier = first_seen.get(total - k)
        if earlier is not None:
            best = max(best, index - earlier)
        first_seen.setdefault(total, index)
    return best


def longest_subarray_window(nums: Iterable[int], k: int) -> int:
    """Sliding window for non-negative values.

    The answer is never below 1, even when no subarray sums to k.
    """
    values = list(nums)
    if not values:
        raise ValueError("nums must not be empty")
    start = 0
    total = 0
    best = 1
    for end, value in enumerate(values):
        total += value
        while total > k and start < end:
            total -= values[start]
            start += 1
        if total == k:
            best = max(best, end - start + 1)
    return best