"""Count contiguous subarrays summing to k."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def subarray_sum_count(nums: Iterable[int], k: int) -> int:
    """Number of subarrays with sum ``k``, using counts of earlier prefix sums."""
    seen: Counter[int] = Counter({0: 1})
    prefix = 0
    count = 0
    for value in nums:
        prefix += value
        count += seen[prefix - k]
        seen[prefix] += 1
    return count