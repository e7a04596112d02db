"""Maximum product and maximum sum over contiguous subarrays."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class MaxSubarray:
    """Best subarray sum with its inclusive start and end indices."""

    total: int
    start: int
    end: int


def _non_empty(nums: Iterable[int]) -> list[int]:
    values = list(nums)
    if not values:
        raise ValueError("nums must not be empty")
    return values


def max_product_brute_force(nums: Iterable[int]) -> int:
    """Largest product of any subarray, trying every start and end."""
    values = _non_empty(nums)
    best = values[0]
    for start in range(len(values)):
        product = 1
        for value in values[start:]:
            product *= value
            best = max(best, product)
    return best


def max_product(nums: Iterable[int]) -> int:
    """Largest product of any subarray from running prefix and suffix products.

    A zero ends a run; the next product starts afresh after it.
    """
    values = _non_empty(nums)
    best = values[0]
    prefix = suffix = 1
    for front, back in zip(values, reversed(values)):
        if prefix == 0:
            prefix = 1
        if suffix == 0:
            suffix = 1
        prefix *= front
        suffix *= back
        best = max(best, prefix, suffix)
    return best


def max_subarray(nums: Iterable[int]) -> MaxSubarray:
    """Kadane's algorithm: the largest sum and the earliest subarray reaching it."""
    values = _non_empty(nums)
    best: MaxSubarray | None = None
    total = 0
    current_start = 0
    for index, value in enumerate(values):
        total += value
        if best is None or total > best.total:
            best = MaxSubarray(total, current_start, index)
        if total < 0:
            total = 0
            current_start = index + 1
    assert best is not None
    return best