"""Problems about repeated values: dedupe, the lone value, and set mismatch."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, MutableSequence, Sequence
from functools import reduce
from operator import xor


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Move the distinct values of a sorted sequence to its front.

    Returns how many distinct values there are; the order of what follows
    them is unspecified.
    """
    if not nums:
        return 0
    left = 0
    for right in range(1, len(nums)):
        if nums[left] != nums[right]:
            left += 1
            nums[left], nums[right] = nums[right], nums[left]
    return left + 1


def single_number(nums: Iterable[int]) -> int:
    """The one value not paired with another, by XOR of everything."""
    return reduce(xor, nums, 0)


def set_mismatch_counting(nums: Sequence[int]) -> tuple[int, int]:
    """``(repeating, missing)`` for values meant to be 1..n, found by counting.

    Either part is -1 when it cannot be found.
    """
    counts = Counter(nums)
    repeating = missing = -1
    for value in range(1, len(nums) + 1):
        count = counts[value]
        if count == 0:
            missing = value
        elif count > 1:
            repeating = value
        if repeating != -1 and missing != -1:
            break
    return repeating, missing


def set_mismatch_math(nums: Sequence[int]) -> tuple[int, int]:
    """``(repeating, missing)`` for values meant to be 1..n, from sums and squares."""
    n = len(nums)
    diff = n * (n + 1) // 2 - sum(nums)  # missing - repeating
    if diff == 0:
        raise ValueError("no repeating and missing pair in nums")
    square_diff = n * (n + 1) * (2 * n + 1) // 6 - sum(value * value for value in nums)
    total = square_diff // diff  # missing + repeating
    missing = (diff + total) // 2
    repeating = total - missing
    return repeating, missing