"""Rearranging sequences by sign and sorting three-valued sequences."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence


def _split_by_sign(values: Iterable[int]) -> tuple[list[int], list[int]]:
    positives: list[int] = []
    negatives: list[int] = []
    for value in values:
        (negatives if value < 0 else positives).append(value)
    return positives, negatives


def rearrange_by_sign(nums: Iterable[int]) -> list[int]:
    """Alternate non-negative and negative values, starting with a non-negative one.

    The relative order within each sign is kept. Inputs shorter than two
    elements give an empty list; otherwise both signs must be equally many.
    """
    values = list(nums)
    if len(values) < 2:
        return []
    positives, negatives = _split_by_sign(values)
    if len(positives) != len(negatives):
        raise ValueError("nums must hold as many negative as non-negative values")
    return [value for pair in zip(positives, negatives) for value in pair]


def rearrange_by_sign_uneven(nums: Iterable[int]) -> list[int]:
    """Alternate signs while both last, then append whatever sign is left over."""
    positives, negatives = _split_by_sign(nums)
    paired = min(len(positives), len(negatives))
    result = [value for pair in zip(positives, negatives) for value in pair]
    result.extend(positives[paired:])
    result.extend(negatives[paired:])
    return result


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort 0s, 1s and 2s in place with the Dutch national flag scheme.

    Any value other than 0 or 1 is handled as a 2.
    """
    low = mid = 0
    high = len(nums) - 1
    while mid <= high:
        value = nums[mid]
        if value == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif value == 1:
            mid += 1
        else:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1