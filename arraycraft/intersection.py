"""Set and multiset intersection of two integer sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def intersection_sorted(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """Distinct common values in ascending order, found with two pointers."""
    first, second = sorted(nums1), sorted(nums2)
    result: list[int] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] == second[j]:
            if not result or result[-1] != first[i]:
                result.append(first[i])
            i += 1
            j += 1
        elif first[i] > second[j]:
            j += 1
        else:
            i += 1
    return result


def intersection_hashed(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """Distinct common values, in the order they appear in the longer input."""
    if len(nums1) > len(nums2):
        nums1, nums2 = nums2, nums1
    remaining = set(nums1)
    result: list[int] = []
    for value in nums2:
        if value in remaining:
            remaining.discard(value)
            result.append(value)
    return result


def multiset_intersection_sorted(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """Common values with multiplicity, in ascending order."""
    first, second = sorted(nums1), sorted(nums2)
    result: list[int] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] == second[j]:
            result.append(first[i])
            i += 1
            j += 1
        elif first[i] > second[j]:
            j += 1
        else:
            i += 1
    return result


def multiset_intersection_hashed(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """Common values with multiplicity, in the order of the longer input."""
    if len(nums1) > len(nums2):
        nums1, nums2 = nums2, nums1
    counts = Counter(nums1)
    result: list[int] = []
    for value in nums2:
        if counts[value] >= 1:
            result.append(value)
            counts[value] -= 1
    return result