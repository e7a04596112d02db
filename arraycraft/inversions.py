"""Counting inversions and reverse pairs with brute force and merge sort."""

from __future__ import annotations

from collections.abc import Iterable
from heapq import merge

MODULUS = 10**9 + 7


def count_inversions_brute_force(nums: Iterable[int]) -> int:
    """Pairs ``i < j`` with ``nums[i] > nums[j]``, modulo ``MODULUS``, checked pairwise."""
    values = list(nums)
    count = 0
    for i, first in enumerate(values):
        for second in values[i + 1 :]:
            if second < first:
                count = (count + 1) % MODULUS
    return count


def _sort_and_count_inversions(values: list[int]) -> tuple[list[int], int]:
    if len(values) <= 1:
        return values, 0
    split = (len(values) + 1) // 2
    left, left_count = _sort_and_count_inversions(values[:split])
    right, right_count = _sort_and_count_inversions(values[split:])

    merged: list[int] = []
    cross = 0
    li = ri = 0
    while li < len(left) and ri < len(right):
        if right[ri] < left[li]:
            # Every element still waiting on the left is greater than right[ri].
            cross = (cross + len(left) - li) % MODULUS
            merged.append(right[ri])
            ri += 1
        else:
            merged.append(left[li])
            li += 1
    merged.extend(left[li:])
    merged.extend(right[ri:])
    return merged, (left_count + right_count + cross) % MODULUS


def count_inversions(nums: Iterable[int]) -> int:
    """Pairs ``i < j`` with ``nums[i] > nums[j]``, modulo ``MODULUS``, via merge sort.

    The input is left untouched.
    """
    _, count = _sort_and_count_inversions(list(nums))
    return count


def reverse_pairs_brute_force(nums: Iterable[int]) -> int:
    """Pairs ``i < j`` with ``nums[i] > 2 * nums[j]``, checked pairwise."""
    values = list(nums)
    return sum(
        1
        for i, first in enumerate(values)
        for second in values[i + 1 :]
        if first > 2 * second
    )


def _sort_and_count_pairs(values: list[int]) -> tuple[list[int], int]:
    if len(values) <= 1:
        return values, 0
    split = (len(values) + 1) // 2
    left, left_count = _sort_and_count_pairs(values[:split])
    right, right_count = _sort_and_count_pairs(values[split:])

    cross = 0
    index = 0
    for value in left:
        while index < len(right) and value > 2 * right[index]:
            index += 1
        cross += index
    return list(merge(left, right)), left_count + right_count + cross


def reverse_pairs(nums: Iterable[int]) -> int:
    """Pairs ``i < j`` with ``nums[i] > 2 * nums[j]``, via merge sort.

    The input is left untouched.
    """
    _, count = _sort_and_count_pairs(list(nums))
    return count