"""Merging two sorted sequences, with and without spare room."""

from __future__ import annotations

from collections.abc import MutableSequence


def merge_into(nums1: MutableSequence[int], m: int, nums2: MutableSequence[int], n: int) -> None:
    """Merge the first ``n`` values of ``nums2`` into ``nums1`` in place.

    ``nums1`` holds ``m`` sorted values followed by ``n`` slots of room.
    The merge fills ``nums1`` from the back so nothing is overwritten early.
    """
    if m < 0 or n < 0:
        raise ValueError("m and n must not be negative")
    if len(nums1) != m + n:
        raise ValueError("nums1 must have room for exactly m + n values")
    if n > len(nums2):
        raise ValueError("nums2 holds fewer than n values")
    index = len(nums1) - 1
    left = m - 1
    right = n - 1
    while right >= 0:
        if left >= 0 and nums1[left] > nums2[right]:
            nums1[index] = nums1[left]
            left -= 1
        else:
            nums1[index] = nums2[right]
            right -= 1
        index -= 1


def merge_swap_sort(nums1: MutableSequence[int], nums2: MutableSequence[int]) -> None:
    """Merge without extra space by swapping across the boundary, then sorting.

    Afterwards ``nums1`` holds the smallest values and ``nums2`` the rest,
    both in ascending order.
    """
    left = len(nums1) - 1
    right = 0
    while left >= 0 and right < len(nums2) and nums1[left] > nums2[right]:
        nums1[left], nums2[right] = nums2[right], nums1[left]
        left -= 1
        right += 1
    nums1[:] = sorted(nums1)
    nums2[:] = sorted(nums2)


def merge_gap(nums1: MutableSequence[int], nums2: MutableSequence[int]) -> None:
    """Merge without extra space using the shrinking-gap method.

    The two sequences are treated as one of combined length; elements a gap
    apart are swapped when out of order and the gap is halved (rounding up)
    until it reaches 1.
    """
    split = len(nums1)
    total = split + len(nums2)

    def locate(position: int) -> tuple[MutableSequence[int], int]:
        if position < split:
            return nums1, position
        return nums2, position - split

    gap = (total + 1) // 2
    while gap > 0:
        for left in range(total - gap):
            first, i = locate(left)
            second, j = locate(left + gap)
            if first[i] > second[j]:
                first[i], second[j] = second[j], first[i]
        if gap <= 1:
            break
        gap = (gap + 1) // 2