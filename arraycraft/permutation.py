"""The lexicographically next permutation of a sequence."""

from __future__ import annotations

from collections.abc import Iterable


def next_permutation(nums: list[int]) -> bool:
    """Rearrange ``nums`` in place into its next permutation.

    Returns False when ``nums`` was the last permutation and has wrapped
    around to the first (ascending) one, True otherwise.
    """
    n = len(nums)
    pivot = next((i for i in range(n - 2, -1, -1) if nums[i] < nums[i + 1]), -1)
    if pivot == -1:
        nums.reverse()
        return False
    # The tail after the pivot is descending, so the first larger value from
    # the back is the smallest one that exceeds the pivot.
    successor = next(i for i in range(n - 1, pivot, -1) if nums[i] > nums[pivot])
    nums[pivot], nums[successor] = nums[successor], nums[pivot]
    nums[pivot + 1 :] = nums[pivot + 1 :][::-1]
    return True


def next_permutation_of(nums: Iterable[int]) -> list[int]:
    """Return the next permutation as a new list, wrapping after the last one."""
    values = list(nums)
    next_permutation(values)
    return values