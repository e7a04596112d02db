"""Rotating a sequence to the right by k positions, in place."""

from __future__ import annotations

from collections.abc import MutableSequence


def _effective_shift(nums: MutableSequence[int], k: int) -> int:
    if k < 0:
        raise ValueError("k must not be negative")
    if len(nums) <= 1:
        return 0
    return k % len(nums)


def rotate_with_buffer(nums: MutableSequence[int], k: int) -> None:
    """Rotate right by ``k`` using a buffer for the elements shifted out."""
    shift = _effective_shift(nums, k)
    if shift == 0:
        return
    n = len(nums)
    buffer = list(nums[: n - shift])
    nums[:shift] = list(nums[n - shift :])
    nums[shift:] = buffer


def rotate_by_reversal(nums: MutableSequence[int], k: int) -> None:
    """Rotate right by ``k`` with three reversals and no extra buffer."""
    shift = _effective_shift(nums, k)
    if shift == 0:
        return
    nums.reverse()
    nums[:shift] = list(reversed(nums[:shift]))
    nums[shift:] = list(reversed(nums[shift:]))