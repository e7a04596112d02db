"""Find two values adding up to a target."""

from __future__ import annotations

from collections.abc import Iterable


def two_sum_indices(nums: Iterable[int], target: int) -> tuple[int, int] | None:
    """Indices ``(i, j)`` with ``i < j`` of the first pair found, or None."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return partner, index
        seen[value] = index
    return None


def two_sum_values(nums: Iterable[int], target: int) -> tuple[int, int] | None:
    """A pair of values ``(low, high)`` summing to target, by two pointers."""
    values = sorted(nums)
    left, right = 0, len(values) - 1
    while left < right:
        total = values[left] + values[right]
        if total == target:
            return values[left], values[right]
        if total > target:
            right -= 1
        else:
            left += 1
    return None