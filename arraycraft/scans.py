"""Single-pass scans over integer sequences."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence


def max_profit(prices: Iterable[int]) -> int:
    """Best profit from one buy followed by one later sell, or 0 if none."""
    values = list(prices)
    if not values:
        raise ValueError("prices must not be empty")
    profit = 0
    lowest = values[0]
    for price in values:
        profit = max(profit, price - lowest)
        lowest = min(lowest, price)
    return profit


def leaders(arr: Iterable[int]) -> list[int]:
    """Elements strictly greater than everything to their right, left to right."""
    found: list[int] = []
    highest: int | None = None
    for value in reversed(list(arr)):
        if highest is None or value > highest:
            highest = value
            found.append(value)
    found.reverse()
    return found


def max_consecutive_ones(nums: Iterable[int]) -> int:
    """Length of the longest run of ones."""
    count = 0
    best = 0
    for value in nums:
        if value == 1:
            count += 1
        else:
            best = max(best, count)
            count = 0
    return max(best, count)


def move_zeroes_in_place(nums: MutableSequence[int]) -> None:
    """Move every zero to the end in place, keeping the order of the rest."""
    index = 0
    for value in list(nums):
        if value != 0:
            nums[index] = value
            index += 1
    for position in range(index, len(nums)):
        nums[position] = 0


def move_zeroes_copy(nums: Iterable[int]) -> list[int]:
    """Return a new list with the non-zero values first and the zeros after."""
    values = list(nums)
    non_zero = [value for value in values if value != 0]
    return non_zero + [0] * (len(values) - len(non_zero))