"""Majority element of a sequence."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def majority_element_hashed(nums: Iterable[int]) -> int:
    """The value that first reaches the highest count."""
    values = list(nums)
    if not values:
        raise ValueError("nums must not be empty")
    counts: Counter[int] = Counter()
    best, best_count = values[0], 1
    for value in values:
        counts[value] += 1
        if counts[value] > best_count:
            best, best_count = value, counts[value]
    return best


def majority_element_moore(nums: Iterable[int]) -> int:
    """Moore's voting candidate; the majority element when one exists."""
    values = list(nums)
    if not values:
        raise ValueError("nums must not be empty")
    candidate = values[0]
    count = 0
    for value in values:
        if count == 0:
            candidate = value
        count += 1 if value == candidate else -1
    return candidate