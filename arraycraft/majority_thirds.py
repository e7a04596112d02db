"""Elements occurring more than a third of the time."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def majority_thirds_hashed(nums: Iterable[int]) -> list[int]:
    """Values with more than ``n // 3`` occurrences, in the order they cross it."""
    values = list(nums)
    threshold = len(values) // 3 + 1
    counts: Counter[int] = Counter()
    result: list[int] = []
    for value in values:
        counts[value] += 1
        if counts[value] == threshold:
            result.append(value)
    return result


def majority_thirds_moore(nums: Iterable[int]) -> list[int]:
    """Two-candidate Moore voting followed by a verifying count."""
    values = list(nums)
    if not values:
        raise ValueError("nums must not be empty")

    first, first_count = values[0], 0
    # Start the second candidate apart from the first so both can be picked.
    second, second_count = values[0] - 1, 0
    for value in values:
        if first_count == 0 and value != second:
            first = value
        elif second_count == 0 and value != first:
            second = value

        if value == first:
            first_count += 1
        elif value == second:
            second_count += 1
        else:
            first_count -= 1
            second_count -= 1

    limit = len(values) // 3
    return [
        candidate
        for candidate in (first, second)
        if values.count(candidate) > limit
    ]