"""Replace each element with the greatest element to its right."""

from __future__ import annotations

from collections.abc import Iterable


def replace_elements(arr: Iterable[int]) -> list[int]:
    """Each position gets the maximum of what follows it; the last gets -1."""
    values = list(arr)
    result = [0] * len(values)
    highest = -1
    for position in range(len(values) - 1, -1, -1):
        result[position] = highest
        highest = max(highest, values[position])
    return result