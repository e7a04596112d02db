"""Unique triplets and quadruplets that add up to a target."""

from __future__ import annotations

from collections.abc import Iterable


def three_sum_hashed(nums: Iterable[int]) -> list[list[int]]:
    """Unique sorted triplets summing to 0, found with a hash per first index.

    Triplets are returned in ascending lexicographic order.
    """
    values = list(nums)
    triplets: set[tuple[int, ...]] = set()
    for i, first in enumerate(values):
        seen: set[int] = set()
        for second in values[i + 1 :]:
            third = -first - second
            if third in seen:
                triplets.add(tuple(sorted((first, second, third))))
            else:
                seen.add(second)
    return [list(triplet) for triplet in sorted(triplets)]


def three_sum(nums: Iterable[int]) -> list[list[int]]:
    """Unique sorted triplets summing to 0, found with sorting and two pointers."""
    values = sorted(nums)
    result: list[list[int]] = []
    n = len(values)
    for i in range(n):
        if i > 0 and values[i] == values[i - 1]:
            continue
        j, k = i + 1, n - 1
        while j < k:
            total = values[i] + values[j] + values[k]
            if total == 0:
                result.append([values[i], values[j], values[k]])
                j += 1
                k -= 1
                while j < k and values[j] == values[j - 1]:
                    j += 1
                while j < k and values[k] == values[k + 1]:
                    k -= 1
            elif total < 0:
                j += 1
            else:
                k -= 1
    return result


def four_sum_hashed(nums: Iterable[int], target: int) -> list[list[int]]:
    """Unique sorted quadruplets summing to ``target``, using a hash per pair.

    Quadruplets are returned in ascending lexicographic order.
    """
    values = list(nums)
    if len(values) < 4:
        return []
    quadruplets: set[tuple[int, ...]] = set()
    for a, first in enumerate(values):
        for b in range(a + 1, len(values)):
            second = values[b]
            seen: set[int] = set()
            for third in values[b + 1 :]:
                fourth = target - first - second - third
                if fourth in seen:
                    quadruplets.add(tuple(sorted((first, second, third, fourth))))
                else:
                    seen.add(third)
    return [list(quadruplet) for quadruplet in sorted(quadruplets)]


def four_sum(nums: Iterable[int], target: int) -> list[list[int]]:
    """Unique sorted quadruplets summing to ``target``, via sorting and two pointers."""
    values = sorted(nums)
    n = len(values)
    if n < 4:
        return []
    result: list[list[int]] = []
    for a in range(n):
        if a > 0 and values[a] == values[a - 1]:
            continue
        for b in range(a + 1, n):
            if b > a + 1 and values[b] == values[b - 1]:
                continue
            c, d = b + 1, n - 1
            while c < d:
                total = values[a] + values[b] + values[c] + values[d]
                if total == target:
                    result.append([values[a], values[b], values[c], values[d]])
                    c += 1
                    d -= 1
                    while c < d and values[c] == values[c - 1]:
                        c += 1
                    while c < d and values[d] == values[d + 1]:
                        d -= 1
                elif total < target:
                    c += 1
                else:
                    d -= 1
    return result