"""Count contiguous subarrays whose XOR equals k."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def count_xor_subarrays_brute_force(arr: Iterable[int], k: int) -> int:
    """Try every subarray and compare its XOR with ``k``."""
    values = list(arr)
    count = 0
    for start in range(len(values)):
        running = 0
        for value in values[start:]:
            running ^= value
            if running == k:
                count += 1
    return count


def count_xor_subarrays(arr: Iterable[int], k: int) -> int:
    """Count with prefix XORs: a prefix ``p`` pairs with earlier prefixes ``p ^ k``."""
    seen: Counter[int] = Counter({0: 1})
    prefix = 0
    count = 0
    for value in arr:
        prefix ^= value
        count += seen[prefix ^ k]
        seen[prefix] += 1
    return count