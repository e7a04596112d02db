"""Find the number missing from 0..n."""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce
from operator import xor


def missing_number_sum(nums: Iterable[int]) -> int:
    """Missing value via the sum of the first n naturals."""
    values = list(nums)
    n = len(values)
    return n * (n + 1) // 2 - sum(values)


def missing_number_xor(nums: Iterable[int]) -> int:
    """Missing value via XOR of the values and of 0..n."""
    values = list(nums)
    return reduce(xor, values, 0) ^ reduce(xor, range(len(values) + 1), 0)