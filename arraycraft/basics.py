"""Warm-up problems: Fibonacci numbers, frequency sorting and palindromes."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

_ALPHANUMERIC = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789")


def fib(n: int) -> int:
    """Return the n-th Fibonacci number; values of n below 2 are returned as is."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def frequency_sort(nums: Iterable[int]) -> list[int]:
    """Order values by increasing frequency, larger values first on ties."""
    values = list(nums)
    freq = Counter(values)
    if len(freq) <= 1:
        return values
    return sorted(values, key=lambda value: (freq[value], -value))


def sanitize(text: str) -> str:
    """Keep only ASCII letters and digits, lower-cased."""
    return "".join(char.lower() for char in text if char in _ALPHANUMERIC)


def is_palindrome(text: str) -> bool:
    """Tell whether the sanitized text reads the same in both directions."""
    cleaned = sanitize(text)

    def check(index: int) -> bool:
        if index >= len(cleaned) // 2:
            return True
        if cleaned[index] != cleaned[-index - 1]:
            return False
        return check(index + 1)

    return check(0)