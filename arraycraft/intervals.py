"""Merging overlapping closed intervals."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _sorted_pairs(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    pairs = []
    for interval in intervals:
        if len(interval) != 2:
            raise ValueError("each interval must have a start and an end")
        pairs.append([interval[0], interval[1]])
    pairs.sort()
    return pairs


def merge_intervals_brute_force(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Merge by scanning ahead from each interval not already absorbed."""
    pairs = _sorted_pairs(intervals)
    result: list[list[int]] = []
    for i, (start, end) in enumerate(pairs):
        if result and end <= result[-1][1]:
            continue
        for next_start, next_end in pairs[i + 1 :]:
            if next_start > end:
                break
            end = max(end, next_end)
        result.append([start, end])
    return result


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Merge in a single pass over the intervals sorted by start.

    Intervals that touch at an endpoint are merged.
    """
    result: list[list[int]] = []
    for start, end in _sorted_pairs(intervals):
        if not result or result[-1][1] < start:
            result.append([start, end])
        else:
            result[-1][1] = max(result[-1][1], end)
    return result