"""Classic comparison sorts, each sorting a mutable sequence in place."""

from __future__ import annotations

import random
from collections.abc import MutableSequence
from enum import Enum


class PartitionMethod(Enum):
    """How quick sort chooses its pivot."""

    FIRST_ELEMENT = "first"  # Hoare scheme
    LAST_ELEMENT = "last"  # Lomuto scheme
    RANDOM = "random"  # random pivot, Lomuto scheme
    MEDIAN_OF_THREE = "median"  # median-of-three pivot, Lomuto scheme


def bubble_sort(arr: MutableSequence) -> None:
    """Sort in place by pushing the maximum to the end in each round."""
    n = len(arr)
    for round_ in range(n - 1):
        swapped = False
        for j in range(n - round_ - 1):
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                swapped = True
        if not swapped:
            break


def bubble_sort_recursive(arr: MutableSequence) -> None:
    """Bubble sort where each round is a recursive call."""
    n = len(arr)

    def sort_round(round_: int) -> None:
        if round_ >= n - 1:
            return
        swapped = False
        for i in range(n - round_ - 1):
            if arr[i] > arr[i + 1]:
                arr[i], arr[i + 1] = arr[i + 1], arr[i]
                swapped = True
        if swapped:
            sort_round(round_ + 1)

    sort_round(0)


def insertion_sort(arr: MutableSequence) -> None:
    """Sort in place by sinking each element into the sorted prefix."""
    for i in range(1, len(arr)):
        for j in range(i, 0, -1):
            if arr[j] < arr[j - 1]:
                arr[j], arr[j - 1] = arr[j - 1], arr[j]
            else:
                break


def insertion_sort_recursive(arr: MutableSequence) -> None:
    """Insertion sort where each inserted element is a recursive call."""
    n = len(arr)

    def insert(target: int) -> None:
        if target >= n:
            return
        for i in range(target, 0, -1):
            if arr[i] < arr[i - 1]:
                arr[i], arr[i - 1] = arr[i - 1], arr[i]
        insert(target + 1)

    insert(1)


def _merge(arr: MutableSequence, start: int, mid: int, end: int) -> None:
    left = list(arr[start : mid + 1])
    right = list(arr[mid + 1 : end + 1])
    li = ri = 0
    out = start
    while li < len(left) and ri < len(right):
        if left[li] < right[ri]:
            arr[out] = left[li]
            li += 1
        else:
            arr[out] = right[ri]
            ri += 1
        out += 1
    for value in left[li:] + right[ri:]:
        arr[out] = value
        out += 1


def merge_sort(arr: MutableSequence) -> None:
    """Sort in place by splitting in halves and merging them in order."""

    def sort_range(start: int, end: int) -> None:
        if start >= end:
            return
        mid = start + (end - start) // 2
        sort_range(start, mid)
        sort_range(mid + 1, end)
        _merge(arr, start, mid, end)

    sort_range(0, len(arr) - 1)


def _partition_first(arr: MutableSequence, start: int, end: int) -> int:
    pivot = arr[start]
    low, high = start, end
    while low < high:
        while arr[low] <= pivot and low < end:
            low += 1
        while arr[high] > pivot and high > start:
            high -= 1
        if low < high:
            arr[low], arr[high] = arr[high], arr[low]
    arr[start], arr[high] = arr[high], arr[start]
    return high


def _partition_last(arr: MutableSequence, start: int, end: int) -> int:
    pivot = arr[end]
    boundary = start - 1
    for i in range(start, end):
        if arr[i] <= pivot:
            boundary += 1
            arr[boundary], arr[i] = arr[i], arr[boundary]
    boundary += 1
    arr[boundary], arr[end] = arr[end], arr[boundary]
    return boundary


def _partition_median(arr: MutableSequence, start: int, end: int) -> int:
    mid = start + (end - start) // 2
    if arr[start] > arr[mid]:
        arr[start], arr[mid] = arr[mid], arr[start]
    if arr[start] > arr[end]:
        arr[start], arr[end] = arr[end], arr[start]
    if arr[mid] > arr[end]:
        arr[mid], arr[end] = arr[end], arr[mid]
    arr[mid], arr[end] = arr[end], arr[mid]
    return _partition_last(arr, start, end)


def quick_sort(
    arr: MutableSequence,
    method: PartitionMethod = PartitionMethod.MEDIAN_OF_THREE,
    rng: random.Random | None = None,
) -> None:
    """Sort in place by partitioning around a pivot chosen by ``method``."""
    method = PartitionMethod(method)
    chooser = rng if rng is not None else random.Random()

    def partition(start: int, end: int) -> int:
        if method is PartitionMethod.FIRST_ELEMENT:
            return _partition_first(arr, start, end)
        if method is PartitionMethod.LAST_ELEMENT:
            return _partition_last(arr, start, end)
        if method is PartitionMethod.RANDOM:
            pivot_index = start + chooser.randrange(end - start + 1)
            arr[pivot_index], arr[end] = arr[end], arr[pivot_index]
            return _partition_last(arr, start, end)
        return _partition_median(arr, start, end)

    def sort_range(start: int, end: int) -> None:
        # Recurse into the smaller side and loop over the larger one to keep
        # the stack shallow on unlucky pivots.
        while start < end:
            pivot = partition(start, end)
            if pivot - start < end - pivot:
                sort_range(start, pivot - 1)
                start = pivot + 1
            else:
                sort_range(pivot + 1, end)
                end = pivot - 1

    sort_range(0, len(arr) - 1)


def selection_sort(arr: MutableSequence) -> None:
    """Sort in place by swapping each round's minimum to the front."""
    n = len(arr)
    for i in range(n - 1):
        min_index = min(range(i, n), key=arr.__getitem__)
        arr[min_index], arr[i] = arr[i], arr[min_index]