"""Classic comparison sorts and helpers for merging two sorted sequences."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, Sequence
from typing import Any


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list with *values* sorted by a stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return list(heapq.merge(merge_sort(items[:middle]), merge_sort(items[middle:])))


def _partition(items: list[Any], low: int, high: int) -> int:
    pivot = items[low]
    i, j = low, high
    while i < j:
        while items[i] <= pivot and i <= high - 1:
            i += 1
        while items[j] > pivot and j >= low + 1:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
    items[low], items[j] = items[j], items[low]
    return j


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new sorted list, using quicksort with the first element as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition(items, low, high)
            pending.append((low, split - 1))
            pending.append((split + 1, high))
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list sorted by repeatedly selecting the minimum."""
    items = list(values)
    for start in range(len(items) - 1):
        smallest = min(range(start, len(items)), key=items.__getitem__)
        items[start], items[smallest] = items[smallest], items[start]
    return items


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list sorted by adjacent swaps, stopping early once sorted."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def sort_colors_counting(values: Iterable[int]) -> list[int]:
    """Sort a sequence of 0s, 1s and 2s by counting; anything else counts as 2."""
    items = list(values)
    counts = Counter(items)
    zeros, ones = counts[0], counts[1]
    return [0] * zeros + [1] * ones + [2] * (len(items) - zeros - ones)


def sort_colors(values: Iterable[int]) -> list[int]:
    """Sort a sequence of 0s, 1s and 2s in one pass (Dutch national flag)."""
    items = list(values)
    low, mid, high = 0, 0, len(items) - 1
    while mid <= high:
        if items[mid] == 0:
            items[low], items[mid] = items[mid], items[low]
            low += 1
            mid += 1
        elif items[mid] == 1:
            mid += 1
        else:
            items[mid], items[high] = items[high], items[mid]
            high -= 1
    return items


def merge_sorted_arrays(
    first: Sequence[Any], second: Sequence[Any]
) -> tuple[list[Any], list[Any]]:
    """Merge two sorted sequences, returning them refilled in sorted order.

    The first returned list keeps the length of *first* and holds the
    smallest elements; the second holds the rest.
    """
    merged = list(heapq.merge(first, second))
    return merged[: len(first)], merged[len(first) :]


def merge_sorted_arrays_swap(
    first: Sequence[Any], second: Sequence[Any]
) -> tuple[list[Any], list[Any]]:
    """Merge two sorted sequences by swapping across the boundary, then sorting each."""
    left_part, right_part = list(first), list(second)
    left, right = len(left_part) - 1, 0
    while left >= 0 and right < len(right_part) and left_part[left] > right_part[right]:
        left_part[left], right_part[right] = right_part[right], left_part[left]
        left -= 1
        right += 1
    left_part.sort()
    right_part.sort()
    return left_part, right_part


def merge_sorted_arrays_gap(
    first: Sequence[Any], second: Sequence[Any]
) -> tuple[list[Any], list[Any]]:
    """Merge two sorted sequences with the shrinking-gap (shell) method."""
    items = [*first, *second]
    length = len(items)
    gap = (length + 1) // 2
    while gap > 0:
        for left in range(length - gap):
            right = left + gap
            if items[left] > items[right]:
                items[left], items[right] = items[right], items[left]
        if gap == 1:
            break
        gap = (gap + 1) // 2
    return items[: len(first)], items[len(first) :]