"""Questions about contiguous runs, pairs and triplets within a sequence."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, Sequence


def max_subarray(values: Iterable[int]) -> tuple[int, list[int]]:
    """Return (best sum, the run that gives it) for the largest-sum non-empty run.

    When several runs tie, the one found first is returned. Raises
    ValueError for an empty input.
    """
    items = list(values)
    if not items:
        raise ValueError("values must not be empty")
    best: int | None = None
    total = 0
    start = best_start = best_end = 0
    for index, value in enumerate(items):
        if total == 0:
            start = index
        total += value
        if best is None or total > best:
            best, best_start, best_end = total, start, index
        if total < 0:
            total = 0
    assert best is not None
    return best, items[best_start : best_end + 1]


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run (Kadane)."""
    return max_subarray(values)[0]


def longest_subarray_with_sum(values: Iterable[int], k: int) -> int:
    """Return the length of the longest run summing to *k*, or 0 if none.

    Works for negative values as well.
    """
    first_seen = {0: -1}
    prefix = 0
    best = 0
    for index, value in enumerate(values):
        prefix += value
        earlier = first_seen.get(prefix - k)
        if earlier is not None:
            best = max(best, index - earlier)
        first_seen.setdefault(prefix, index)
    return best


def longest_subarray_with_sum_nonnegative(values: Iterable[int], k: int) -> int:
    """Return the longest run summing to *k* using a sliding window.

    Only valid for non-negative values; raises ValueError otherwise.
    """
    items = list(values)
    if any(value < 0 for value in items):
        raise ValueError("values must be non-negative")
    left = 0
    total = 0
    best = 0
    for right, value in enumerate(items):
        total += value
        while left <= right and total > k:
            total -= items[left]
            left += 1
        if total == k:
            best = max(best, right - left + 1)
    return best


def count_subarrays_with_xor(values: Iterable[int], target: int) -> int:
    """Return how many contiguous runs have a bitwise XOR equal to *target*."""
    seen = Counter({0: 1})
    running = 0
    count = 0
    for value in values:
        running ^= value
        count += seen[running ^ target]
        seen[running] += 1
    return count


def longest_zero_sum_subarray(values: Iterable[int]) -> int:
    """Return the length of the longest run that sums to zero."""
    return longest_subarray_with_sum(values, 0)


def _sort_and_count(items: list[int]) -> tuple[list[int], int]:
    if len(items) <= 1:
        return items, 0
    middle = (len(items) + 1) // 2
    left, left_count = _sort_and_count(items[:middle])
    right, right_count = _sort_and_count(items[middle:])
    count = left_count + right_count
    j = 0
    for value in left:
        while j < len(right) and value > 2 * right[j]:
            j += 1
        count += j
    return list(heapq.merge(left, right)), count


def count_reverse_pairs(values: Iterable[int]) -> int:
    """Count index pairs i < j with values[i] > 2 * values[j]."""
    return _sort_and_count(list(values))[1]


def three_sum(values: Iterable[int]) -> list[tuple[int, int, int]]:
    """Return every distinct sorted triplet of elements that sums to zero.

    The triplets come in ascending lexicographic order.
    """
    items = sorted(values)
    n = len(items)
    found: list[tuple[int, int, int]] = []
    for i, first in enumerate(items):
        if i > 0 and first == items[i - 1]:
            continue
        j, k = i + 1, n - 1
        while j < k:
            total = first + items[j] + items[k]
            if total < 0:
                j += 1
            elif total > 0:
                k -= 1
            else:
                found.append((first, items[j], items[k]))
                j += 1
                k -= 1
                while j < k and items[j] == items[j - 1]:
                    j += 1
                while j < k and items[k] == items[k + 1]:
                    k -= 1
    return found


def has_pair_with_sum(values: Sequence[int] | Iterable[int], target: int) -> bool:
    """Return True if two elements at different positions add up to *target*."""
    seen: set[int] = set()
    for value in values:
        if target - value in seen:
            return True
        seen.add(value)
    return False