"""Array puzzles: rearrangements, permutations and finding odd elements out."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from functools import reduce
from operator import xor
from typing import Any


def move_zeroes(values: Iterable[int]) -> list[int]:
    """Return the values with every zero moved to the end, other order kept."""
    items = list(values)
    non_zero = [v for v in items if v != 0]
    return non_zero + [0] * (len(items) - len(non_zero))


def next_permutation(values: Iterable[Any]) -> list[Any]:
    """Return the next lexicographic permutation; the last wraps to the first."""
    items = list(values)
    n = len(items)
    pivot = next((i for i in range(n - 2, -1, -1) if items[i] < items[i + 1]), None)
    if pivot is None:
        return items[::-1]
    successor = next(i for i in range(n - 1, pivot, -1) if items[i] > items[pivot])
    items[pivot], items[successor] = items[successor], items[pivot]
    items[pivot + 1 :] = reversed(items[pivot + 1 :])
    return items


def _interleave(first: Sequence[int], second: Sequence[int]) -> list[int]:
    return [value for pair in zip(first, second) for value in pair]


def rearrange_by_sign(values: Iterable[int]) -> list[int]:
    """Alternate non-negative and negative values, starting non-negative.

    Relative order within each sign is kept. Raises ValueError unless the
    two groups are the same size.
    """
    items = list(values)
    positives = [v for v in items if v >= 0]
    negatives = [v for v in items if v < 0]
    if len(positives) != len(negatives):
        raise ValueError("need as many negative as non-negative values")
    return _interleave(positives, negatives)


def rearrange_by_sign_uneven(values: Iterable[int]) -> list[int]:
    """Alternate positive and non-positive values, appending the leftovers."""
    items = list(values)
    positives = [v for v in items if v > 0]
    others = [v for v in items if v <= 0]
    paired = min(len(positives), len(others))
    return _interleave(positives, others) + positives[paired:] + others[paired:]


def trapped_rain_water(heights: Sequence[int]) -> int:
    """Return how much water the elevation map *heights* traps."""
    left, right = 0, len(heights) - 1
    max_left = max_right = 0
    water = 0
    while left <= right:
        if heights[left] <= heights[right]:
            if heights[left] >= max_left:
                max_left = heights[left]
            else:
                water += max_left - heights[left]
            left += 1
        else:
            if heights[right] >= max_right:
                max_right = heights[right]
            else:
                water += max_right - heights[right]
            right -= 1
    return water


def max_profit(prices: Iterable[int]) -> int:
    """Return the best profit from one buy followed by one sell, at least 0."""
    iterator = iter(prices)
    try:
        cheapest = next(iterator)
    except StopIteration:
        raise ValueError("prices must not be empty") from None
    best = 0
    for price in iterator:
        best = max(best, price - cheapest)
        cheapest = min(cheapest, price)
    return best


def appear_once(values: Iterable[Any]) -> Any:
    """Return the smallest value that occurs exactly once.

    Raises ValueError if every value repeats.
    """
    counts = Counter(values)
    singles = [value for value, count in counts.items() if count == 1]
    if not singles:
        raise ValueError("no value appears exactly once")
    return min(singles)


def single_number(values: Iterable[int]) -> int:
    """Return the one value not paired, when all others occur twice."""
    return reduce(xor, values, 0)


def missing_number(values: Sequence[int]) -> int:
    """Return the number missing from *values*, which hold 0..len(values) less one."""
    n = len(values)
    return n * (n + 1) // 2 - sum(values)


def repeating_and_missing(values: Sequence[int]) -> tuple[int, int]:
    """Return (repeating, missing) for values drawn from 1..len(values).

    Raises ValueError if a value lies outside that range or if no value
    is repeated twice and none is missing.
    """
    n = len(values)
    counts = Counter(values)
    if any(not 1 <= v <= n for v in counts):
        raise ValueError(f"values must lie between 1 and {n}")
    repeating = next((i for i in range(1, n + 1) if counts[i] == 2), None)
    missing = next((i for i in range(1, n + 1) if counts[i] == 0), None)
    if repeating is None or missing is None:
        raise ValueError("no single repeated and missing pair found")
    return repeating, missing