"""Binary-search style answers and fast exponentiation."""

from __future__ import annotations

from collections.abc import Sequence
from math import isqrt


def _bouquets_by(bloom_days: Sequence[int], day: int, k: int) -> int:
    bouquets = 0
    run = 0
    for bloom in bloom_days:
        if bloom <= day:
            run += 1
        else:
            bouquets += run // k
            run = 0
    return bouquets + run // k


def min_days_for_bouquets(bloom_days: Sequence[int], k: int, m: int) -> int:
    """Return the first day on which *m* bouquets of *k* adjacent flowers can be made.

    Raises ValueError when there are too few flowers for that many bouquets.
    """
    if k < 1 or m < 1:
        raise ValueError("k and m must be positive")
    if m * k > len(bloom_days):
        raise ValueError("not enough flowers to make the bouquets")
    low, high = min(bloom_days), max(bloom_days)
    while low <= high:
        mid = (low + high) // 2
        if _bouquets_by(bloom_days, mid, k) >= m:
            high = mid - 1
        else:
            low = mid + 1
    return low


def _ceil_sum(values: Sequence[int], divisor: int) -> int:
    return sum(-(-value // divisor) for value in values)


def smallest_divisor(values: Sequence[int], threshold: int) -> int:
    """Return the smallest divisor whose rounded-up quotients sum to at most *threshold*.

    Raises ValueError for empty or non-positive input, or when no divisor
    can meet the threshold.
    """
    if not values:
        raise ValueError("values must not be empty")
    if any(value <= 0 for value in values):
        raise ValueError("values must be positive")
    if len(values) > threshold:
        raise ValueError("threshold is below the number of values")
    low, high = 1, max(values)
    while low <= high:
        mid = (low + high) // 2
        if _ceil_sum(values, mid) <= threshold:
            high = mid - 1
        else:
            low = mid + 1
    return low


def floor_sqrt(n: int) -> int:
    """Return the largest integer whose square does not exceed *n*."""
    if n < 0:
        raise ValueError("n must not be negative")
    return isqrt(n)


def single_non_duplicate(values: Sequence[int]) -> int:
    """Return the one element of a sorted sequence that is not part of a pair.

    Raises ValueError if the sequence is empty or has no such element.
    """
    n = len(values)
    if n == 0:
        raise ValueError("values must not be empty")
    if n == 1:
        return values[0]
    if values[0] != values[1]:
        return values[0]
    if values[-1] != values[-2]:
        return values[-1]
    low, high = 1, n - 2
    while low <= high:
        mid = (low + high) // 2
        value = values[mid]
        if value != values[mid - 1] and value != values[mid + 1]:
            return value
        on_left_half = (mid % 2 == 1 and value == values[mid - 1]) or (
            mid % 2 == 0 and value == values[mid + 1]
        )
        if on_left_half:
            low = mid + 1
        else:
            high = mid - 1
    raise ValueError("every element is paired")


def power(x: float, n: int) -> float:
    """Return *x* raised to the integer power *n* by repeated squaring."""
    if n < 0:
        if x == 0:
            raise ZeroDivisionError("zero cannot be raised to a negative power")
        x = 1 / x
        n = -n
    result = 1.0
    base = float(x)
    while n:
        if n & 1:
            result *= base
        base *= base
        n >>= 1
    return result