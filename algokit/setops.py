"""Union and intersection of sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def sorted_union(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    """Return the distinct elements of both inputs in ascending order."""
    return sorted(set(first).union(second))


def sorted_intersection(first: Sequence[Any], second: Sequence[Any]) -> list[Any]:
    """Intersect two sorted sequences, keeping repeats as often as both hold them."""
    i = j = 0
    common: list[Any] = []
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            i += 1
        elif second[j] < first[i]:
            j += 1
        else:
            common.append(first[i])
            i += 1
            j += 1
    return common


def unique_intersection(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    """Return each element common to both once, in the order met in *second*."""
    remaining = set(first)
    common: list[Any] = []
    for value in second:
        if value in remaining:
            common.append(value)
            remaining.discard(value)
    return common