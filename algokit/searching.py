"""Searching in sequences and order statistics."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def binary_search(values: Sequence[Any], key: Any) -> int:
    """Return the index of ``key`` in the ascending sequence ``values``.

    Raises ValueError when the key is not present.
    """
    if not values or key < values[0] or key > values[-1]:
        raise ValueError(f"{key!r} is not in the sequence")
    start, end = 0, len(values) - 1
    while start <= end:
        middle = start + (end - start) // 2
        if values[middle] == key:
            return middle
        if values[middle] > key:
            end = middle - 1
        else:
            start = middle + 1
    raise ValueError(f"{key!r} is not in the sequence")


def linear_search(values: Iterable[Any], key: Any) -> int:
    """Return the index of the first element equal to ``key``.

    Raises ValueError when the key is not present.
    """
    for index, value in enumerate(values):
        if value == key:
            return index
    raise ValueError(f"{key!r} is not in the sequence")


def kth_largest_and_smallest(values: Iterable[Any], k: int) -> tuple[Any, Any]:
    """Return the k-th largest and the k-th smallest element, counting from 1."""
    ordered = sorted(values)
    if not 1 <= k <= len(ordered):
        raise ValueError(f"k must be between 1 and {len(ordered)}, got {k}")
    return ordered[len(ordered) - k], ordered[k - 1]