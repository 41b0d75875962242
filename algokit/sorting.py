"""Classic comparison and distribution sorts.

Every function takes an iterable and returns a new sorted list (or string),
leaving its argument untouched.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

T = TypeVar("T")

_CHAR_RANGE = 256


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Sort numbers in the half-open range [0, 1) by spreading them into buckets."""
    items = list(values)
    count = len(items)
    buckets: list[list[float]] = [[] for _ in range(count)]
    for value in items:
        if not 0 <= value < 1:
            raise ValueError(f"bucket sort needs values in [0, 1), got {value!r}")
        index = min(int(count * value), count - 1)
        buckets[index].append(value)
    return [value for bucket in buckets for value in sorted(bucket)]


def counting_sort(text: str) -> str:
    """Sort the characters of a string whose code points are all below 256."""
    counts = [0] * _CHAR_RANGE
    for char in text:
        code = ord(char)
        if code >= _CHAR_RANGE:
            raise ValueError(f"character {char!r} is outside the supported range")
        counts[code] += 1
    return "".join(chr(code) * times for code, times in enumerate(counts) if times)


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
    left_pos = right_pos = 0
    while left_pos < len(left) and right_pos < len(right):
        if left[left_pos] <= right[right_pos]:  # type: ignore[operator]
            merged.append(left[left_pos])
            left_pos += 1
        else:
            merged.append(right[right_pos])
            right_pos += 1
    merged.extend(left[left_pos:])
    merged.extend(right[right_pos:])
    return merged


def merge_sort(values: Iterable[T]) -> list[T]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def _counting_pass(items: list[int], exponent: int) -> list[int]:
    counts = [0] * 10
    for value in items:
        counts[(value // exponent) % 10] += 1
    for digit in range(1, 10):
        counts[digit] += counts[digit - 1]
    output = [0] * len(items)
    for value in reversed(items):
        digit = (value // exponent) % 10
        counts[digit] -= 1
        output[counts[digit]] = value
    return output


def radix_sort(values: Iterable[int]) -> list[int]:
    """Least-significant-digit radix sort of non-negative integers."""
    items = list(values)
    if not items:
        return items
    if any(value < 0 for value in items):
        raise ValueError("radix sort needs non-negative integers")
    largest = max(items)
    exponent = 1
    while largest // exponent > 0:
        items = _counting_pass(items, exponent)
        exponent *= 10
    return items


def wave_sort(values: Iterable[T]) -> list[T]:
    """Arrange values so that a[0] >= a[1] <= a[2] >= a[3] ..."""
    items: list[Any] = sorted(values)  # type: ignore[type-var]
    for index in range(0, len(items) - 1, 2):
        items[index], items[index + 1] = items[index + 1], items[index]
    return items


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Repeatedly swap adjacent out-of-order pairs."""
    items = list(values)
    size = len(items)
    for done in range(size - 1):
        for index in range(size - done - 1):
            if items[index] > items[index + 1]:  # type: ignore[operator]
                items[index], items[index + 1] = items[index + 1], items[index]
    return items


def _sift_down(items: list[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[T]) -> list[T]:
    """Sort with a binary max-heap."""
    items = list(values)
    size = len(items)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(items, size, root)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Grow a sorted prefix one element at a time."""
    items = list(values)
    for position in range(1, len(items)):
        element = items[position]
        slot = position - 1
        while slot >= 0 and items[slot] > element:  # type: ignore[operator]
            items[slot + 1] = items[slot]
            slot -= 1
        items[slot + 1] = element
    return items


def _partition(items: list[Any], low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for index in range(low, high):
        if items[index] <= pivot:
            boundary += 1
            items[boundary], items[index] = items[index], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable[T]) -> list[T]:
    """Quicksort with the last element of each range as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = _partition(items, low, high)
            pending.append((low, pivot - 1))
            pending.append((pivot + 1, high))
    return items


def selection_sort(values: Iterable[T]) -> list[T]:
    """Move the smallest remaining element to the front on each pass."""
    items = list(values)
    size = len(items)
    for position in range(size - 1):
        smallest = min(range(position, size), key=items.__getitem__)
        if items[smallest] < items[position]:  # type: ignore[operator]
            items[position], items[smallest] = items[smallest], items[position]
    return items