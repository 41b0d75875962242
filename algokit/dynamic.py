"""Dynamic programming classics."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def max_subarray_sum(values: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous run (Kadane's algorithm)."""
    best: int | None = None
    running = 0
    for value in values:
        running += value
        if best is None or running > best:
            best = running
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("max_subarray_sum needs at least one value")
    return best


def cut_rod(prices: Sequence[int], length: int) -> int:
    """Best price for a rod of ``length``, where ``prices[i]`` is the price of a piece i+1 long."""
    if length < 0:
        raise ValueError("length must be non-negative")
    if length == 0:
        return 0
    if not prices:
        raise ValueError("at least one price is needed")
    unit_price = prices[0]
    best = [total * unit_price for total in range(length + 1)]
    for piece, price in enumerate(prices[1:length], start=2):
        for total in range(piece, length + 1):
            best[total] = max(best[total], best[total - piece] + price)
    return best[length]


def subset_sums(values: Iterable[int]) -> list[int]:
    """Sums of all subsets, empty subset included, in ascending order."""
    sums = [0]
    for value in values:
        sums += [total + value for total in sums]
    return sorted(sums)