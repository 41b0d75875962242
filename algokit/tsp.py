"""Travelling salesman tours by dynamic programming over subsets (Held-Karp)."""

from __future__ import annotations

import math
from collections.abc import Sequence

from algokit.graph import NoPathError

INF = math.inf


def _check(distances: Sequence[Sequence[float]], start: int) -> int:
    size = len(distances)
    if size < 2:
        raise ValueError("a tour needs at least two nodes")
    if any(len(row) != size for row in distances):
        raise ValueError("distance matrix must be square")
    if not 0 <= start < size:
        raise IndexError(f"start node {start} is outside 0..{size - 1}")
    return size


def tsp_table(distances: Sequence[Sequence[float]], start: int) -> list[list[float]]:
    """Return the table whose entry [node][state] is the cheapest walk from ``start``.

    The walk visits exactly the nodes in the bit mask ``state`` and ends at ``node``.
    Unreachable entries are ``math.inf``.
    """
    size = _check(distances, start)
    start_bit = 1 << start
    table: list[list[float]] = [[INF] * (1 << size) for _ in range(size)]
    for node in range(size):
        if node != start:
            table[node][(1 << node) | start_bit] = distances[start][node]

    for state in sorted(range(1 << size), key=int.bit_count):
        if state.bit_count() < 3 or not state & start_bit:
            continue
        members = [node for node in range(size) if state >> node & 1 and node != start]
        for following in members:
            previous_state = state ^ (1 << following)
            best = table[following][state]
            for last in members:
                if last == following:
                    continue
                candidate = table[last][previous_state] + distances[last][following]
                if candidate < best:
                    best = candidate
            table[following][state] = best
    return table


def tsp_path(distances: Sequence[Sequence[float]], start: int) -> tuple[float, list[int]]:
    """Return the length of the shortest tour from ``start`` and the tour itself.

    The tour begins and ends at ``start`` and visits every other node once.
    """
    table = tsp_table(distances, start)
    size = len(distances)
    state = (1 << size) - 1
    distance = min(
        table[node][state] + distances[node][start] for node in range(size) if node != start
    )
    if math.isinf(distance):
        raise NoPathError(f"no tour starts at {start}")

    path = [start] * (size + 1)
    last = start
    for position in range(size - 1, 0, -1):
        candidates = [node for node in range(size) if node != start and state >> node & 1]
        chosen = min(candidates, key=lambda node: table[node][state] + distances[node][last])
        path[position] = chosen
        state ^= 1 << chosen
        last = chosen
    return distance, path