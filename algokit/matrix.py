"""Graph algorithms on dense cost matrices, with ``math.inf`` for a missing edge."""

from __future__ import annotations

import math
from collections.abc import Sequence

from algokit.graph import NoPathError

INF = math.inf

_HEADER = "The following matrix shows the shortest distances between every pair of vertices \n"


def _square(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("matrix must be square")
    return rows


def floyd_warshall_matrix(graph: Sequence[Sequence[float]]) -> list[list[float]]:
    """Shortest distances between every pair of vertices of an adjacency matrix."""
    dist = _square(graph)
    size = len(dist)
    for via in range(size):
        through = dist[via]
        for row in dist:
            to_via = row[via]
            if to_via == INF:
                continue
            for node in range(size):
                if through[node] != INF and to_via + through[node] < row[node]:
                    row[node] = to_via + through[node]
    return dist


def format_distances(distances: Sequence[Sequence[float]]) -> str:
    """Render a distance matrix as text, writing INF for unreachable pairs."""
    rows = (
        "".join(("INF" if cell == INF else str(cell)) + "\t " for cell in row) + "\n"
        for row in distances
    )
    return _HEADER + "".join(rows)


def prim_mst_matrix(cost: Sequence[Sequence[float]]) -> list[tuple[int, int]]:
    """Edges of a minimum spanning tree of a symmetric cost matrix, in the order chosen.

    Each edge is (new vertex, tree vertex it joins), except the first, cheapest edge.
    """
    weights = _square(cost)
    size = len(weights)
    if size < 2:
        return []

    best = INF
    first: tuple[int, int] | None = None
    for row in range(size):
        for column in range(row + 1, size):
            if weights[row][column] < best:
                best = weights[row][column]
                first = (row, column)
    if first is None:
        raise NoPathError("graph is disconnected")

    left, right = first
    tree = [first]
    nearest: list[int | None] = [
        left if weights[node][left] < weights[node][right] else right for node in range(size)
    ]
    nearest[left] = nearest[right] = None

    for _ in range(size - 2):
        best = INF
        chosen: int | None = None
        for node, near in enumerate(nearest):
            if near is not None and weights[node][near] < best:
                best = weights[node][near]
                chosen = node
        if chosen is None:
            raise NoPathError("graph is disconnected")
        partner = nearest[chosen]
        assert partner is not None
        tree.append((chosen, partner))
        nearest[chosen] = None
        for node, near in enumerate(nearest):
            if near is not None and weights[node][chosen] < weights[node][near]:
                nearest[node] = chosen
    return tree