"""Disjoint-set forest and Kruskal's minimum spanning tree."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from operator import attrgetter


class DisjointSet:
    """Union-find over the items 0 .. size-1.

    Each component also tracks how many vertices and how many edges it holds.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self._parent = list(range(size))
        self._size = [1] * size
        self._edges = [0] * size

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, item: int) -> None:
        if not 0 <= item < len(self._parent):
            raise IndexError(f"item {item} is outside 0..{len(self._parent) - 1}")

    def find(self, item: int) -> int:
        """Return the representative of the component holding ``item``."""
        self._check(item)
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def unite(self, first: int, second: int) -> bool:
        """Record an edge between two items; return True if two components merged."""
        first_root = self.find(first)
        second_root = self.find(second)
        if first_root == second_root:
            self._edges[first_root] += 1
            return False
        if self._size[first_root] > self._size[second_root]:
            keep, absorb = first_root, second_root
        else:
            keep, absorb = second_root, first_root
        self._parent[absorb] = keep
        self._size[keep] += self._size[absorb]
        self._edges[keep] += self._edges[absorb] + 1
        return True

    def component_size(self, item: int) -> int:
        """Number of vertices in the component holding ``item``."""
        return self._size[self.find(item)]

    def component_edges(self, item: int) -> int:
        """Number of edges recorded in the component holding ``item``."""
        return self._edges[self.find(item)]

    def connected(self, first: int, second: int) -> bool:
        """Tell whether two items are in the same component."""
        return self.find(first) == self.find(second)


@dataclass(frozen=True)
class WeightedEdge:
    """An undirected edge with a weight."""

    first: int
    second: int
    weight: int


def _as_edge(edge: WeightedEdge | tuple[int, int, int]) -> WeightedEdge:
    if isinstance(edge, WeightedEdge):
        return edge
    first, second, weight = edge
    return WeightedEdge(first, second, weight)


def kruskal(
    vertex_count: int, edges: Iterable[WeightedEdge | tuple[int, int, int]]
) -> tuple[int, list[tuple[int, int]]]:
    """Return the cost of a minimum spanning forest and the edges it uses."""
    forest = DisjointSet(vertex_count)
    ordered = sorted((_as_edge(edge) for edge in edges), key=attrgetter("weight"))
    cost = 0
    chosen: list[tuple[int, int]] = []
    for edge in ordered:
        if forest.unite(edge.first, edge.second):
            cost += edge.weight
            chosen.append((edge.first, edge.second))
    return cost, chosen