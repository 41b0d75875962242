"""Undirected graphs stored as adjacency lists, and traversals over them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Mapping, Sequence
from enum import Enum
from typing import Union

Adjacency = Union[Sequence[Sequence[int]], Mapping[int, Sequence[int]]]


class UndirectedGraph:
    """An undirected graph over the vertices 0 .. vertices-1."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("vertex count must be non-negative")
        self._adjacency: list[list[int]] = [[] for _ in range(vertices)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise IndexError(f"vertex {vertex} is outside 0..{len(self._adjacency) - 1}")

    def add_edge(self, first: int, second: int) -> None:
        """Join two vertices with an edge."""
        self._check(first)
        self._check(second)
        self._adjacency[first].append(second)
        self._adjacency[second].append(first)

    def neighbours(self, vertex: int) -> tuple[int, ...]:
        """Neighbours of ``vertex`` in the order their edges were added."""
        self._check(vertex)
        return tuple(self._adjacency[vertex])

    def describe(self) -> str:
        """One line per vertex: the vertex, an arrow and its neighbours."""
        return "\n".join(
            f"{vertex}->" + " ".join(map(str, adjacent))
            for vertex, adjacent in enumerate(self._adjacency)
        )

    def dfs_order(self) -> list[int]:
        """Depth-first visiting order covering every component."""
        visited = [False] * len(self._adjacency)
        order: list[int] = []
        for root in range(len(self._adjacency)):
            if visited[root]:
                continue
            visited[root] = True
            order.append(root)
            stack: list[Iterator[int]] = [iter(self._adjacency[root])]
            while stack:
                for following in stack[-1]:
                    if not visited[following]:
                        visited[following] = True
                        order.append(following)
                        stack.append(iter(self._adjacency[following]))
                        break
                else:
                    stack.pop()
        return order

    def bfs_order(self) -> list[int]:
        """Breadth-first visiting order covering every component."""
        visited = [False] * len(self._adjacency)
        order: list[int] = []
        for root in range(len(self._adjacency)):
            if visited[root]:
                continue
            visited[root] = True
            queue = deque([root])
            while queue:
                vertex = queue.popleft()
                order.append(vertex)
                for following in self._adjacency[vertex]:
                    if not visited[following]:
                        visited[following] = True
                        queue.append(following)
        return order

    def has_cycle(self) -> bool:
        """Tell whether any component contains a cycle."""
        visited = [False] * len(self._adjacency)
        for root in range(len(self._adjacency)):
            if visited[root]:
                continue
            visited[root] = True
            stack: list[tuple[int, int | None, Iterator[int]]] = [
                (root, None, iter(self._adjacency[root]))
            ]
            while stack:
                vertex, parent, pending = stack[-1]
                for following in pending:
                    if not visited[following]:
                        visited[following] = True
                        stack.append((following, vertex, iter(self._adjacency[following])))
                        break
                    if following != parent:
                        return True
                else:
                    stack.pop()
        return False


def build_adjacency(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Adjacency lists for vertices 0 .. vertex_count, each edge stored both ways."""
    adjacency: list[list[int]] = [[] for _ in range(vertex_count + 1)]
    for first, second in edges:
        for vertex in (first, second):
            if not 0 <= vertex <= vertex_count:
                raise IndexError(f"vertex {vertex} is outside 0..{vertex_count}")
        adjacency[first].append(second)
        adjacency[second].append(first)
    return adjacency


def is_bipartite(adjacency: Adjacency, start: int) -> bool:
    """Tell whether the component reachable from ``start`` can be two-coloured."""
    colour = {start: 0}
    stack = [start]
    while stack:
        vertex = stack.pop()
        for following in adjacency[vertex]:
            if following not in colour:
                colour[following] = colour[vertex] ^ 1
                stack.append(following)
            elif colour[following] == colour[vertex]:
                return False
    return True


def count_components(vertex_count: int, edges: Iterable[tuple[int, int]]) -> int:
    """Number of connected components among the vertices 0 .. vertex_count-1."""
    graph = UndirectedGraph(vertex_count)
    for first, second in edges:
        graph.add_edge(first, second)
    visited = [False] * vertex_count
    components = 0
    for root in range(vertex_count):
        if visited[root]:
            continue
        components += 1
        visited[root] = True
        stack = [root]
        while stack:
            for following in graph.neighbours(stack.pop()):
                if not visited[following]:
                    visited[following] = True
                    stack.append(following)
    return components


class _State(Enum):
    UNVISITED = 0
    ACTIVE = 1
    DONE = 2


def has_cycle(vertex_count: int, edges: Iterable[tuple[int, int]], directed: bool = False) -> bool:
    """Tell whether a graph on the vertices 1 .. vertex_count contains a cycle.

    For an undirected graph the edge back to a vertex's parent is not a cycle.
    """
    adjacency: list[list[int]] = [[] for _ in range(vertex_count + 1)]
    for source, target in edges:
        for vertex in (source, target):
            if not 1 <= vertex <= vertex_count:
                raise IndexError(f"vertex {vertex} is outside 1..{vertex_count}")
        adjacency[source].append(target)
        if not directed:
            adjacency[target].append(source)

    state = [_State.UNVISITED] * (vertex_count + 1)
    for root in range(1, vertex_count + 1):
        if state[root] is not _State.UNVISITED:
            continue
        state[root] = _State.ACTIVE
        stack: list[tuple[int, int | None, Iterator[int]]] = [(root, None, iter(adjacency[root]))]
        while stack:
            vertex, parent, pending = stack[-1]
            for following in pending:
                if not directed and following == parent:
                    continue
                if state[following] is _State.ACTIVE:
                    return True
                if state[following] is _State.UNVISITED:
                    state[following] = _State.ACTIVE
                    stack.append((following, vertex, iter(adjacency[following])))
                    break
            else:
                state[vertex] = _State.DONE
                stack.pop()
    return False