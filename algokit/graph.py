"""A general weighted graph over the nodes 1 .. node_count and the classic algorithms on it.

Results indexed by node are lists of length ``node_count + 1``; slot 0 is unused.
Missing distances are ``math.inf``, distances spoilt by a negative cycle are ``-math.inf``,
and a missing predecessor is ``None``.
"""

from __future__ import annotations

import heapq
import itertools
import math
from collections.abc import Iterator, Sequence

INF = math.inf


class NoPathError(LookupError):
    """Raised when a requested path, tour or tree does not exist."""


class Graph:
    """A weighted graph, directed or undirected, over the nodes 1 .. node_count."""

    def __init__(self, node_count: int, directed: bool = False) -> None:
        if node_count < 0:
            raise ValueError("node count must be non-negative")
        self.node_count = node_count
        self.directed = directed
        self._adjacency: list[list[tuple[int, int]]] = [[] for _ in range(node_count + 1)]
        self._edges: list[tuple[int, int, int]] = []

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"{type(self).__name__}({self.node_count} nodes, {len(self._edges)} {kind} edges)"

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    @property
    def _nodes(self) -> range:
        return range(1, self.node_count + 1)

    def _check(self, node: int) -> None:
        if not 1 <= node <= self.node_count:
            raise IndexError(f"node {node} is outside 1..{self.node_count}")

    def add_edge(self, source: int, target: int, weight: int = 1) -> None:
        """Add an edge; in an undirected graph it can be walked both ways."""
        self._check(source)
        self._check(target)
        self._edges.append((source, target, weight))
        self._adjacency[source].append((target, weight))
        if not self.directed:
            self._adjacency[target].append((source, weight))

    def neighbours(self, node: int) -> tuple[int, ...]:
        """Nodes reachable over one edge from ``node``, in insertion order."""
        self._check(node)
        return tuple(target for target, _ in self._adjacency[node])

    def _targets(self, node: int) -> Iterator[int]:
        return (target for target, _ in self._adjacency[node])

    def _arcs(self) -> Iterator[tuple[int, int, int]]:
        for source, target, weight in self._edges:
            yield source, target, weight
            if not self.directed:
                yield target, source, weight

    # Traversal -----------------------------------------------------------

    def bfs(self, start: int) -> list[int | None]:
        """Breadth-first search; return each node's predecessor on a shortest hop path."""
        self._check(start)
        previous: list[int | None] = [None] * (self.node_count + 1)
        visited = [False] * (self.node_count + 1)
        visited[start] = True
        queue = [start]
        for node in queue:
            for child in self._targets(node):
                if not visited[child]:
                    visited[child] = True
                    previous[child] = node
                    queue.append(child)
        return previous

    @staticmethod
    def _walk_back(previous: Sequence[int | None], start: int, end: int) -> list[int]:
        path = [end]
        node = end
        while previous[node] is not None:
            node = previous[node]  # type: ignore[assignment]
            path.append(node)
            if len(path) > len(previous):
                raise ValueError("predecessor list contains a cycle")
        path.reverse()
        if path[0] != start:
            raise NoPathError(f"no path from {start} to {end}")
        return path

    def reconstruct_path(
        self, previous: Sequence[int | None], start: int, end: int
    ) -> list[int]:
        """Path from ``start`` to ``end`` following the predecessors found by :meth:`bfs`."""
        return self._walk_back(previous, start, end)

    def get_path(self, previous: Sequence[int | None], start: int, end: int) -> list[int]:
        """Path from ``start`` to ``end`` following a shortest-path predecessor list."""
        return self._walk_back(previous, start, end)

    def count_components(self) -> int:
        """Number of trees in a depth-first forest covering every node."""
        visited = [False] * (self.node_count + 1)
        components = 0
        for root in self._nodes:
            if visited[root]:
                continue
            components += 1
            visited[root] = True
            stack = [root]
            while stack:
                for child in self._targets(stack.pop()):
                    if not visited[child]:
                        visited[child] = True
                        stack.append(child)
        return components

    # Low-link analysis -----------------------------------------------------

    def _low_link(self) -> tuple[set[int], list[tuple[int, int]]]:
        ids: list[int | None] = [None] * (self.node_count + 1)
        low = [0] * (self.node_count + 1)
        counter = itertools.count()
        articulation: set[int] = set()
        bridges: list[tuple[int, int]] = []
        for root in self._nodes:
            if ids[root] is not None:
                continue
            ids[root] = low[root] = next(counter)
            root_children = 0
            stack: list[tuple[int, int | None, Iterator[int]]] = [
                (root, None, self._targets(root))
            ]
            while stack:
                node, parent, pending = stack[-1]
                for child in pending:
                    if child == parent:
                        continue
                    child_id = ids[child]
                    if child_id is None:
                        ids[child] = low[child] = next(counter)
                        if node == root:
                            root_children += 1
                        stack.append((child, node, self._targets(child)))
                        break
                    low[node] = min(low[node], child_id)
                else:
                    stack.pop()
                    if parent is None:
                        continue
                    low[parent] = min(low[parent], low[node])
                    parent_id = ids[parent]
                    assert parent_id is not None
                    if parent_id < low[node]:
                        bridges.append((parent, node))
                    if parent_id <= low[node] and parent != root:
                        articulation.add(parent)
            if root_children > 1:
                articulation.add(root)
        return articulation, bridges

    def articulation_points(self) -> list[int]:
        """Nodes whose removal disconnects their component, in ascending order."""
        articulation, _ = self._low_link()
        return sorted(articulation)

    def bridges(self) -> list[tuple[int, int]]:
        """Edges whose removal disconnects their component, as (parent, child) pairs."""
        _, bridges = self._low_link()
        return bridges

    # Shortest paths --------------------------------------------------------

    def bellman_ford(self, start: int) -> list[float]:
        """Single-source distances that tolerate negative weights.

        Nodes whose distance can be lowered without bound get ``-inf``.
        """
        self._check(start)
        dist: list[float] = [INF] * (self.node_count + 1)
        dist[start] = 0
        arcs = list(self._arcs())
        rounds = max(self.node_count - 1, 0)
        for _ in range(rounds):
            for source, target, weight in arcs:
                if dist[source] + weight < dist[target]:
                    dist[target] = dist[source] + weight
        for _ in range(rounds):
            for source, target, weight in arcs:
                if dist[source] + weight < dist[target]:
                    dist[target] = -INF
        return dist

    def dijkstra(self, start: int) -> tuple[list[float], list[int | None]]:
        """Distances and predecessors from ``start`` for non-negative weights."""
        self._check(start)
        dist: list[float] = [INF] * (self.node_count + 1)
        previous: list[int | None] = [None] * (self.node_count + 1)
        visited = [False] * (self.node_count + 1)
        dist[start] = 0
        heap: list[tuple[float, int]] = [(0, start)]
        while heap:
            distance, node = heapq.heappop(heap)
            if dist[node] < distance:
                continue
            visited[node] = True
            for child, weight in self._adjacency[node]:
                if visited[child]:
                    continue
                candidate = dist[node] + weight
                if candidate < dist[child]:
                    dist[child] = candidate
                    previous[child] = node
                    heapq.heappush(heap, (candidate, child))
        return dist, previous

    def floyd_warshall(self) -> list[list[float]]:
        """All-pairs distances; pairs touched by a negative cycle get ``-inf``."""
        size = self.node_count + 1
        dist: list[list[float]] = [[INF] * size for _ in range(size)]
        for node in self._nodes:
            dist[node][node] = 0
        for source, target, weight in self._arcs():
            dist[source][target] = min(dist[source][target], weight)
        for via in self._nodes:
            through = dist[via]
            for row in dist[1:]:
                to_via = row[via]
                for node in self._nodes:
                    if to_via + through[node] < row[node]:
                        row[node] = to_via + through[node]
        for via in self._nodes:
            through = dist[via]
            for row in dist[1:]:
                to_via = row[via]
                for node in self._nodes:
                    if to_via + through[node] < row[node]:
                        row[node] = -INF
        return dist

    # Eulerian paths --------------------------------------------------------

    def _degrees(self) -> tuple[list[int], list[int]]:
        if not self.directed:
            raise ValueError("Eulerian paths are computed for directed graphs")
        in_degree = [0] * (self.node_count + 1)
        out_degree = [len(adjacent) for adjacent in self._adjacency]
        for _, target, _ in self._edges:
            in_degree[target] += 1
        return in_degree, out_degree

    def has_eulerian_path(self) -> bool:
        """Tell whether the degrees allow a path that uses every edge once."""
        in_degree, out_degree = self._degrees()
        starts = ends = 0
        for node in self._nodes:
            surplus = out_degree[node] - in_degree[node]
            if abs(surplus) > 1:
                return False
            starts += surplus == 1
            ends += surplus == -1
        return (starts, ends) in ((0, 0), (1, 1))

    def eulerian_path(self) -> list[int]:
        """A path that uses every edge exactly once, as a list of nodes."""
        if not self.has_eulerian_path():
            raise NoPathError("no Eulerian path")
        if not self._edges:
            return []
        in_degree, out_degree = self._degrees()
        start = 0
        for node in self._nodes:
            if out_degree[node] - in_degree[node] == 1:
                start = node
                break
            if out_degree[node]:
                start = node
        used = [0] * (self.node_count + 1)
        stack = [start]
        path: list[int] = []
        while stack:
            node = stack[-1]
            if used[node] < len(self._adjacency[node]):
                stack.append(self._adjacency[node][used[node]][0])
                used[node] += 1
            else:
                path.append(stack.pop())
        path.reverse()
        if len(path) != len(self._edges) + 1:
            raise NoPathError("graph is disconnected")
        return path

    # Trees and orderings ---------------------------------------------------

    def prims_mst(self) -> tuple[int, list[list[int]]]:
        """Minimum spanning tree: its cost and its adjacency lists."""
        if self.directed:
            raise ValueError("spanning trees are computed for undirected graphs")
        tree: list[list[int]] = [[] for _ in range(self.node_count + 1)]
        if self.node_count == 0:
            return 0, tree
        visited = [False] * (self.node_count + 1)
        order = itertools.count()
        heap: list[tuple[int, int, int, int | None]] = [(0, next(order), 1, None)]
        cost = 0
        while heap:
            weight, _, node, parent = heapq.heappop(heap)
            if visited[node]:
                continue
            visited[node] = True
            if parent is not None:
                cost += weight
                tree[parent].append(node)
                tree[node].append(parent)
            for child, child_weight in self._adjacency[node]:
                if not visited[child]:
                    heapq.heappush(heap, (child_weight, next(order), child, node))
        if not all(visited[1:]):
            raise NoPathError("graph is disconnected")
        return cost, tree

    def strongly_connected_components(self) -> list[list[int]]:
        """Strongly connected components (Tarjan), each in the order it was popped."""
        ids: list[int | None] = [None] * (self.node_count + 1)
        low = [0] * (self.node_count + 1)
        on_stack = [False] * (self.node_count + 1)
        pending_nodes: list[int] = []
        components: list[list[int]] = []
        counter = itertools.count()

        def visit(node: int) -> None:
            ids[node] = low[node] = next(counter)
            pending_nodes.append(node)
            on_stack[node] = True

        for root in self._nodes:
            if ids[root] is not None:
                continue
            visit(root)
            work: list[tuple[int, Iterator[int]]] = [(root, self._targets(root))]
            while work:
                node, children = work[-1]
                for child in children:
                    child_id = ids[child]
                    if child_id is None:
                        visit(child)
                        work.append((child, self._targets(child)))
                        break
                    if on_stack[child]:
                        low[node] = min(low[node], child_id)
                else:
                    work.pop()
                    if work:
                        parent = work[-1][0]
                        low[parent] = min(low[parent], low[node])
                    if low[node] == ids[node]:
                        component = []
                        while True:
                            member = pending_nodes.pop()
                            on_stack[member] = False
                            component.append(member)
                            if member == node:
                                break
                        components.append(component)
        return components

    def topological_sort(self) -> list[int]:
        """Nodes in reverse depth-first finishing order."""
        visited = [False] * (self.node_count + 1)
        finished: list[int] = []
        for root in self._nodes:
            if visited[root]:
                continue
            visited[root] = True
            stack: list[tuple[int, Iterator[int]]] = [(root, self._targets(root))]
            while stack:
                node, children = stack[-1]
                for child in children:
                    if not visited[child]:
                        visited[child] = True
                        stack.append((child, self._targets(child)))
                        break
                else:
                    stack.pop()
                    finished.append(node)
        finished.reverse()
        return finished

    def dag_shortest_path(self) -> tuple[list[float], list[int | None]]:
        """Distances and predecessors from the first node in topological order."""
        if not self.directed:
            raise ValueError("DAG shortest paths need a directed graph")
        order = self.topological_sort()
        if not order:
            raise ValueError("graph has no nodes")
        dist: list[float] = [INF] * (self.node_count + 1)
        previous: list[int | None] = [None] * (self.node_count + 1)
        dist[order[0]] = 0
        for node in order:
            for child, weight in self._adjacency[node]:
                candidate = dist[node] + weight
                if candidate < dist[child]:
                    dist[child] = candidate
                    previous[child] = node
        return dist, previous