"""Kosaraju's strongly connected components and mother vertices."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Hashable, Iterable, Iterator, Mapping, Sequence
from typing import Any, Union

Adjacency = Union[Sequence[Sequence[Any]], Mapping[Any, Sequence[Any]]]


def _neighbours(adjacency: Adjacency, vertex: Any) -> Sequence[Any]:
    if isinstance(adjacency, Mapping):
        return adjacency.get(vertex, ())
    return adjacency[vertex]


def finishing_order(adjacency: Adjacency, vertices: Iterable[Hashable]) -> list[Any]:
    """Vertices in the order a depth-first search over ``vertices`` finishes them."""
    visited: set[Any] = set()
    order: list[Any] = []
    for root in vertices:
        if root in visited:
            continue
        visited.add(root)
        stack: list[tuple[Any, Iterator[Any]]] = [(root, iter(_neighbours(adjacency, root)))]
        while stack:
            node, pending = stack[-1]
            for child in pending:
                if child not in visited:
                    visited.add(child)
                    stack.append((child, iter(_neighbours(adjacency, child))))
                    break
            else:
                stack.pop()
                order.append(node)
    return order


def kosaraju_components(adjacency: Adjacency, vertices: Iterable[Hashable]) -> list[list[Any]]:
    """Strongly connected components, each listed in breadth-first order."""
    nodes = list(vertices)
    order = finishing_order(adjacency, nodes)
    reverse: defaultdict[Any, list[Any]] = defaultdict(list)
    for node in nodes:
        for child in _neighbours(adjacency, node):
            reverse[child].append(node)

    assigned: set[Any] = set()
    components: list[list[Any]] = []
    for root in reversed(order):
        if root in assigned:
            continue
        assigned.add(root)
        queue = deque([root])
        component: list[Any] = []
        while queue:
            node = queue.popleft()
            component.append(node)
            for parent in reverse[node]:
                if parent not in assigned:
                    assigned.add(parent)
                    queue.append(parent)
        components.append(component)
    return components


def mother_vertex(adjacency: Adjacency, vertices: Iterable[Hashable]) -> Any | None:
    """A vertex from which every vertex can be reached, or None if there is none."""
    nodes = list(vertices)
    order = finishing_order(adjacency, nodes)
    if not order:
        return None
    candidate = order[-1]
    reached = set(finishing_order(adjacency, [candidate]))
    return candidate if reached.issuperset(nodes) else None