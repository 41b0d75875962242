"""Cycle detection in directed graphs."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def _adjacency(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for source, target in edges:
        for vertex in (source, target):
            if not 0 <= vertex < vertex_count:
                raise IndexError(f"vertex {vertex} is outside 0..{vertex_count - 1}")
        adjacency[source].append(target)
    return adjacency


def _reaches_cycle(adjacency: list[list[int]], start: int, visited: list[bool]) -> bool:
    on_path = [False] * len(adjacency)
    visited[start] = True
    on_path[start] = True
    stack: list[tuple[int, Iterator[int]]] = [(start, iter(adjacency[start]))]
    while stack:
        vertex, pending = stack[-1]
        for following in pending:
            if on_path[following]:
                return True
            if not visited[following]:
                visited[following] = True
                on_path[following] = True
                stack.append((following, iter(adjacency[following])))
                break
        else:
            on_path[vertex] = False
            stack.pop()
    return False


def has_cycle_from(vertex_count: int, edges: Iterable[tuple[int, int]], start: int = 0) -> bool:
    """Tell whether a cycle is reachable from ``start``."""
    adjacency = _adjacency(vertex_count, edges)
    if not 0 <= start < vertex_count:
        raise IndexError(f"start vertex {start} is outside 0..{vertex_count - 1}")
    return _reaches_cycle(adjacency, start, [False] * vertex_count)


def is_cyclic(vertex_count: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Tell whether the directed graph on 0 .. vertex_count-1 has any cycle."""
    adjacency = _adjacency(vertex_count, edges)
    visited = [False] * vertex_count
    return any(
        _reaches_cycle(adjacency, vertex, visited)
        for vertex in range(vertex_count)
        if not visited[vertex]
    )