import math
from collections import Counter

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from algokit.disjoint_set import kruskal
from algokit.graph import Graph, NoPathError
from algokit.undirected import count_components as undirected_count_components


def build(node_count, edges, directed=False):
    graph = Graph(node_count, directed)
    for source, target, weight in edges:
        graph.add_edge(source, target, weight)
    return graph


@st.composite
def graphs(draw, max_nodes=7, directed=False, acyclic=False, min_weight=0):
    node_count = draw(st.integers(min_value=1, max_value=max_nodes))
    nodes = range(1, node_count + 1)
    if directed and not acyclic:
        pairs = [(a, b) for a in nodes for b in nodes if a != b]
    else:
        pairs = [(a, b) for a in nodes for b in nodes if a < b]
    chosen = draw(st.lists(st.sampled_from(pairs), unique=True)) if pairs else []
    weights = draw(
        st.lists(
            st.integers(min_value=min_weight, max_value=20),
            min_size=len(chosen),
            max_size=len(chosen),
        )
    )
    return node_count, [(a, b, w) for (a, b), w in zip(chosen, weights)]


def components(node_count, edges):
    return build(node_count, edges).count_components()


def test_add_edge_rejects_unknown_node():
    graph = Graph(3)
    with pytest.raises(IndexError):
        graph.add_edge(1, 4)
    with pytest.raises(IndexError):
        graph.add_edge(0, 2)


def test_negative_node_count_rejected():
    with pytest.raises(ValueError):
        Graph(-1)


def test_neighbours_follow_direction():
    graph = build(3, [(1, 2, 1), (3, 1, 1)], directed=True)
    assert graph.neighbours(1) == (2,)
    assert graph.neighbours(2) == ()
    undirected = build(3, [(1, 2, 1), (3, 1, 1)])
    assert undirected.neighbours(1) == (2, 3)


def test_bfs_path_on_a_line():
    graph = build(4, [(1, 2, 1), (2, 3, 1), (3, 4, 1)])
    previous = graph.bfs(1)
    assert graph.reconstruct_path(previous, 1, 4) == [1, 2, 3, 4]
    assert previous[1] is None


def test_bfs_unreachable_raises():
    graph = build(4, [(1, 2, 1), (3, 4, 1)])
    previous = graph.bfs(1)
    with pytest.raises(NoPathError):
        graph.reconstruct_path(previous, 1, 4)


@given(graphs())
def test_bfs_paths_are_walkable(data):
    node_count, edges = data
    graph = build(node_count, edges)
    previous = graph.bfs(1)
    for end in range(1, node_count + 1):
        if end != 1 and previous[end] is None:
            with pytest.raises(NoPathError):
                graph.reconstruct_path(previous, 1, end)
            continue
        path = graph.reconstruct_path(previous, 1, end)
        assert path[0] == 1 and path[-1] == end
        for first, second in zip(path, path[1:]):
            assert second in graph.neighbours(first)


@given(graphs())
def test_count_components_matches_undirected(data):
    node_count, edges = data
    graph = build(node_count, edges)
    pairs = [(a, b) for a, b, _ in edges]
    assert graph.count_components() == undirected_count_components(node_count + 1, pairs) - 1


def test_count_components_without_edges():
    assert Graph(5).count_components() == 5


def test_articulation_point_of_a_path():
    graph = build(3, [(1, 2, 1), (2, 3, 1)])
    assert graph.articulation_points() == [2]


def test_cycle_has_no_articulation_points_or_bridges():
    graph = build(4, [(1, 2, 1), (2, 3, 1), (3, 4, 1), (4, 1, 1)])
    assert graph.articulation_points() == []
    assert graph.bridges() == []


@settings(max_examples=60)
@given(graphs())
def test_articulation_points_disconnect(data):
    node_count, edges = data
    graph = build(node_count, edges)
    base = graph.count_components()
    expected = []
    for node in range(1, node_count + 1):
        remaining = [e for e in edges if node not in e[:2]]
        if components(node_count, remaining) - 1 > base:
            expected.append(node)
    assert graph.articulation_points() == expected


@settings(max_examples=60)
@given(graphs())
def test_bridges_disconnect(data):
    node_count, edges = data
    graph = build(node_count, edges)
    base = graph.count_components()
    expected = {
        (a, b)
        for a, b, w in edges
        if components(node_count, [e for e in edges if e != (a, b, w)]) > base
    }
    found = [tuple(sorted(bridge)) for bridge in graph.bridges()]
    assert len(found) == len(set(found))
    assert set(found) == expected


def test_bellman_ford_negative_cycle():
    graph = build(4, [(1, 2, 1), (2, 3, -2), (3, 2, 1), (1, 4, 5)], directed=True)
    dist = graph.bellman_ford(1)
    assert dist[1] == 0
    assert dist[4] == 5
    assert dist[2] == -math.inf
    assert dist[3] == -math.inf


def test_bellman_ford_unreachable_is_infinite():
    graph = build(3, [(1, 2, 4)], directed=True)
    dist = graph.bellman_ford(1)
    assert dist[3] == math.inf
    assert dist[2] == 4


@given(graphs(directed=True))
def test_bellman_ford_agrees_with_dijkstra(data):
    node_count, edges = data
    graph = build(node_count, edges, directed=True)
    dist, _ = graph.dijkstra(1)
    assert graph.bellman_ford(1)[1:] == dist[1:]


@given(graphs())
def test_dijkstra_paths_sum_to_distances(data):
    node_count, edges = data
    graph = build(node_count, edges)
    weights = {frozenset((a, b)): w for a, b, w in edges}
    dist, previous = graph.dijkstra(1)
    assert dist[1] == 0
    for end in range(1, node_count + 1):
        if dist[end] == math.inf:
            assert previous[end] is None
            continue
        path = graph.get_path(previous, 1, end)
        total = sum(weights[frozenset(pair)] for pair in zip(path, path[1:]))
        assert total == dist[end]


def test_get_path_rejects_wrong_start():
    graph = build(3, [(1, 2, 1), (2, 3, 1)])
    _, previous = graph.dijkstra(1)
    with pytest.raises(NoPathError):
        graph.get_path(previous, 2, 3)


@given(graphs(directed=True))
def test_floyd_warshall_rows_match_dijkstra(data):
    node_count, edges = data
    graph = build(node_count, edges, directed=True)
    table = graph.floyd_warshall()
    for start in range(1, node_count + 1):
        dist, _ = graph.dijkstra(start)
        assert table[start][1:] == dist[1:]


def test_floyd_warshall_marks_negative_cycles():
    graph = build(4, [(1, 2, 1), (2, 3, -2), (3, 2, 1), (1, 4, 5)], directed=True)
    table = graph.floyd_warshall()
    assert table[1][3] == -math.inf
    assert table[1][4] == 5
    assert table[4][1] == math.inf


def test_eulerian_cycle_uses_every_edge_once():
    edges = [(1, 2, 1), (2, 3, 1), (3, 1, 1), (3, 4, 1), (4, 3, 1)]
    graph = build(4, edges, directed=True)
    assert graph.has_eulerian_path()
    path = graph.eulerian_path()
    assert len(path) == len(edges) + 1
    assert Counter(zip(path, path[1:])) == Counter((a, b) for a, b, _ in edges)


def test_eulerian_path_starts_at_surplus_node():
    edges = [(1, 2, 1), (2, 3, 1), (3, 2, 1), (2, 4, 1)]
    graph = build(4, edges, directed=True)
    path = graph.eulerian_path()
    assert path[0] == 1 and path[-1] == 4
    assert Counter(zip(path, path[1:])) == Counter((a, b) for a, b, _ in edges)


def test_no_eulerian_path_when_degrees_fail():
    graph = build(3, [(1, 2, 1), (1, 3, 1)], directed=True)
    assert not graph.has_eulerian_path()
    with pytest.raises(NoPathError):
        graph.eulerian_path()


def test_eulerian_path_on_disconnected_graph():
    graph = build(4, [(1, 2, 1), (2, 1, 1), (3, 4, 1), (4, 3, 1)], directed=True)
    assert graph.has_eulerian_path()
    with pytest.raises(NoPathError):
        graph.eulerian_path()


def test_eulerian_path_needs_directed_graph():
    with pytest.raises(ValueError):
        build(2, [(1, 2, 1)]).has_eulerian_path()


@st.composite
def connected_graphs(draw):
    node_count, edges = draw(graphs())
    chain = [
        (node, node + 1, draw(st.integers(min_value=0, max_value=20)))
        for node in range(1, node_count)
    ]
    return node_count, edges + chain


@given(connected_graphs())
def test_prims_matches_kruskal(data):
    node_count, edges = data
    graph = build(node_count, edges)
    cost, tree = graph.prims_mst()
    expected_cost, _ = kruskal(node_count + 1, edges)
    assert cost == expected_cost
    assert sum(len(adjacent) for adjacent in tree) == 2 * (node_count - 1)


def test_prims_disconnected_raises():
    with pytest.raises(NoPathError):
        build(3, [(1, 2, 1)]).prims_mst()


def test_prims_needs_undirected_graph():
    with pytest.raises(ValueError):
        build(2, [(1, 2, 1)], directed=True).prims_mst()


def test_strongly_connected_components_example():
    edges = [
        (1, 2), (2, 3), (3, 1), (3, 5), (3, 4),
        (4, 6), (5, 6), (6, 8), (7, 6), (8, 7),
    ]
    graph = build(8, [(a, b, 1) for a, b in edges], directed=True)
    found = {frozenset(component) for component in graph.strongly_connected_components()}
    assert found == {frozenset({1, 2, 3}), frozenset({4}), frozenset({5}), frozenset({6, 7, 8})}


@settings(max_examples=60)
@given(graphs(directed=True))
def test_strong_components_are_mutual_reachability(data):
    node_count, edges = data
    graph = build(node_count, edges, directed=True)
    reach = {}
    for start in range(1, node_count + 1):
        previous = graph.bfs(start)
        reach[start] = {n for n in range(1, node_count + 1) if n == start or previous[n] is not None}
    found = graph.strongly_connected_components()
    assert sorted(n for component in found for n in component) == list(range(1, node_count + 1))
    label = {n: index for index, component in enumerate(found) for n in component}
    for first in range(1, node_count + 1):
        for second in range(1, node_count + 1):
            mutual = second in reach[first] and first in reach[second]
            assert mutual == (label[first] == label[second])


@given(graphs(directed=True, acyclic=True))
def test_topological_sort_respects_edges(data):
    node_count, edges = data
    graph = build(node_count, edges, directed=True)
    order = graph.topological_sort()
    assert sorted(order) == list(range(1, node_count + 1))
    position = {node: index for index, node in enumerate(order)}
    for source, target, _ in edges:
        assert position[source] < position[target]


@given(graphs(directed=True, acyclic=True, min_weight=-10))
def test_dag_shortest_path_matches_bellman_ford(data):
    node_count, edges = data
    graph = build(node_count, edges, directed=True)
    start = graph.topological_sort()[0]
    dist, previous = graph.dag_shortest_path()
    assert dist[1:] == graph.bellman_ford(start)[1:]
    for end in range(1, node_count + 1):
        if dist[end] != math.inf:
            assert graph.get_path(previous, start, end)[-1] == end


def test_dag_shortest_path_needs_directed_graph():
    with pytest.raises(ValueError):
        build(2, [(1, 2, 1)]).dag_shortest_path()