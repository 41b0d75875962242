from hypothesis import given, settings
from hypothesis import strategies as st

from algokit.kosaraju import finishing_order, kosaraju_components, mother_vertex

COMPONENT_GRAPH = {
    1: [2],
    2: [3],
    3: [1, 5, 4],
    4: [6],
    5: [6],
    6: [8],
    7: [6],
    8: [7],
}

MOTHER_GRAPH = {
    0: [1, 2],
    1: [3],
    4: [1],
    6: [4, 0],
    5: [6, 2],
}


def _reachable(adjacency, start):
    return set(finishing_order(adjacency, [start]))


@st.composite
def _graphs(draw):
    size = draw(st.integers(min_value=1, max_value=7))
    adjacency = [
        draw(st.lists(st.integers(0, size - 1), max_size=3)) for _ in range(size)
    ]
    return adjacency, list(range(size))


def test_source_example_components():
    components = kosaraju_components(COMPONENT_GRAPH, range(1, 9))
    assert components == [[1, 3, 2], [4], [5], [6, 7, 8]]


def test_finishing_order_is_permutation_and_root_finishes_last():
    order = finishing_order(COMPONENT_GRAPH, range(1, 9))
    assert sorted(order) == list(range(1, 9))
    assert order[-1] == 1


def test_finishing_order_of_dag_reverses_to_topological_order():
    dag = {0: [1, 2], 1: [3], 2: [3], 3: [], 4: [0]}
    order = finishing_order(dag, range(5))
    position = {node: index for index, node in enumerate(order)}
    for source, targets in dag.items():
        for target in targets:
            assert position[target] < position[source]


def test_mother_vertex_source_example():
    assert mother_vertex(MOTHER_GRAPH, range(7)) == 5


def test_no_mother_vertex_in_disconnected_graph():
    assert mother_vertex({0: [1], 2: []}, [0, 1, 2]) is None


def test_mother_vertex_of_empty_graph():
    assert mother_vertex({}, []) is None


def test_sequence_adjacency_is_accepted():
    adjacency = [[1], [2], [0], []]
    components = kosaraju_components(adjacency, range(4))
    assert sorted(sorted(component) for component in components) == [[0, 1, 2], [3]]


@settings(max_examples=80, deadline=None)
@given(_graphs())
def test_components_partition_and_are_strongly_connected(case):
    adjacency, vertices = case
    components = kosaraju_components(adjacency, vertices)
    flattened = [node for component in components for node in component]
    assert sorted(flattened) == vertices
    reach = {node: _reachable(adjacency, node) for node in vertices}
    label = {node: index for index, component in enumerate(components) for node in component}
    for first in vertices:
        for second in vertices:
            mutual = second in reach[first] and first in reach[second]
            assert mutual == (label[first] == label[second])


@settings(max_examples=80, deadline=None)
@given(_graphs())
def test_mother_vertex_reaches_everything(case):
    adjacency, vertices = case
    mother = mother_vertex(adjacency, vertices)
    has_one = any(_reachable(adjacency, node) >= set(vertices) for node in vertices)
    assert (mother is not None) == has_one
    if mother is not None:
        assert _reachable(adjacency, mother) >= set(vertices)