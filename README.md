# algokit

A collection of classic algorithms and data structures written in plain
Python, using nothing outside the standard library. It suits study,
interview practice and small jobs where a readable implementation is handy.

## Installation

From a checkout of the project:

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.sorting` | `bubble_sort`, `insertion_sort`, `selection_sort`, `merge_sort`, `quick_sort`, `heap_sort`, `radix_sort`, `bucket_sort`, `counting_sort`, `wave_sort` |
| `algokit.searching` | `binary_search`, `linear_search`, `kth_largest_and_smallest` |
| `algokit.strings` | `swap_case`, `is_scramble`, `reverse_with_stack`, `reverse_each_word`, `wildcard_match` |
| `algokit.numbers` | `to_decimal`, `from_decimal`, `get_bit`, `set_bit`, `clear_bit`, `count_ones`, `is_power_of_two`, `subsets`, `is_prime`, `minimizing_shift` |
| `algokit.dynamic` | `max_subarray_sum`, `cut_rod`, `subset_sums` |
| `algokit.array_list` | `ArrayList`, a growable list whose head is the newest item |
| `algokit.disjoint_set` | `DisjointSet`, `WeightedEdge`, `kruskal` |
| `algokit.undirected` | `UndirectedGraph`, `build_adjacency`, `is_bipartite`, `count_components`, `has_cycle` |
| `algokit.directed` | `has_cycle_from`, `is_cyclic` |
| `algokit.grid` | `flood_fill` |
| `algokit.graph` | `Graph` and `NoPathError` |
| `algokit.tsp` | `tsp_table`, `tsp_path` |
| `algokit.kosaraju` | `finishing_order`, `kosaraju_components`, `mother_vertex` |
| `algokit.petersen` | `petersen_walk` |
| `algokit.matrix` | `floyd_warshall_matrix`, `format_distances`, `prim_mst_matrix` |

## Conventions

- The sorting functions take any iterable and return a new sorted list
  (`counting_sort` returns a new string); the argument is left untouched.
  `bucket_sort` accepts values in `[0, 1)` only, `radix_sort` non-negative
  integers only, and `counting_sort` characters below code point 256; other
  input raises `ValueError`.
- `binary_search` and `linear_search` return an index, and raise
  `ValueError` when the key is absent.
- Errors are raised as exceptions: `ValueError` for bad arguments,
  `IndexError` for a vertex or position out of range, and
  `algokit.graph.NoPathError` (a `LookupError`) when a requested path, tour,
  walk or spanning tree does not exist.
- `Graph` numbers its nodes from 1. Results indexed by node are lists of
  length `node_count + 1` with slot 0 unused; a missing distance is
  `math.inf`, a distance spoilt by a negative cycle is `-math.inf`, and a
  missing predecessor is `None`.
- `UndirectedGraph`, `algokit.directed` and `kruskal` number vertices from 0.

## A quick tour

```python
from algokit.sorting import merge_sort
from algokit.numbers import is_prime, to_decimal
from algokit.strings import is_scramble, wildcard_match
from algokit.dynamic import max_subarray_sum, cut_rod

merge_sort([12, 11, 13, 5, 6, 7])             # [5, 6, 7, 11, 12, 13]
is_prime(15)                                  # False
to_decimal("1A", 16)                          # 26
is_scramble("great", "rgeat")                 # True
wildcard_match("adceb", "*a*b")               # True
max_subarray_sum([-2, -3, 4, -1, -2, 1, 5, -3])  # 7
cut_rod([2, 5, 7, 8, 10], 5)                  # 12
```

### Graphs

`Graph(node_count, directed=False)` is built edge by edge with
`add_edge(source, target, weight=1)`. It offers `bfs` with
`reconstruct_path`, `count_components`, `articulation_points`, `bridges`,
`bellman_ford`, `dijkstra` with `get_path`, `floyd_warshall`,
`prims_mst` (undirected graphs), `has_eulerian_path` and `eulerian_path`
(directed graphs), `strongly_connected_components`, `topological_sort` and
`dag_shortest_path` (directed graphs).

```python
from algokit.graph import Graph

graph = Graph(4, directed=True)
graph.add_edge(1, 2, 5)
graph.add_edge(2, 3, 3)
graph.add_edge(3, 4, 1)
graph.topological_sort()          # [1, 2, 3, 4]
graph.bellman_ford(1)             # [inf, 0, 5, 8, 9]

distances, previous = graph.dijkstra(1)
graph.get_path(previous, 1, 4)    # [1, 2, 3, 4]
```

Dense cost matrices, with `math.inf` for a missing edge, go to
`algokit.matrix`; `format_distances` renders a distance matrix as text.
`tsp_path(distances, start)` returns the length of the shortest tour and the
tour itself. The functions in `algokit.kosaraju` accept adjacency given as a
list of lists or as a mapping.

### Disjoint sets

```python
from algokit.disjoint_set import DisjointSet, kruskal

components = DisjointSet(5)
components.unite(0, 1)            # True: two components merged
components.unite(1, 2)            # True
components.connected(0, 2)        # True
components.component_size(0)      # 3
components.component_edges(0)     # 2

kruskal(3, [(0, 1, 4), (1, 2, 1), (0, 2, 3)])  # (4, [(1, 2), (0, 2)])
```

## What it does not do

algokit is a library only. It has no command-line program, and its
functions return their results rather than printing them; formatting output
is left to the caller, apart from `format_distances` and
`UndirectedGraph.describe`, which return text.