"""Classic algorithms and data structures in plain Python."""

__version__ = "0.1.0"

__all__ = [
    "array_list",
    "directed",
    "disjoint_set",
    "dynamic",
    "graph",
    "grid",
    "kosaraju",
    "matrix",
    "numbers",
    "petersen",
    "searching",
    "sorting",
    "strings",
    "tsp",
    "undirected",
]