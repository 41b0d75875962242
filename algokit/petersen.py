"""Walks in the Petersen graph that spell a word over the letters A to E.

Outer vertices 0..4 and inner vertices 5..9 both carry the letters A..E, so
vertex ``v`` spells the letter ``"ABCDE"[v % 5]``.
"""

from __future__ import annotations

from algokit.graph import NoPathError

PETERSEN_EDGES: tuple[tuple[int, int], ...] = (
    (0, 1), (1, 2), (2, 3), (3, 4), (4, 0),
    (0, 5), (1, 6), (2, 7), (3, 8), (4, 9),
    (5, 7), (7, 9), (9, 6), (6, 8), (8, 5),
)

_ADJACENT = frozenset(frozenset(edge) for edge in PETERSEN_EDGES)
_LETTERS = "ABCDE"


def _walk(letters: str, start: int) -> str | None:
    vertex = start
    visited = [str(vertex)]
    for letter in letters[1:]:
        outer = _LETTERS.index(letter)
        for candidate in (outer, outer + 5):
            if frozenset((vertex, candidate)) in _ADJACENT:
                vertex = candidate
                break
        else:
            return None
        visited.append(str(vertex))
    return "".join(visited)


def petersen_walk(letters: str) -> str:
    """Return the vertices, as digits, of a walk spelling ``letters``.

    Outer vertices are preferred at each step. Raises NoPathError when no walk exists.
    """
    if not letters:
        raise ValueError("the word must not be empty")
    unknown = set(letters) - set(_LETTERS)
    if unknown:
        raise ValueError(f"letters must be among {_LETTERS}, got {sorted(unknown)}")
    first = _LETTERS.index(letters[0])
    for start in (first, first + 5):
        walk = _walk(letters, start)
        if walk is not None:
            return walk
    raise NoPathError(f"no walk spells {letters!r}")