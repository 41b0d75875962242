"""Flood fill on a grid of pixel values."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def flood_fill(
    image: Sequence[Sequence[int]], row: int, column: int, new_color: int
) -> list[list[int]]:
    """Return a copy of ``image`` with the 4-connected region at (row, column) recoloured."""
    grid = [list(line) for line in image]
    if not 0 <= row < len(grid) or not 0 <= column < len(grid[row]):
        raise IndexError(f"({row}, {column}) is outside the image")
    target = grid[row][column]
    if target == new_color:
        return grid
    grid[row][column] = new_color
    queue = deque([(row, column)])
    while queue:
        current_row, current_column = queue.popleft()
        for row_step, column_step in _STEPS:
            next_row = current_row + row_step
            next_column = current_column + column_step
            if (
                0 <= next_row < len(grid)
                and 0 <= next_column < len(grid[next_row])
                and grid[next_row][next_column] == target
            ):
                grid[next_row][next_column] = new_color
                queue.append((next_row, next_column))
    return grid