"""Dynamic programming over rectangular grids."""

from __future__ import annotations

from typing import Sequence


def unique_paths(m: int, n: int) -> int:
    """Number of right/down paths across an m by n grid."""
    if m < 1 or n < 1:
        raise ValueError("the grid must have at least one row and one column")
    row = [1] * n
    for _ in range(1, m):
        for j in range(1, n):
            row[j] += row[j - 1]
    return row[-1]


def unique_paths_with_obstacles(grid: Sequence[Sequence[int]]) -> int:
    """Number of right/down paths across a grid where cells holding 1 are blocked."""
    if not grid or not grid[0]:
        return 0
    row: list[int] = []
    open_so_far = True
    for cell in grid[0]:
        open_so_far = open_so_far and cell == 0
        row.append(1 if open_so_far else 0)
    for cells in grid[1:]:
        if cells[0] != 0:
            row[0] = 0
        for j in range(1, len(row)):
            row[j] = row[j] + row[j - 1] if cells[j] == 0 else 0
    return row[-1]


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Smallest sum along a right/down path from the top-left to the bottom-right."""
    if not grid or not grid[0]:
        raise ValueError("the grid must not be empty")
    row: list[int] = []
    for value in grid[0]:
        row.append(value + (row[-1] if row else 0))
    for cells in grid[1:]:
        row[0] += cells[0]
        for j in range(1, len(row)):
            row[j] = min(row[j], row[j - 1]) + cells[j]
    return row[-1]