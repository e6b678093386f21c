"""Problems over square integer grids."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

__all__ = ["check_x_matrix", "equal_pairs", "largest_local"]


def check_x_matrix(grid: Sequence[Sequence[int]]) -> bool:
    """Return True if only the two diagonals are non-zero, and all of them are."""
    if not grid:
        return True
    width = len(grid[0])
    return all(
        (value != 0) == (i == j or i + j == width - 1)
        for i, row in enumerate(grid)
        for j, value in enumerate(row)
    )


def equal_pairs(grid: Sequence[Sequence[int]]) -> int:
    """Count (row, column) pairs holding the same values in the same order."""
    rows = Counter(tuple(row) for row in grid)
    return sum(rows[column] for column in zip(*grid))


def largest_local(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    """Maximum of every 3 x 3 window of the grid."""
    size = len(grid) - 2
    return [
        [max(max(row[j : j + 3]) for row in grid[i : i + 3]) for j in range(size)]
        for i in range(size)
    ]