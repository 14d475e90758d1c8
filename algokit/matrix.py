"""Matrix manipulation, Pascal's triangle and lattice path counting."""

from __future__ import annotations

from collections.abc import Sequence
from math import comb
from typing import Any

Matrix = list[list[Any]]


def _require_rectangular(matrix: Sequence[Sequence[Any]]) -> None:
    if matrix and any(len(row) != len(matrix[0]) for row in matrix):
        raise ValueError("all rows must have the same length")


def _require_square(matrix: Sequence[Sequence[Any]]) -> None:
    if any(len(row) != len(matrix) for row in matrix):
        raise ValueError("matrix must be square")


def set_matrix_zeroes(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Return a copy where every row and column holding a zero is all zeros."""
    _require_rectangular(matrix)
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    return [
        [0 if i in zero_rows or j in zero_cols else value for j, value in enumerate(row)]
        for i, row in enumerate(matrix)
    ]


def rotate_matrix(matrix: Sequence[Sequence[Any]]) -> Matrix:
    """Return a new square matrix rotated 90 degrees clockwise."""
    _require_square(matrix)
    return [list(column) for column in zip(*reversed(matrix))]


def rotate_matrix_in_place(matrix: Matrix) -> Matrix:
    """Rotate a square matrix 90 degrees clockwise in place and return it."""
    _require_square(matrix)
    matrix[:] = [list(column) for column in zip(*reversed(matrix))]
    return matrix


def rotate_rings_by_one(matrix: Sequence[Sequence[Any]]) -> Matrix:
    """Return a copy with every ring shifted one place clockwise.

    A ring that is a single row or column, and everything inside it, is
    left where it is.
    """
    _require_rectangular(matrix)
    grid = [list(row) for row in matrix]
    if not grid:
        return grid
    row, col = 0, 0
    last_row, last_col = len(grid), len(grid[0])
    while row < last_row and col < last_col:
        if row + 1 == last_row or col + 1 == last_col:
            break
        carried = grid[row + 1][col]
        for i in range(col, last_col):
            grid[row][i], carried = carried, grid[row][i]
        row += 1
        for i in range(row, last_row):
            grid[i][last_col - 1], carried = carried, grid[i][last_col - 1]
        last_col -= 1
        if row < last_row:
            for i in range(last_col - 1, col - 1, -1):
                grid[last_row - 1][i], carried = carried, grid[last_row - 1][i]
        last_row -= 1
        if col < last_col:
            for i in range(last_row - 1, row - 1, -1):
                grid[i][col], carried = carried, grid[i][col]
        col += 1
    return grid


def pascal_value(row: int, col: int) -> int:
    """Return the entry at 1-based (*row*, *col*) of Pascal's triangle."""
    if not 1 <= col <= row:
        raise ValueError("need 1 <= col <= row")
    return comb(row - 1, col - 1)


def pascal_row(n: int) -> list[int]:
    """Return the *n*-th (1-based) row of Pascal's triangle."""
    if n < 1:
        raise ValueError("row number must be at least 1")
    entries = [1]
    value = 1
    for col in range(1, n):
        value = value * (n - col) // col
        entries.append(value)
    return entries


def pascal_triangle(n: int) -> list[list[int]]:
    """Return the first *n* rows of Pascal's triangle."""
    if n < 0:
        raise ValueError("number of rows must not be negative")
    return [pascal_row(row) for row in range(1, n + 1)]


def unique_paths(m: int, n: int) -> int:
    """Count right/down paths from the top-left to the bottom-right of an m x n grid."""
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be positive")
    return comb(m + n - 2, m - 1)