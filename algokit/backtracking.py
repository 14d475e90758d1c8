"""Exhaustive search by backtracking: permutations, subsets, puzzles and mazes."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

_DIGITS = "123456789"
_EMPTY = "."
_MAZE_MOVES = (("D", 1, 0), ("L", 0, -1), ("R", 0, 1), ("U", -1, 0))


def permutations(values: Iterable[Any]) -> list[list[Any]]:
    """Return every ordering of *values*, choosing positions left to right.

    The orderings come in the order of the positions picked, so sorted
    input gives lexicographic output.
    """
    items = list(values)
    used = [False] * len(items)
    chosen: list[Any] = []
    found: list[list[Any]] = []

    def extend() -> None:
        if len(chosen) == len(items):
            found.append(list(chosen))
            return
        for index, value in enumerate(items):
            if not used[index]:
                used[index] = True
                chosen.append(value)
                extend()
                chosen.pop()
                used[index] = False

    extend()
    return found


def permutations_by_swapping(values: Iterable[Any]) -> list[list[Any]]:
    """Return every ordering of *values*, built by swapping each element into place."""
    items = list(values)
    found: list[list[Any]] = []

    def fix(index: int) -> None:
        if index == len(items):
            found.append(list(items))
            return
        for other in range(index, len(items)):
            items[index], items[other] = items[other], items[index]
            fix(index + 1)
            items[index], items[other] = items[other], items[index]

    fix(0)
    return found


def _is_palindrome(text: str) -> bool:
    return text == text[::-1]


def palindrome_partitions(text: str) -> list[list[str]]:
    """Return every way of cutting *text* into pieces that are all palindromes."""
    found: list[list[str]] = []
    pieces: list[str] = []

    def cut(start: int) -> None:
        if start == len(text):
            found.append(list(pieces))
            return
        for end in range(start + 1, len(text) + 1):
            piece = text[start:end]
            if _is_palindrome(piece):
                pieces.append(piece)
                cut(end)
                pieces.pop()

    cut(0)
    return found


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every placement of *n* non-attacking queens on an n x n board.

    Each board is a list of rows drawn with 'Q' for a queen and '.' for
    an empty square. Queens are placed column by column, trying rows top
    to bottom.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    board = [[_EMPTY] * n for _ in range(n)]
    rows_taken: set[int] = set()
    rising_taken: set[int] = set()
    falling_taken: set[int] = set()
    found: list[list[str]] = []

    def place(col: int) -> None:
        if col == n:
            found.append(["".join(row) for row in board])
            return
        for row in range(n):
            rising, falling = row + col, col - row
            if row in rows_taken or rising in rising_taken or falling in falling_taken:
                continue
            board[row][col] = "Q"
            rows_taken.add(row)
            rising_taken.add(rising)
            falling_taken.add(falling)
            place(col + 1)
            board[row][col] = _EMPTY
            rows_taken.discard(row)
            rising_taken.discard(rising)
            falling_taken.discard(falling)

    place(0)
    return found


def rat_in_maze(grid: Sequence[Sequence[int]]) -> list[str]:
    """Return every path from the top-left to the bottom-right of a square maze.

    Open cells hold 1. A path is a string of moves 'D', 'L', 'R' and 'U'
    that never visits a cell twice; paths come in that move order.
    """
    n = len(grid)
    if any(len(row) != n for row in grid):
        raise ValueError("maze must be square")
    if n == 0 or grid[0][0] != 1:
        return []
    visited: set[tuple[int, int]] = set()
    paths: list[str] = []

    def walk(row: int, col: int, route: str) -> None:
        if row == n - 1 and col == n - 1:
            paths.append(route)
            return
        visited.add((row, col))
        for step, d_row, d_col in _MAZE_MOVES:
            nxt = (row + d_row, col + d_col)
            if (
                0 <= nxt[0] < n
                and 0 <= nxt[1] < n
                and nxt not in visited
                and grid[nxt[0]][nxt[1]] == 1
            ):
                walk(nxt[0], nxt[1], route + step)
        visited.discard((row, col))

    walk(0, 0, "")
    return paths


def subsets_with_duplicates(values: Iterable[Any]) -> list[list[Any]]:
    """Return every distinct subset of *values*, each in ascending order."""
    items = sorted(values)
    chosen: list[Any] = []
    found: list[list[Any]] = []

    def extend(start: int) -> None:
        found.append(list(chosen))
        for index in range(start, len(items)):
            if index != start and items[index] == items[index - 1]:
                continue
            chosen.append(items[index])
            extend(index + 1)
            chosen.pop()

    extend(0)
    return found


def subset_sums(values: Iterable[int]) -> list[int]:
    """Return the sums of all 2**n subsets of *values*, in ascending order."""
    sums = [0]
    for value in values:
        sums = [total + value for total in sums] + sums
    return sorted(sums)


def _check_givens(grid: list[list[str]]) -> None:
    seen: set[tuple[str, int, str]] = set()
    for row, line in enumerate(grid):
        for col, cell in enumerate(line):
            if cell == _EMPTY:
                continue
            if cell not in _DIGITS or len(cell) != 1:
                raise ValueError(f"invalid cell {cell!r} at ({row}, {col})")
            keys = (
                ("row", row, cell),
                ("col", col, cell),
                ("box", 3 * (row // 3) + col // 3, cell),
            )
            if any(key in seen for key in keys):
                raise ValueError(f"digit {cell} repeats around ({row}, {col})")
            seen.update(keys)


def _fits(grid: list[list[str]], row: int, col: int, digit: str) -> bool:
    box_row, box_col = 3 * (row // 3), 3 * (col // 3)
    for i in range(9):
        if grid[i][col] == digit or grid[row][i] == digit:
            return False
        if grid[box_row + i // 3][box_col + i % 3] == digit:
            return False
    return True


def solve_sudoku(board: Sequence[Sequence[str]]) -> list[list[str]]:
    """Return a solved copy of a 9 x 9 sudoku with '.' for empty cells.

    Raises ValueError if the board is malformed, its givens conflict, or
    it has no solution.
    """
    grid = [list(row) for row in board]
    if len(grid) != 9 or any(len(row) != 9 for row in grid):
        raise ValueError("board must be 9 x 9")
    _check_givens(grid)
    empties = [(r, c) for r in range(9) for c in range(9) if grid[r][c] == _EMPTY]

    def fill(position: int) -> bool:
        if position == len(empties):
            return True
        row, col = empties[position]
        for digit in _DIGITS:
            if _fits(grid, row, col, digit):
                grid[row][col] = digit
                if fill(position + 1):
                    return True
                grid[row][col] = _EMPTY
        return False

    if not fill(0):
        raise ValueError("sudoku has no solution")
    return grid


def subsequences(values: Iterable[Any]) -> list[list[Any]]:
    """Return all 2**n subsequences, taking each element before leaving it out."""
    items = list(values)
    chosen: list[Any] = []
    found: list[list[Any]] = []

    def decide(index: int) -> None:
        if index == len(items):
            found.append(list(chosen))
            return
        chosen.append(items[index])
        decide(index + 1)
        chosen.pop()
        decide(index + 1)

    decide(0)
    return found