"""Graph searches over adjacency matrices, grids and word lists."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from string import ascii_lowercase
from typing import Any

_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def _require_rectangular(grid: Sequence[Sequence[Any]]) -> None:
    if grid and any(len(row) != len(grid[0]) for row in grid):
        raise ValueError("all rows must have the same length")


def _neighbours(row: int, col: int, rows: int, cols: int) -> Iterable[tuple[int, int]]:
    for d_row, d_col in _STEPS:
        n_row, n_col = row + d_row, col + d_col
        if 0 <= n_row < rows and 0 <= n_col < cols:
            yield n_row, n_col


def count_provinces(adjacency: Sequence[Sequence[int]]) -> int:
    """Return the number of connected groups in a square adjacency matrix.

    A 1 at (i, j) links nodes i and j; the diagonal is ignored.
    """
    n = len(adjacency)
    if any(len(row) != n for row in adjacency):
        raise ValueError("adjacency matrix must be square")
    links: list[list[int]] = [[] for _ in range(n)]
    for i, row in enumerate(adjacency):
        for j, value in enumerate(row):
            if value == 1 and i != j:
                links[i].append(j)
                links[j].append(i)
    seen = [False] * n
    provinces = 0
    for start in range(n):
        if seen[start]:
            continue
        provinces += 1
        seen[start] = True
        stack = [start]
        while stack:
            node = stack.pop()
            for nxt in links[node]:
                if not seen[nxt]:
                    seen[nxt] = True
                    stack.append(nxt)
    return provinces


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int:
    """Return the minutes until every fresh orange (1) is rotten (2).

    Rot spreads each minute to the four neighbours. Returns -1 when some
    fresh orange can never be reached, and 0 for an empty grid.
    """
    if not grid:
        return 0
    _require_rectangular(grid)
    rows, cols = len(grid), len(grid[0])
    rotten = {(r, c) for r in range(rows) for c in range(cols) if grid[r][c] == 2}
    queue = deque((r, c, 0) for r, c in sorted(rotten))
    minutes = 0
    while queue:
        row, col, elapsed = queue.popleft()
        minutes = max(minutes, elapsed)
        for cell in _neighbours(row, col, rows, cols):
            if cell not in rotten and grid[cell[0]][cell[1]] == 1:
                rotten.add(cell)
                queue.append((cell[0], cell[1], elapsed + 1))
    fresh_left = any(
        grid[r][c] == 1 and (r, c) not in rotten for r in range(rows) for c in range(cols)
    )
    return -1 if fresh_left else minutes


def word_ladder_length(start: str, target: str, words: Iterable[str]) -> int:
    """Return the number of words in the shortest ladder from *start* to *target*.

    Each step changes one lowercase letter and must land on a word from
    *words*. Returns 0 when no ladder exists.
    """
    unused = set(words)
    unused.discard(start)
    queue = deque([(start, 1)])
    while queue:
        word, steps = queue.popleft()
        if word == target:
            return steps
        for index, original in enumerate(word):
            for letter in ascii_lowercase:
                if letter == original:
                    continue
                candidate = word[:index] + letter + word[index + 1 :]
                if candidate in unused:
                    unused.discard(candidate)
                    queue.append((candidate, steps + 1))
    return 0


def fill_surrounded_regions(board: Sequence[Sequence[str]]) -> list[list[str]]:
    """Return a copy where every 'O' region not touching the border becomes 'X'."""
    _require_rectangular(board)
    grid = [list(row) for row in board]
    if not grid or not grid[0]:
        return grid
    rows, cols = len(grid), len(grid[0])
    border = [(r, c) for r in range(rows) for c in (0, cols - 1)]
    border += [(r, c) for c in range(cols) for r in (0, rows - 1)]
    safe: set[tuple[int, int]] = set()
    for cell in border:
        if cell in safe or grid[cell[0]][cell[1]] != "O":
            continue
        safe.add(cell)
        stack = [cell]
        while stack:
            row, col = stack.pop()
            for nxt in _neighbours(row, col, rows, cols):
                if nxt not in safe and grid[nxt[0]][nxt[1]] == "O":
                    safe.add(nxt)
                    stack.append(nxt)
    for r in range(rows):
        for c in range(cols):
            if grid[r][c] == "O" and (r, c) not in safe:
                grid[r][c] = "X"
    return grid