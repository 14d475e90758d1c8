"""A binary tree node and traversals that view the tree from different sides."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """A binary tree node holding *data* and optional children."""

    data: Any
    left: Node | None = None
    right: Node | None = None


def _by_line(root: Node | None) -> Iterator[tuple[Node, int]]:
    if root is None:
        return
    queue = deque([(root, 0)])
    while queue:
        node, line = queue.popleft()
        yield node, line
        if node.left is not None:
            queue.append((node.left, line - 1))
        if node.right is not None:
            queue.append((node.right, line + 1))


def _levels(root: Node | None) -> Iterator[list[Node]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [child for node in level for child in (node.left, node.right) if child]


def top_view(root: Node | None) -> list[Any]:
    """Return the first node seen on each vertical line, left to right."""
    seen: dict[int, Any] = {}
    for node, line in _by_line(root):
        seen.setdefault(line, node.data)
    return [seen[line] for line in sorted(seen)]


def bottom_view(root: Node | None) -> list[Any]:
    """Return the last node seen on each vertical line, left to right."""
    seen: dict[int, Any] = {}
    for node, line in _by_line(root):
        seen[line] = node.data
    return [seen[line] for line in sorted(seen)]


def _side_view(root: Node | None, right_first: bool) -> list[Any]:
    view: list[Any] = []
    stack = [(root, 0)] if root is not None else []
    while stack:
        node, depth = stack.pop()
        if depth == len(view):
            view.append(node.data)
        near, far = (node.right, node.left) if right_first else (node.left, node.right)
        for child in (far, near):
            if child is not None:
                stack.append((child, depth + 1))
    return view


def right_view(root: Node | None) -> list[Any]:
    """Return the rightmost node of each level, top to bottom."""
    return _side_view(root, right_first=True)


def left_view(root: Node | None) -> list[Any]:
    """Return the leftmost node of each level, top to bottom."""
    return _side_view(root, right_first=False)


def level_order(root: Node | None) -> list[list[Any]]:
    """Return the node values level by level, each level left to right."""
    return [[node.data for node in level] for level in _levels(root)]


def zigzag_level_order(root: Node | None) -> list[list[Any]]:
    """Return the levels, alternating left-to-right and right-to-left."""
    return [
        values if depth % 2 == 0 else values[::-1]
        for depth, values in enumerate(level_order(root))
    ]


def vertical_order(root: Node | None) -> list[list[Any]]:
    """Return the values on each vertical line, left to right.

    Within a line, values go top to bottom; values sharing a line and
    level are sorted.
    """
    columns: defaultdict[int, defaultdict[int, list[Any]]] = defaultdict(
        lambda: defaultdict(list)
    )
    for depth, level in enumerate(_levels_with_lines(root)):
        for node, line in level:
            columns[line][depth].append(node.data)
    return [
        [value for depth in sorted(columns[line]) for value in sorted(columns[line][depth])]
        for line in sorted(columns)
    ]


def _levels_with_lines(root: Node | None) -> Iterator[list[tuple[Node, int]]]:
    level = [(root, 0)] if root is not None else []
    while level:
        yield level
        level = [
            (child, line + offset)
            for node, line in level
            for child, offset in ((node.left, -1), (node.right, 1))
            if child is not None
        ]


def max_width(root: Node | None) -> int:
    """Return the widest level, counting the gaps between its end nodes."""
    width = 0
    level = [(root, 0)] if root is not None else []
    while level:
        base = level[0][1]
        level = [(node, index - base) for node, index in level]
        width = max(width, level[-1][1] - level[0][1] + 1)
        level = [
            (child, 2 * index + offset)
            for node, index in level
            for child, offset in ((node.left, 1), (node.right, 2))
            if child is not None
        ]
    return width