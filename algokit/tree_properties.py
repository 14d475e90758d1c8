"""Structural questions about binary trees: balance, depth, paths and shape."""

from __future__ import annotations

from typing import Any

from algokit.binarytree import Node


def _balanced_height(node: Node | None) -> int | None:
    if node is None:
        return 0
    left = _balanced_height(node.left)
    if left is None:
        return None
    right = _balanced_height(node.right)
    if right is None:
        return None
    if abs(left - right) > 1:
        return None
    return 1 + max(left, right)


def is_balanced(root: Node | None) -> bool:
    """Return True if no node's subtrees differ in height by more than one."""
    return _balanced_height(root) is not None


def apply_children_sum(root: Node | None) -> Node | None:
    """Raise values so every inner node equals the sum of its children.

    Values are only ever increased: on the way down a child takes its
    parent's value when the children sum to less, and on the way back up
    each inner node becomes the sum of its children. The tree is changed
    in place and its root returned.
    """
    if root is None:
        return None
    children = [child for child in (root.left, root.right) if child is not None]
    child_total = sum(child.data for child in children)
    if child_total < root.data:
        for child in children:
            child.data = root.data
    else:
        root.data = child_total
    for child in children:
        apply_children_sum(child)
    if children:
        root.data = sum(child.data for child in children)
    return root


def max_depth(root: Node | None) -> int:
    """Return the number of levels in the tree; 0 for an empty tree."""
    depth = 0
    level = [root] if root is not None else []
    while level:
        depth += 1
        level = [
            child for node in level for child in (node.left, node.right) if child is not None
        ]
    return depth


def max_path_sum(root: Node | None) -> Any:
    """Return the largest sum along any path between two nodes of the tree.

    A path may start and end anywhere but goes through each node at most
    once. Raises ValueError for an empty tree.
    """
    if root is None:
        raise ValueError("tree must not be empty")
    best = root.data

    def downward(node: Node | None) -> Any:
        nonlocal best
        if node is None:
            return 0
        left = max(0, downward(node.left))
        right = max(0, downward(node.right))
        best = max(best, left + right + node.data)
        return max(left, right) + node.data

    downward(root)
    return best


def has_path_sum(root: Node | None, target: Any) -> bool:
    """Return True if some root-to-leaf path adds up to *target*."""
    if root is None:
        return False
    if root.left is None and root.right is None:
        return root.data == target
    remainder = target - root.data
    return has_path_sum(root.left, remainder) or has_path_sum(root.right, remainder)


def path_to(root: Node | None, target: Any) -> list[Any]:
    """Return the values from the root down to the first node holding *target*.

    The search runs depth first, left before right. Returns an empty list
    when no node holds *target*.
    """
    path: list[Any] = []

    def search(node: Node | None) -> bool:
        if node is None:
            return False
        path.append(node.data)
        if node.data == target or search(node.left) or search(node.right):
            return True
        path.pop()
        return False

    search(root)
    return path


def root_to_leaf_paths(root: Node | None) -> list[str]:
    """Return every root-to-leaf path as its values joined by single spaces.

    Paths through the left subtree come before those through the right.
    """
    if root is None:
        return []
    if root.left is None and root.right is None:
        return [str(root.data)]
    head = str(root.data)
    return [
        f"{head} {rest}"
        for child in (root.left, root.right)
        for rest in root_to_leaf_paths(child)
    ]


def is_identical(first: Node | None, second: Node | None) -> bool:
    """Return True if both trees have the same shape and the same values."""
    if first is None or second is None:
        return first is second
    return (
        first.data == second.data
        and is_identical(first.left, second.left)
        and is_identical(first.right, second.right)
    )


def _mirrors(left: Node | None, right: Node | None) -> bool:
    if left is None or right is None:
        return left is right
    return (
        left.data == right.data
        and _mirrors(left.left, right.right)
        and _mirrors(left.right, right.left)
    )


def is_symmetric(root: Node | None) -> bool:
    """Return True if the tree is a mirror image of itself."""
    return root is None or _mirrors(root.left, root.right)