"""Measurements and shape checks on binary trees."""

from __future__ import annotations

from collections.abc import Iterator

from bintree.node import Node


def _walk(tree: Node | None) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def height(tree: Node | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path (0 for None)."""
    level = [tree] if tree is not None else []
    result = 0
    while level:
        result += 1
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return result


def size(tree: Node | None) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _walk(tree))


def leaves(tree: Node | None) -> int:
    """Return the number of nodes without children."""
    return sum(1 for node in _walk(tree) if node.is_leaf())


def nodes(tree: Node | None) -> int:
    """Return the number of nodes with at least one child."""
    return sum(1 for node in _walk(tree) if not node.is_leaf())


def balance(tree: Node | None) -> int:
    """Return the height of the left subtree minus that of the right (0 for None)."""
    if tree is None:
        return 0
    return height(tree.left) - height(tree.right)


def is_full(tree: Node | None) -> bool:
    """Return True if every node has either zero or two children."""
    if tree is None:
        return False
    return all((node.left is None) == (node.right is None) for node in _walk(tree))


def is_perfect(tree: Node | None) -> bool:
    """Return True if the tree is full and its leaf count equals 2 ** height."""
    if tree is None:
        return False
    return is_full(tree) and leaves(tree) == 1 << height(tree)