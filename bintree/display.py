"""Text drawing of binary trees."""

from __future__ import annotations

import sys
from typing import TextIO

from bintree.measure import height
from bintree.node import Node


def _write(row: list[str], start: int, text: str) -> None:
    end = start + len(text)
    if end > len(row):
        row.extend(" " * (end - len(row)))
    for position, char in enumerate(text, start):
        if position >= 0:
            row[position] = char


def _place(node: Node | None, offset: int, depth: int, rows: list[list[str]]) -> int:
    if node is None:
        return 0
    is_left = node.parent is not None and node.parent.left is node
    label = f"({node.value:03d})"
    width = len(label)
    left = _place(node.left, offset, depth + 1, rows)
    right = _place(node.right, offset + left + width, depth + 1, rows)
    _write(rows[depth], offset + left, label)
    if depth:
        above = rows[depth - 1]
        if is_left:
            _write(above, offset + left + width // 2, "-" * (width + right))
        else:
            _write(above, offset - width // 2, "-" * (left + width))
        _write(above, offset + left + width // 2, ".")
    return left + width + right


def render(tree: Node | None) -> str:
    """Return the tree drawn as lines of text, one line per level."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(height(tree))]
    _place(tree, 0, 0, rows)
    return "\n".join("".join(row).rstrip(" ").ljust(2) for row in rows)


def print_tree(tree: Node | None, file: TextIO | None = None) -> None:
    """Write the drawing of the tree to a stream, standard output by default."""
    if tree is None:
        return
    print(render(tree), file=file if file is not None else sys.stdout)