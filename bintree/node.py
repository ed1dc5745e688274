"""Binary tree nodes that keep a link to their parent."""

from __future__ import annotations


class Node:
    """A binary tree node holding an integer value and links to its relatives."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Node | None = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Node | None = None
        self.right: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; an existing left child becomes its left child."""
        node = Node(value, self)
        if self.left is not None:
            node.left = self.left
            self.left.parent = node
        self.left = node
        return node

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; an existing right child becomes its right child."""
        node = Node(value, self)
        if self.right is not None:
            node.right = self.right
            self.right.parent = node
        self.right = node
        return node

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def depth(self) -> int:
        """Return the number of edges between this node and the root."""
        depth = 0
        node = self
        while node.parent is not None:
            depth += 1
            node = node.parent
        return depth

    def sibling(self) -> Node | None:
        """Return the other child of this node's parent, if any."""
        parent = self.parent
        if parent is None:
            return None
        if parent.left is self:
            return parent.right
        if parent.right is self:
            return parent.left
        return None

    def uncle(self) -> Node | None:
        """Return the sibling of this node's parent, if any."""
        parent = self.parent
        if parent is None or parent.parent is None:
            return None
        grandparent = parent.parent
        if grandparent.left is parent:
            return grandparent.right
        return grandparent.left


def delete(tree: Node | None) -> None:
    """Detach a tree from its parent and unlink every node in it."""
    if tree is None:
        return
    parent = tree.parent
    if parent is not None:
        if parent.left is tree:
            parent.left = None
        elif parent.right is tree:
            parent.right = None
    stack = [tree]
    while stack:
        node = stack.pop()
        stack.extend(child for child in (node.left, node.right) if child is not None)
        node.parent = None
        node.left = None
        node.right = None