# bintree

A small library for plain binary trees of integers. Every node keeps a link to
its parent, so you can walk up the tree as well as down.

## Installation

From a checkout of the project:

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Building a tree

```python
from bintree.node import Node

root = Node(98)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)
right.insert_left(128)
```

`Node(value, parent=None)` holds `value`, `parent`, `left` and `right`.
`insert_left` and `insert_right` create a new child and return it. If the node
already has a child on that side, the old child moves down and becomes the new
node's child on the same side.

A node can answer questions about where it sits:

- `is_leaf()` – the node has no children
- `is_root()` – the node has no parent
- `depth()` – number of edges up to the root
- `sibling()` – the other child of its parent, or `None`
- `uncle()` – the sibling of its parent, or `None`

`bintree.node.delete(tree)` detaches a subtree from its parent and unlinks
every node in it. Passing `None` does nothing.

## Measuring a tree

```python
from bintree.measure import height, size, leaves, nodes, balance, is_full, is_perfect

height(root)      # 3: levels in the tree, 0 for None
size(root)        # 5: number of nodes
leaves(root)      # 2: nodes without children
nodes(root)       # 3: nodes with at least one child
balance(root)     # 0: height of left subtree minus height of right subtree
is_full(root)     # False: every node must have zero or two children
is_perfect(root)  # False: full, and leaf count equal to 2 ** height
```

Every function accepts `None` as the empty tree; `is_full(None)` and
`is_perfect(None)` are `False`.

## Traversals

```python
from bintree.traversal import preorder, inorder, postorder

list(preorder(root))   # [98, 12, 54, 402, 128]
list(inorder(root))    # [12, 54, 98, 128, 402]
list(postorder(root))  # [54, 12, 128, 402, 98]
```

Each traversal is a generator of the values stored in the nodes. They do not
recurse, so deep trees are fine.

## Drawing a tree

```python
from bintree.display import render, print_tree

print_tree(root)
```

prints

```
  .-------(098)-------.
(012)--.         .--(402)
     (054)     (128)
```

Each value is shown zero-padded to three digits in parentheses, one line per
level. `render(tree)` returns the same lines joined into a string (an empty
string for `None`), and `print_tree(tree, file=None)` writes them to `file`, or
to standard output by default; it prints nothing for `None`.

## What it does not do

`bintree` is a library only: it has no command-line program. It does not keep
trees ordered (there is no search-tree insertion or lookup), and it does not
save or load trees.