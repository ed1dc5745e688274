import pytest

from bintree.node import Node, delete


@pytest.fixture
def family():
    root = Node(98)
    left = root.insert_left(12)
    right = root.insert_right(402)
    grandchild = left.insert_right(54)
    return root, left, right, grandchild


def test_new_node_is_detached():
    node = Node(7)
    assert node.value == 7
    assert node.parent is None
    assert node.left is None
    assert node.right is None


def test_node_with_parent_is_not_attached_as_child():
    parent = Node(1)
    node = Node(2, parent)
    assert node.parent is parent
    assert parent.left is None and parent.right is None


def test_insert_left_on_empty_slot():
    root = Node(98)
    child = root.insert_left(12)
    assert root.left is child
    assert child.parent is root
    assert child.value == 12


def test_insert_left_pushes_existing_child_down():
    root = Node(98)
    old = root.insert_left(12)
    new = root.insert_left(54)
    assert root.left is new
    assert new.parent is root
    assert new.left is old
    assert old.parent is new
    assert new.right is None


def test_insert_right_pushes_existing_child_down():
    root = Node(98)
    old = root.insert_right(402)
    new = root.insert_right(128)
    assert root.right is new
    assert new.parent is root
    assert new.right is old
    assert old.parent is new
    assert new.left is None


def test_is_leaf(family):
    root, left, right, grandchild = family
    assert right.is_leaf()
    assert grandchild.is_leaf()
    assert not root.is_leaf()
    assert not left.is_leaf()


def test_is_root(family):
    root, left, _right, grandchild = family
    assert root.is_root()
    assert not left.is_root()
    assert not grandchild.is_root()


def test_depth_grows_by_one_per_level(family):
    root, left, right, grandchild = family
    assert root.depth() == 0
    assert left.depth() == root.depth() + 1
    assert right.depth() == left.depth()
    assert grandchild.depth() == left.depth() + 1


def test_sibling(family):
    root, left, right, grandchild = family
    assert left.sibling() is right
    assert right.sibling() is left
    assert root.sibling() is None
    assert grandchild.sibling() is None


def test_uncle(family):
    root, left, right, grandchild = family
    assert grandchild.uncle() is right
    assert left.uncle() is None
    assert root.uncle() is None


def test_uncle_from_right_branch(family):
    _root, left, right, _grandchild = family
    nephew = right.insert_left(256)
    assert nephew.uncle() is left


def test_delete_unlinks_every_node(family):
    root, left, right, grandchild = family
    delete(root)
    for node in (root, left, right, grandchild):
        assert node.parent is None
        assert node.left is None
        assert node.right is None


def test_delete_subtree_detaches_from_parent(family):
    root, left, right, grandchild = family
    delete(left)
    assert root.left is None
    assert root.right is right
    assert grandchild.parent is None


def test_delete_none_leaves_nothing_changed(family):
    root, left, right, _grandchild = family
    delete(None)
    assert root.left is left
    assert root.right is right