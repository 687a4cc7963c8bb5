import pytest

from smartcity.tree_node import TreeNode


@pytest.fixture
def family():
    root = TreeNode("G", "Sector G")
    a = TreeNode("G-10", "G-10")
    b = TreeNode("G-11", "G-11")
    c = TreeNode("G-10/1", "Sub 1")
    root.add_child(a)
    root.add_child(b)
    a.add_child(c)
    return root, a, b, c


def test_add_child_sets_parent_and_order(family):
    root, a, b, _ = family
    assert [child.node_id for child in root.children] == ["G-10", "G-11"]
    assert a.parent is root
    assert b.parent is root
    assert root.child_count == len(root.children)


def test_find_child(family):
    root, a, _, _ = family
    assert root.find_child("G-10") is a
    assert root.find_child("G-10/1") is None


def test_remove_child(family):
    root, a, b, _ = family
    removed = root.remove_child("G-10")
    assert removed is a
    assert a.parent is None
    assert root.children == [b]


def test_remove_missing_child_raises(family):
    root, _, _, _ = family
    with pytest.raises(KeyError):
        root.remove_child("missing")


def test_leaf_and_children_flags(family):
    root, _, b, c = family
    assert root.has_children() and not root.is_leaf()
    assert b.is_leaf() and not b.has_children()
    assert c.is_leaf()


def test_depth_and_height(family):
    root, a, b, c = family
    assert root.depth == 0
    assert b.height == 0
    assert c.depth == a.depth + 1
    assert root.height == c.depth
    assert a.height == root.height - 1


def test_iter_subtree_preorder(family):
    root, _, _, _ = family
    ids = [node.node_id for node in root.iter_subtree()]
    assert ids == ["G", "G-10", "G-10/1", "G-11"]


def test_add_child_moves_from_old_parent(family):
    root, a, b, c = family
    b.add_child(c)
    assert c.parent is b
    assert c not in a.children
    assert b.children == [c]