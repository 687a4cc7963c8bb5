import pytest

from smartcity.tree import Tree
from smartcity.tree_node import TreeNode


@pytest.fixture
def tree():
    t = Tree()
    t.add_child("Islamabad", "G", "Sector G")
    t.add_child("Islamabad", "F", "Sector F")
    t.add_child("G", "G-10", "G-10")
    t.add_child("G", "G-11", "G-11")
    t.add_child("G-10", "G-10/1", "G-10/1")
    return t


def test_empty_tree():
    t = Tree()
    assert t.is_empty()
    assert len(t) == 0
    assert t.height == -1
    assert t.leaf_nodes() == []
    assert str(t) == "Tree is empty."


def test_add_child_creates_root(tree):
    assert tree.root.node_id == "Islamabad"
    assert tree.root.name == "Islamabad"
    assert len(tree) == len(["Islamabad", "G", "F", "G-10", "G-11", "G-10/1"])


def test_add_child_missing_parent_raises(tree):
    with pytest.raises(KeyError):
        tree.add_child("nowhere", "X", "X")


def test_add_duplicate_child_raises(tree):
    with pytest.raises(ValueError):
        tree.add_child("F", "G-10", "again")


def test_find_node(tree):
    node = tree.find_node("G-10/1")
    assert node.name == "G-10/1"
    assert tree.find_node("nope") is None


def test_path_and_depth(tree):
    path = tree.path_to_node("G-10/1")
    assert path == ["Islamabad", "G", "G-10", "G-10/1"]
    assert tree.node_depth("G-10/1") == len(path) - 1
    assert tree.height == len(path) - 1
    with pytest.raises(KeyError):
        tree.path_to_node("nope")
    with pytest.raises(KeyError):
        tree.node_depth("nope")


def test_leaf_nodes(tree):
    assert [n.node_id for n in tree.leaf_nodes()] == ["G-10/1", "G-11", "F"]


def test_is_ancestor(tree):
    assert tree.is_ancestor("Islamabad", "G-10/1")
    assert tree.is_ancestor("G", "G-10")
    assert not tree.is_ancestor("F", "G-10")
    assert not tree.is_ancestor("G-10", "G-10")
    assert not tree.is_ancestor("G", "missing")


def test_remove_node_removes_subtree(tree):
    before = len(tree)
    tree.remove_node("G-10")
    assert tree.find_node("G-10") is None
    assert tree.find_node("G-10/1") is None
    assert len(tree) == before - 2


def test_remove_root_and_missing(tree):
    with pytest.raises(KeyError):
        tree.remove_node("nope")
    tree.remove_node("Islamabad")
    assert tree.is_empty()


def test_clear(tree):
    tree.clear()
    assert tree.is_empty()
    assert len(tree) == 0


def test_str_layout():
    t = Tree()
    t.add_child("R", "A", "Alpha")
    t.add_child("A", "B", "Beta")
    assert str(t) == "Tree Structure:\nR (R)\n  +-- A (Alpha)\n    +-- B (Beta)"


def test_constructed_with_root():
    root = TreeNode("R", "Root")
    t = Tree(root)
    t.add_child("R", "A", "Alpha", {"k": 1})
    assert t.find_node("A").data == {"k": 1}
    assert t.find_node("A").parent is root