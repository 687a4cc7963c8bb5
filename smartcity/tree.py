"""General N-ary tree of identified nodes."""

from __future__ import annotations

from typing import Any, Optional

from smartcity.tree_node import TreeNode


class Tree:
    """A rooted tree whose nodes are looked up by identifier."""

    def __init__(self, root: Optional[TreeNode] = None) -> None:
        self.root = root

    def find_node(self, node_id: str) -> Optional[TreeNode]:
        """Return the node with ``node_id``, or None if absent."""
        if self.root is None:
            return None
        return next(
            (node for node in self.root.iter_subtree() if node.node_id == node_id),
            None,
        )

    def add_child(
        self,
        parent_id: str,
        child_id: str,
        child_name: str,
        child_data: Any = None,
    ) -> TreeNode:
        """Add a new child under ``parent_id`` and return it.

        An empty tree gets a root named after ``parent_id`` first. Raises
        KeyError if the parent is missing and ValueError if ``child_id``
        already exists.
        """
        parent = self.find_node(parent_id)
        if parent is None:
            if self.root is not None:
                raise KeyError(parent_id)
            self.root = TreeNode(parent_id, parent_id)
            parent = self.root
        if self.find_node(child_id) is not None:
            raise ValueError(f"node {child_id!r} already exists")
        child = TreeNode(child_id, child_name, child_data)
        parent.add_child(child)
        return child

    def remove_node(self, node_id: str) -> None:
        """Remove a node together with its whole subtree."""
        node = self.find_node(node_id)
        if node is None:
            raise KeyError(node_id)
        if node is self.root:
            self.root = None
        elif node.parent is not None:
            node.parent.remove_child(node_id)

    @property
    def height(self) -> int:
        """Height of the tree; -1 when empty."""
        return -1 if self.root is None else self.root.height

    def node_depth(self, node_id: str) -> int:
        node = self.find_node(node_id)
        if node is None:
            raise KeyError(node_id)
        return node.depth

    def is_empty(self) -> bool:
        return self.root is None

    def clear(self) -> None:
        self.root = None

    def leaf_nodes(self) -> list[TreeNode]:
        """All leaves, in pre-order."""
        if self.root is None:
            return []
        return [node for node in self.root.iter_subtree() if node.is_leaf()]

    def is_ancestor(self, ancestor_id: str, descendant_id: str) -> bool:
        """True if ``ancestor_id`` is a proper ancestor of ``descendant_id``."""
        node = self.find_node(descendant_id)
        if node is None:
            return False
        current = node.parent
        while current is not None:
            if current.node_id == ancestor_id:
                return True
            current = current.parent
        return False

    def path_to_node(self, node_id: str) -> list[str]:
        """Identifiers from the root down to ``node_id``."""
        node: Optional[TreeNode] = self.find_node(node_id)
        if node is None:
            raise KeyError(node_id)
        path: list[str] = []
        while node is not None:
            path.append(node.node_id)
            node = node.parent
        path.reverse()
        return path

    def __len__(self) -> int:
        if self.root is None:
            return 0
        return sum(1 for _ in self.root.iter_subtree())

    def _lines(self, node: TreeNode, level: int, prefix: str) -> list[str]:
        lines = [f"{'  ' * level}{prefix}{node.node_id} ({node.name})"]
        for child in node.children:
            lines.extend(self._lines(child, level + 1, "+-- "))
        return lines

    def __str__(self) -> str:
        if self.root is None:
            return "Tree is empty."
        return "\n".join(["Tree Structure:", *self._lines(self.root, 0, "")])