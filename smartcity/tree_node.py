"""Node of a general (N-ary) tree, e.g. a sector hierarchy."""

from __future__ import annotations

from typing import Any, Iterator, Optional


class TreeNode:
    """A named node with an ordered list of children and a parent link."""

    def __init__(self, node_id: str, name: str = "", data: Any = None) -> None:
        self.node_id = node_id
        self.name = name
        self.data = data
        self.parent: Optional[TreeNode] = None
        self.children: list[TreeNode] = []

    def add_child(self, child: TreeNode) -> None:
        """Append ``child`` as the last child of this node."""
        if child.parent is not None and child.parent is not self:
            child.parent.children.remove(child)
        elif child.parent is self:
            self.children.remove(child)
        child.parent = self
        self.children.append(child)

    def remove_child(self, child_id: str) -> TreeNode:
        """Detach and return the direct child with ``child_id``.

        Raises KeyError if no direct child has that identifier.
        """
        for index, child in enumerate(self.children):
            if child.node_id == child_id:
                del self.children[index]
                child.parent = None
                return child
        raise KeyError(child_id)

    def find_child(self, child_id: str) -> Optional[TreeNode]:
        """Return the direct child with ``child_id``, or None."""
        return next(
            (child for child in self.children if child.node_id == child_id), None
        )

    def has_children(self) -> bool:
        return bool(self.children)

    def is_leaf(self) -> bool:
        return not self.children

    @property
    def child_count(self) -> int:
        return len(self.children)

    @property
    def depth(self) -> int:
        """Number of edges between this node and the root."""
        depth = 0
        current = self.parent
        while current is not None:
            depth += 1
            current = current.parent
        return depth

    @property
    def height(self) -> int:
        """Number of edges on the longest path down to a leaf."""
        if not self.children:
            return 0
        return 1 + max(child.height for child in self.children)

    def iter_subtree(self) -> Iterator[TreeNode]:
        """Yield this node and all its descendants in pre-order."""
        stack: list[TreeNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def __repr__(self) -> str:
        return f"TreeNode({self.node_id!r}, {self.name!r})"