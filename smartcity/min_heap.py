"""Binary min-heap priority queue keyed by string identifiers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class HeapNode:
    """An element held by a :class:`MinHeap`."""

    identifier: str = ""
    priority: float = 0.0
    data: Any = None


class MinHeap:
    """A binary min-heap whose capacity doubles when exhausted."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._nodes: list[HeapNode] = []

    def _sift_up(self, index: int) -> None:
        nodes = self._nodes
        while index > 0:
            parent = (index - 1) // 2
            if nodes[index].priority < nodes[parent].priority:
                nodes[index], nodes[parent] = nodes[parent], nodes[index]
                index = parent
            else:
                break

    def _sift_down(self, index: int) -> None:
        nodes = self._nodes
        size = len(nodes)
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and nodes[child].priority < nodes[smallest].priority:
                    smallest = child
            if smallest == index:
                return
            nodes[index], nodes[smallest] = nodes[smallest], nodes[index]
            index = smallest

    def insert(self, identifier: str, priority: float, data: Any = None) -> None:
        """Add an element, doubling capacity if the heap is full."""
        if self.is_full():
            self._capacity *= 2
        self._nodes.append(HeapNode(identifier, priority, data))
        self._sift_up(len(self._nodes) - 1)

    def extract_min(self) -> HeapNode:
        """Remove and return the element with the smallest priority."""
        if not self._nodes:
            raise IndexError("extract from empty heap")
        smallest = self._nodes[0]
        last = self._nodes.pop()
        if self._nodes:
            self._nodes[0] = last
            self._sift_down(0)
        return smallest

    def peek_min(self) -> HeapNode:
        """Return the element with the smallest priority without removing it."""
        if not self._nodes:
            raise IndexError("peek at empty heap")
        return self._nodes[0]

    def decrease_priority(self, identifier: str, new_priority: float) -> None:
        """Lower the priority of an element.

        Raises KeyError if the identifier is absent and ValueError if the new
        priority is larger than the current one.
        """
        for index, node in enumerate(self._nodes):
            if node.identifier == identifier:
                if new_priority > node.priority:
                    raise ValueError(
                        f"new priority {new_priority} exceeds current {node.priority}"
                    )
                node.priority = new_priority
                self._sift_up(index)
                return
        raise KeyError(identifier)

    def is_empty(self) -> bool:
        return not self._nodes

    def is_full(self) -> bool:
        return len(self._nodes) >= self._capacity

    @property
    def capacity(self) -> int:
        return self._capacity

    def clear(self) -> None:
        self._nodes.clear()

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, identifier: object) -> bool:
        return any(node.identifier == identifier for node in self._nodes)

    def __str__(self) -> str:
        lines = [f"MinHeap Contents (Size: {len(self._nodes)}):"]
        lines.extend(
            f"[{index}] {node.identifier} (Priority: {node.priority:g})"
            for index, node in enumerate(self._nodes)
        )
        return "\n".join(lines)