"""Growable LIFO stack used for route travel history."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator


@dataclass
class StackNode:
    """An element held by a :class:`Stack`."""

    data: str = ""
    extra: Any = None


class Stack:
    """A last-in, first-out stack whose capacity doubles when exhausted."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._items: list[StackNode] = []

    def push(self, data: str, extra: Any = None) -> None:
        """Push an item, doubling capacity if the stack is full."""
        if self.is_full():
            self._capacity *= 2
        self._items.append(StackNode(data, extra))

    def pop(self) -> StackNode:
        """Remove and return the top item; raise IndexError if empty."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> StackNode:
        """Return the top item without removing it."""
        if not self._items:
            raise IndexError("peek at empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    @property
    def capacity(self) -> int:
        return self._capacity

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[StackNode]:
        """Iterate from bottom to top (chronological order)."""
        return iter(list(self._items))

    def __contains__(self, data: object) -> bool:
        return any(node.data == data for node in self._items)

    def format_top_down(self) -> str:
        """Describe the contents from top to bottom, one item per line."""
        if not self._items:
            return "Stack is empty."
        lines = [f"Stack Contents (Top to Bottom, Size: {len(self._items)}):"]
        lines.extend(
            f"[{index}] {node.data}"
            for index, node in reversed(list(enumerate(self._items)))
        )
        return "\n".join(lines)

    def format_chronological(self) -> str:
        """Describe the contents from bottom to top on one line."""
        if not self._items:
            return "Stack is empty."
        header = (
            "Stack Contents (Bottom to Top, Chronological, "
            f"Size: {len(self._items)}):"
        )
        body = " -> ".join(
            f"[{index}] {node.data}" for index, node in enumerate(self._items)
        )
        return f"{header}\n{body}"