"""Fixed-capacity FIFO queue used for passenger queue simulation."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterator


@dataclass
class QueueNode:
    """An element held by a :class:`CircularQueue`."""

    data: str = ""
    extra: Any = None


class QueueFullError(Exception):
    """Raised when an element is added to a queue that is at capacity."""


class CircularQueue:
    """A bounded first-in, first-out queue of string items."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._items: deque[QueueNode] = deque()

    def enqueue(self, data: str, extra: Any = None) -> None:
        """Add an item at the rear; raise QueueFullError if the queue is full."""
        if self.is_full():
            raise QueueFullError(f"queue is full (capacity {self._capacity})")
        self._items.append(QueueNode(data, extra))

    def dequeue(self) -> QueueNode:
        """Remove and return the front item; raise IndexError if empty."""
        if not self._items:
            raise IndexError("dequeue from empty queue")
        return self._items.popleft()

    def peek_front(self) -> QueueNode:
        """Return the front item without removing it."""
        if not self._items:
            raise IndexError("peek at empty queue")
        return self._items[0]

    def peek_rear(self) -> QueueNode:
        """Return the rear item without removing it."""
        if not self._items:
            raise IndexError("peek at empty queue")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    @property
    def capacity(self) -> int:
        return self._capacity

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[QueueNode]:
        return iter(list(self._items))

    def __contains__(self, data: object) -> bool:
        return any(node.data == data for node in self._items)

    def __str__(self) -> str:
        if not self._items:
            return "Queue is empty."
        joined = " -> ".join(node.data for node in self._items)
        return f"Queue Contents (Size: {len(self._items)}): {joined}"