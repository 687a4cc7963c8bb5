"""Ordered list of string items, used for bus routes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator


@dataclass
class ListNode:
    """An element held by a :class:`SinglyLinkedList`."""

    data: str = ""
    extra: Any = None


class SinglyLinkedList:
    """An ordered sequence of string items with positional operations."""

    def __init__(self) -> None:
        self._nodes: list[ListNode] = []

    def _check_index(self, position: int) -> None:
        if position < 0 or position >= len(self._nodes):
            raise IndexError(f"position {position} out of range")

    def insert_at_head(self, data: str, extra: Any = None) -> None:
        self._nodes.insert(0, ListNode(data, extra))

    def insert_at_tail(self, data: str, extra: Any = None) -> None:
        self._nodes.append(ListNode(data, extra))

    def insert_at_position(self, position: int, data: str, extra: Any = None) -> None:
        """Insert so the new item ends up at ``position`` (0..len inclusive)."""
        if position < 0 or position > len(self._nodes):
            raise IndexError(f"position {position} out of range")
        self._nodes.insert(position, ListNode(data, extra))

    def insert_after(self, after_value: str, data: str, extra: Any = None) -> None:
        """Insert after the first item equal to ``after_value``."""
        for index, node in enumerate(self._nodes):
            if node.data == after_value:
                self._nodes.insert(index + 1, ListNode(data, extra))
                return
        raise ValueError(f"{after_value!r} not in list")

    def remove(self, data: str) -> None:
        """Remove the first item equal to ``data``."""
        for index, node in enumerate(self._nodes):
            if node.data == data:
                del self._nodes[index]
                return
        raise ValueError(f"{data!r} not in list")

    def remove_at_position(self, position: int) -> ListNode:
        self._check_index(position)
        return self._nodes.pop(position)

    def remove_from_head(self) -> ListNode:
        if not self._nodes:
            raise IndexError("remove from empty list")
        return self._nodes.pop(0)

    def remove_from_tail(self) -> ListNode:
        if not self._nodes:
            raise IndexError("remove from empty list")
        return self._nodes.pop()

    def get_at_position(self, position: int) -> str:
        self._check_index(position)
        return self._nodes[position].data

    def update_at_position(self, position: int, new_data: str) -> None:
        self._check_index(position)
        self._nodes[position].data = new_data

    @property
    def head(self) -> str:
        """Data of the first item; IndexError if the list is empty."""
        if not self._nodes:
            raise IndexError("empty list has no head")
        return self._nodes[0].data

    @property
    def tail(self) -> str:
        """Data of the last item; IndexError if the list is empty."""
        if not self._nodes:
            raise IndexError("empty list has no tail")
        return self._nodes[-1].data

    def is_empty(self) -> bool:
        return not self._nodes

    def clear(self) -> None:
        self._nodes.clear()

    def reverse(self) -> None:
        self._nodes.reverse()

    def format(self, separator: str = " → ") -> str:
        """Join the items' data with ``separator``."""
        return separator.join(node.data for node in self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[str]:
        return iter([node.data for node in self._nodes])

    def __contains__(self, data: object) -> bool:
        return any(node.data == data for node in self._nodes)

    def __str__(self) -> str:
        return self.format(" -> ")