"""A singly linked list of values with positional and sorted insertion,
deletion, sorting, searching and summary statistics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional

from dslab.arrays import ArrayStats, summarize


@dataclass
class _Node:
    value: Any
    next: Optional[_Node] = None


class LinkedList:
    """A singly linked list; positions are counted from 1."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def __str__(self) -> str:
        return " -> ".join([*(str(value) for value in self), "NULL"])

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def append(self, value: Any) -> None:
        """Add ``value`` at the end of the list."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def _node_at(self, position: int) -> _Node:
        for index, node in enumerate(self._nodes(), start=1):
            if index == position:
                return node
        raise IndexError(f"position {position} outside 1..{self._size}")

    def insert_at(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it becomes the element at ``position``."""
        if not 1 <= position <= self._size + 1:
            raise IndexError(f"position {position} outside 1..{self._size + 1}")
        if position == self._size + 1:
            self.append(value)
            return
        if position == 1:
            self._head = _Node(value, self._head)
        else:
            previous = self._node_at(position - 1)
            previous.next = _Node(value, previous.next)
        self._size += 1

    def insert_sorted(self, value: Any) -> int:
        """Insert ``value`` after every element smaller than it; return its position."""
        position = 1 + sum(1 for item in self if value > item)
        self.insert_at(position, value)
        return position

    def remove_at(self, position: int) -> Any:
        """Remove the element at ``position`` and return its value."""
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} outside 1..{self._size}")
        if position == 1:
            removed = self._head
            self._head = removed.next
            previous = None
        else:
            previous = self._node_at(position - 1)
            removed = previous.next
            previous.next = removed.next
        if removed is self._tail:
            self._tail = previous
        self._size -= 1
        return removed.value

    def remove(self, value: Any) -> None:
        """Remove the first element equal to ``value``."""
        position = self.find(value)
        if position is None:
            raise ValueError(f"{value!r} is not in the list")
        self.remove_at(position)

    def sort(self) -> None:
        """Put the values in ascending order, keeping the nodes in place."""
        for current in self._nodes():
            following = current.next
            while following is not None:
                if current.value > following.value:
                    current.value, following.value = following.value, current.value
                following = following.next

    def find(self, value: Any) -> Optional[int]:
        """Return the position of the first element equal to ``value``, or None."""
        return next(
            (index for index, item in enumerate(self, start=1) if item == value),
            None,
        )

    def stats(self) -> ArrayStats:
        """Return maximum, minimum, total, average and sines of the values."""
        if self._size == 0:
            raise ValueError("list is empty")
        return summarize(list(self))