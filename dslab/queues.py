"""Fixed-capacity queues: a plain linear queue and a circular queue."""

from __future__ import annotations

from typing import Any, Iterator


class QueueFull(Exception):
    """Raised when adding to a queue that has no room left."""


class QueueEmpty(Exception):
    """Raised when taking from an empty queue."""


def _check_capacity(capacity: int) -> None:
    if capacity < 1:
        raise ValueError("capacity must be at least 1")


class LinearQueue:
    """A queue that accepts at most ``capacity`` items in its lifetime."""

    def __init__(self, capacity: int = 5) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._items: list[Any] = []

    def enqueue(self, item: Any) -> None:
        """Add ``item`` at the rear of the queue."""
        if len(self._items) >= self.capacity:
            raise QueueFull(f"queue is full ({self.capacity} items)")
        self._items.append(item)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the front of the queue to the rear."""
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


class CircularQueue:
    """A queue kept in a ring of ``capacity`` slots that are reused."""

    def __init__(self, capacity: int = 5) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._size = 0

    def enqueue(self, item: Any) -> None:
        """Add ``item`` at the rear of the queue."""
        if self._size == self.capacity:
            raise QueueFull(f"queue is full ({self.capacity} items)")
        self._slots[(self._front + self._size) % self.capacity] = item
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the item at the front."""
        if self._size == 0:
            raise QueueEmpty("queue is empty")
        item = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % self.capacity
        self._size -= 1
        return item

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the front of the queue to the rear."""
        return (
            self._slots[(self._front + offset) % self.capacity]
            for offset in range(self._size)
        )

    def __len__(self) -> int:
        return self._size