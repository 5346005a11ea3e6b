"""A binary search tree kept in an array: the children of slot i sit in
slots 2i+1 and 2i+2."""

from __future__ import annotations

from typing import Any, Optional


class ArrayBST:
    """A binary search tree stored in a fixed number of array slots."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._slots: list[Any] = [None] * capacity

    def _locate(self, value: Any) -> int:
        index = 0
        while index < len(self._slots):
            current = self._slots[index]
            if current is None or current == value:
                return index
            index = 2 * index + 1 if value < current else 2 * index + 2
        raise IndexError(f"no slot for {value!r} within capacity {len(self._slots)}")

    def insert(self, value: Any) -> int:
        """Store ``value`` and return its slot; a value already present stays put."""
        if value is None:
            raise TypeError("None cannot be stored")
        index = self._locate(value)
        if self._slots[index] is None:
            self._slots[index] = value
        return index

    def index(self, value: Any) -> Optional[int]:
        """Return the slot holding ``value``, or None if it is not stored."""
        try:
            index = self._locate(value)
        except IndexError:
            return None
        return index if self._slots[index] is not None else None

    def slots(self, count: int = 15) -> list[Any]:
        """Return the first ``count`` slots; empty slots are None."""
        if count < 0:
            raise ValueError("count must not be negative")
        return self._slots[:count]