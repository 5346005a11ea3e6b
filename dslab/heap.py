"""A max-heap kept in a list, with insertion and removal of any value."""

from __future__ import annotations

from typing import Any, Iterable, Iterator


class MaxHeap:
    """A binary max-heap: every parent is at least as large as its children."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: list[Any] = []
        for value in values:
            self.push(value)

    def _sift_up(self, index: int) -> None:
        items = self._items
        value = items[index]
        while index > 0:
            parent = (index - 1) // 2
            if value <= items[parent]:
                break
            items[index] = items[parent]
            index = parent
        items[index] = value

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            child = 2 * index + 1
            if child >= size:
                return
            if child + 1 < size and items[child + 1] > items[child]:
                child += 1
            if items[index] >= items[child]:
                return
            items[index], items[child] = items[child], items[index]
            index = child

    def push(self, value: Any) -> None:
        """Add ``value`` to the heap."""
        self._items.append(value)
        self._sift_up(len(self._items) - 1)

    def remove(self, value: Any) -> None:
        """Remove one occurrence of ``value`` from the heap."""
        try:
            index = self._items.index(value)
        except ValueError:
            raise ValueError(f"{value!r} is not in the heap") from None
        last = self._items.pop()
        if index == len(self._items):
            return
        self._items[index] = last
        if index > 0 and last > self._items[(index - 1) // 2]:
            self._sift_up(index)
        else:
            self._sift_down(index)

    def peek(self) -> Any:
        """Return the largest value without removing it."""
        if not self._items:
            raise IndexError("heap is empty")
        return self._items[0]

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the values in their array order."""
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"MaxHeap({self._items!r})"