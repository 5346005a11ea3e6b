"""Recursive algorithms: quicksort, factorial, Fibonacci numbers and the
Towers of Hanoi."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, Iterator


@dataclass(frozen=True)
class Move:
    """One Towers of Hanoi move: a disk taken from one peg to another."""

    disk: int
    source: str
    target: str

    def __str__(self) -> str:
        return f"Move disk {self.disk} from {self.source} to {self.target}."


def _partition_sort(items: list[Any], first: int, last: int) -> None:
    pivot = items[(first + last) // 2]
    low, high = first, last
    while low <= high:
        while items[low] < pivot:
            low += 1
        while items[high] > pivot:
            high -= 1
        if low <= high:
            items[low], items[high] = items[high], items[low]
            low += 1
            high -= 1
    if first < high:
        _partition_sort(items, first, high)
    if low < last:
        _partition_sort(items, low, last)


def quicksort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order, sorted around middle pivots."""
    items = list(values)
    if items:
        _partition_sort(items, 0, len(items) - 1)
    return items


def factorial(n: int) -> int:
    """Return n! for a non-negative integer."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    return math.prod(range(2, n + 1))


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, counting F(0) = 0 and F(1) = 1."""
    if n < 0:
        raise ValueError("index must not be negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def fibonacci_sequence(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers."""
    if count < 0:
        raise ValueError("count must not be negative")
    sequence: list[int] = []
    current, following = 0, 1
    for _ in range(count):
        sequence.append(current)
        current, following = following, current + following
    return sequence


def _moves(disks: int, source: str, target: str, auxiliary: str) -> Iterator[Move]:
    if disks == 0:
        return
    yield from _moves(disks - 1, source, auxiliary, target)
    yield Move(disks, source, target)
    yield from _moves(disks - 1, auxiliary, target, source)


def hanoi_moves(
    disks: int, source: str = "A", target: str = "C", auxiliary: str = "B"
) -> list[Move]:
    """Return the moves that carry ``disks`` disks from ``source`` to ``target``."""
    if disks < 0:
        raise ValueError("number of disks must not be negative")
    return list(_moves(disks, source, target, auxiliary))