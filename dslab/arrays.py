"""Array operations: traversal statistics, insertion, deletion, sorting,
searching, merging and flattening of two-dimensional arrays."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ArrayStats:
    """Summary of a non-empty sequence of integers."""

    maximum: int
    minimum: int
    total: int
    average: float
    sines: tuple[tuple[int, float], ...]


def summarize(values: Sequence[int]) -> ArrayStats:
    """Return maximum, minimum, total, average and the sine of every value."""
    if not values:
        raise ValueError("cannot summarize an empty array")
    total = sum(values)
    return ArrayStats(
        maximum=max(values),
        minimum=min(values),
        total=total,
        average=total / len(values),
        sines=tuple((value, math.sin(value)) for value in values),
    )


def insert_at(values: Sequence[T], position: int, value: T) -> list[T]:
    """Return a copy of ``values`` with ``value`` placed at ``position``."""
    if not 0 <= position <= len(values):
        raise IndexError(f"position {position} outside 0..{len(values)}")
    result = list(values)
    result.insert(position, value)
    return result


def insert_sorted(values: Sequence[T], value: T) -> list[T]:
    """Insert ``value`` before the first element greater than it."""
    position = next(
        (index for index, item in enumerate(values) if value < item),
        len(values),
    )
    return insert_at(values, position, value)


def delete_at(values: Sequence[T], position: int) -> list[T]:
    """Return a copy of ``values`` without the element at ``position``."""
    if not 0 <= position < len(values):
        raise IndexError(f"position {position} outside 0..{len(values) - 1}")
    result = list(values)
    del result[position]
    return result


def delete_all(values: Sequence[T], item: T) -> list[T]:
    """Return a copy of ``values`` with every element equal to ``item`` removed."""
    return [value for value in values if value != item]


def bubble_sort(values: Sequence[T]) -> list[T]:
    """Return the elements of ``values`` in ascending order using bubble sort."""
    result = list(values)
    for unsorted_end in range(len(result) - 1, 0, -1):
        for index in range(unsorted_end):
            if result[index] > result[index + 1]:
                result[index], result[index + 1] = result[index + 1], result[index]
    return result


def linear_search(values: Sequence[T], target: T) -> int | None:
    """Return the index of the first element equal to ``target``, or None."""
    return next(
        (index for index, value in enumerate(values) if value == target), None
    )


def binary_search(values: Sequence[T], target: T) -> int | None:
    """Search a sorted sequence by halving; return a matching index or None."""
    start, end = 0, len(values) - 1
    while start <= end:
        middle = (start + end) // 2
        item = values[middle]
        if item == target:
            return middle
        if item > target:
            end = middle - 1
        else:
            start = middle + 1
    return None


def merge(first: Sequence[Any], second: Sequence[Any]) -> Any:
    """Join two sequences: strings give a string, anything else a list."""
    if isinstance(first, str) and isinstance(second, str):
        return first + second
    return [*first, *second]


def _check_rectangular(matrix: Sequence[Sequence[Any]]) -> int:
    widths = {len(row) for row in matrix}
    if len(widths) > 1:
        raise ValueError("matrix rows differ in length")
    return widths.pop() if widths else 0


def flatten_rows(matrix: Sequence[Sequence[T]]) -> list[T]:
    """Copy a two-dimensional array into a list, row by row."""
    _check_rectangular(matrix)
    return [value for row in matrix for value in row]


def flatten_columns(matrix: Sequence[Sequence[T]]) -> list[T]:
    """Copy a two-dimensional array into a list, column by column."""
    width = _check_rectangular(matrix)
    return [row[column] for column in range(width) for row in matrix]


def compress_sparse(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Store the non-zero elements of a matrix row by row."""
    return [value for value in flatten_rows(matrix) if value != 0]


def locate_in_compressed(
    matrix: Sequence[Sequence[int]], row: int, column: int
) -> int | None:
    """Return where ``matrix[row][column]`` first occurs in the compressed form.

    Zero elements are not stored, so they are never found.
    """
    _check_rectangular(matrix)
    if not 0 <= row < len(matrix) or not 0 <= column < len(matrix[row]):
        raise IndexError(f"element ({row}, {column}) is outside the matrix")
    return linear_search(compress_sparse(matrix), matrix[row][column])