"""Integer matrix arithmetic: addition, subtraction, multiplication and powers."""

from __future__ import annotations

from typing import Sequence

Matrix = list[list[int]]


def _shape(matrix: Sequence[Sequence[int]]) -> tuple[int, int]:
    widths = {len(row) for row in matrix}
    if len(widths) > 1:
        raise ValueError("matrix rows differ in length")
    return len(matrix), (widths.pop() if widths else 0)


def _require_same_shape(
    first: Sequence[Sequence[int]], second: Sequence[Sequence[int]]
) -> None:
    first_shape, second_shape = _shape(first), _shape(second)
    if first_shape != second_shape:
        raise ValueError(
            f"matrices of shape {first_shape} and {second_shape} "
            "cannot be added or subtracted"
        )


def add(first: Sequence[Sequence[int]], second: Sequence[Sequence[int]]) -> Matrix:
    """Return the element-wise sum of two matrices of the same shape."""
    _require_same_shape(first, second)
    return [[a + b for a, b in zip(row_a, row_b)] for row_a, row_b in zip(first, second)]


def subtract(
    first: Sequence[Sequence[int]], second: Sequence[Sequence[int]]
) -> Matrix:
    """Return the element-wise difference of two matrices of the same shape."""
    _require_same_shape(first, second)
    return [[a - b for a, b in zip(row_a, row_b)] for row_a, row_b in zip(first, second)]


def multiply(
    first: Sequence[Sequence[int]], second: Sequence[Sequence[int]]
) -> Matrix:
    """Return the matrix product; the first's columns must match the second's rows."""
    _, first_columns = _shape(first)
    second_rows, second_columns = _shape(second)
    if first_columns != second_rows:
        raise ValueError(
            f"cannot multiply a matrix with {first_columns} columns "
            f"by one with {second_rows} rows"
        )
    columns = list(zip(*second)) if second_rows else []
    return [
        [sum(a * b for a, b in zip(row, column)) for column in columns]
        if columns
        else [0] * second_columns
        for row in first
    ]


def identity(size: int) -> Matrix:
    """Return the ``size`` by ``size`` identity matrix."""
    if size < 0:
        raise ValueError("size must not be negative")
    return [[1 if row == column else 0 for column in range(size)] for row in range(size)]


def power(matrix: Sequence[Sequence[int]], exponent: int) -> Matrix:
    """Raise a square matrix to a non-negative integer power."""
    rows, columns = _shape(matrix)
    if rows != columns:
        raise ValueError("only square matrices can be raised to a power")
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    result = identity(rows)
    for _ in range(exponent):
        result = multiply(matrix, result)
    return result