"""Graphs as adjacency matrices and adjacency lists: path counts, path
matrices, strong connectivity, shortest paths and traversals."""

from __future__ import annotations

import math
from collections import deque
from typing import Sequence

from dslab.matrix import Matrix, add, identity, multiply, power


def _size(matrix: Sequence[Sequence[int]]) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    return size


def adjacent_pairs(matrix: Sequence[Sequence[int]]) -> list[tuple[int, int]]:
    """Return every (source, destination) pair joined by an edge, row by row."""
    _size(matrix)
    return [
        (source, destination)
        for source, row in enumerate(matrix)
        for destination, value in enumerate(row)
        if value != 0
    ]


def path_counts(matrix: Sequence[Sequence[int]], length: int) -> Matrix:
    """Return the number of paths of ``length`` edges between every two vertices."""
    _size(matrix)
    return power(matrix, length)


def path_sum_matrix(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Return B = A + A^2 + ... + A^n for an n-vertex adjacency matrix A."""
    size = _size(matrix)
    total = [[0] * size for _ in range(size)]
    current = identity(size)
    for _ in range(size):
        current = multiply(matrix, current)
        total = add(total, current)
    return total


def is_strongly_connected(matrix: Sequence[Sequence[int]]) -> bool:
    """Tell whether every vertex reaches every vertex, itself included."""
    return all(value != 0 for row in path_sum_matrix(matrix) for value in row)


def shortest_paths(weights: Sequence[Sequence[int]]) -> list[list[int | None]]:
    """Return the least path weight between every two vertices.

    A zero weight means no edge; pairs with no path come back as None.
    The diagonal holds the lightest cycle through each vertex.
    """
    size = _size(weights)
    distance = [[value if value != 0 else math.inf for value in row] for row in weights]
    for via in range(size):
        for source in range(size):
            for destination in range(size):
                candidate = distance[source][via] + distance[via][destination]
                if candidate < distance[source][destination]:
                    distance[source][destination] = candidate
    return [[None if value == math.inf else value for value in row] for row in distance]


def matrix_traversal(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """Visit vertices depth first from ``start``, trying neighbours in index order."""
    size = _size(matrix)
    if not 0 <= start < size:
        raise IndexError(f"vertex {start} outside 0..{size - 1}")
    visited: list[int] = []
    seen = set()

    def visit(vertex: int) -> None:
        visited.append(vertex)
        seen.add(vertex)
        for neighbour, value in enumerate(matrix[vertex]):
            if value and neighbour not in seen:
                visit(neighbour)

    visit(start)
    return visited


class Graph:
    """A graph stored as adjacency lists; new neighbours go to the front."""

    def __init__(self, vertex_count: int, directed: bool = False) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self.vertex_count = vertex_count
        self.directed = directed
        self._adjacency: list[deque[int]] = [deque() for _ in range(vertex_count)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise IndexError(f"vertex {vertex} outside 0..{self.vertex_count - 1}")

    def add_edge(self, source: int, destination: int) -> None:
        """Join two vertices; an undirected graph records both directions."""
        self._check(source)
        self._check(destination)
        self._adjacency[source].appendleft(destination)
        if not self.directed:
            self._adjacency[destination].appendleft(source)

    def neighbours(self, vertex: int) -> list[int]:
        """Return the neighbours of ``vertex``, most recently added first."""
        self._check(vertex)
        return list(self._adjacency[vertex])

    def edges(self) -> list[tuple[int, int]]:
        """Return every stored (source, destination) pair, vertex by vertex."""
        return [
            (source, destination)
            for source, neighbours in enumerate(self._adjacency)
            for destination in neighbours
        ]

    def bfs(self, start: int) -> list[int]:
        """Return the vertices in breadth-first order from ``start``."""
        self._check(start)
        seen = {start}
        queue = deque([start])
        order: list[int] = []
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for neighbour in self._adjacency[vertex]:
                if neighbour not in seen:
                    seen.add(neighbour)
                    queue.append(neighbour)
        return order

    def dfs(self, start: int) -> list[int]:
        """Return the vertices in depth-first order from ``start``."""
        self._check(start)
        order: list[int] = []
        seen = set()

        def visit(vertex: int) -> None:
            seen.add(vertex)
            order.append(vertex)
            for neighbour in self._adjacency[vertex]:
                if neighbour not in seen:
                    visit(neighbour)

        visit(start)
        return order