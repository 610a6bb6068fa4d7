"""Enumerate Hamiltonian cycles by backtracking."""

from __future__ import annotations

from typing import Iterator, Sequence


def hamiltonian_cycles(
    adjacency: Sequence[Sequence[int]],
) -> Iterator[tuple[int, ...]]:
    """Yield every Hamiltonian cycle starting and ending at vertex 0.

    Each cycle lists its vertices in visiting order with the start repeated
    at the end. Cycles come in lexicographic order.
    """
    matrix = [list(row) for row in adjacency]
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("adjacency matrix must be square")
    if n == 0:
        return

    path = [0]
    used = {0}

    def extend() -> Iterator[tuple[int, ...]]:
        if len(path) == n:
            if matrix[path[-1]][0]:
                yield (*path, 0)
            return
        for vertex in range(n):
            if vertex not in used and matrix[path[-1]][vertex]:
                path.append(vertex)
                used.add(vertex)
                yield from extend()
                used.discard(vertex)
                path.pop()

    yield from extend()