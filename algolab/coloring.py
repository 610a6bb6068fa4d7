"""Graph m-colouring by backtracking."""

from __future__ import annotations

from typing import Iterator, Sequence


def colorings(
    adjacency: Sequence[Sequence[int]], colors: int
) -> Iterator[tuple[int, ...]]:
    """Yield every proper colouring using colours ``1..colors``.

    Colourings come in lexicographic order, one colour per vertex.
    """
    matrix = [list(row) for row in adjacency]
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("adjacency matrix must be square")
    if n == 0 or colors < 1:
        return
    assigned: list[int] = []

    def color_vertex(k: int) -> Iterator[tuple[int, ...]]:
        for color in range(1, colors + 1):
            if all(
                not matrix[k][other] or assigned[other] != color
                for other in range(k)
            ):
                assigned.append(color)
                if k == n - 1:
                    yield tuple(assigned)
                else:
                    yield from color_vertex(k + 1)
                assigned.pop()

    yield from color_vertex(0)