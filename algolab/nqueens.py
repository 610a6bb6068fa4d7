"""The n-queens problem solved by backtracking."""

from __future__ import annotations

from typing import Iterator, Sequence


def can_place(queens: Sequence[int], row: int, column: int) -> bool:
    """True if a queen at (row, column) is safe from the queens in earlier rows."""
    return all(
        placed != column and abs(placed - column) != row - earlier
        for earlier, placed in enumerate(list(queens)[:row])
    )


def n_queens(n: int) -> Iterator[tuple[int, ...]]:
    """Yield every solution as a tuple of column indices, one per row."""
    if n < 1:
        return
    queens: list[int] = []

    def place(row: int) -> Iterator[tuple[int, ...]]:
        for column in range(n):
            if can_place(queens, row, column):
                queens.append(column)
                if row == n - 1:
                    yield tuple(queens)
                else:
                    yield from place(row + 1)
                queens.pop()

    yield from place(0)


def count_solutions(n: int) -> int:
    """Number of ways to place n non-attacking queens."""
    return sum(1 for _ in n_queens(n))


def render_board(solution: Sequence[int], empty: str = ".") -> str:
    """Draw a solution as a grid, marking queens with ``Q``."""
    size = len(solution)
    return "\n".join(
        " ".join("Q" if cell == column else empty for cell in range(size))
        for column in solution
    )