"""Optimal binary search trees by dynamic programming."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

Table = tuple[tuple[int, ...], ...]


@dataclass(frozen=True)
class OBSTTables:
    """Weight, cost and root tables indexed ``[i][j]`` for ``0 <= i <= j <= n``."""

    weight: Table
    cost: Table
    root: Table

    @property
    def total_cost(self) -> int:
        """Cost of the optimal tree over all keys."""
        return self.cost[0][-1]

    def tree_lines(self, keys: Sequence[str]) -> list[str]:
        """The optimal tree in preorder, indented two spaces per level."""
        names = list(keys)
        n = len(self.root) - 1
        if len(names) != n:
            raise ValueError(f"expected {n} keys, got {len(names)}")
        lines: list[str] = []

        def walk(i: int, j: int, level: int) -> None:
            if i < j:
                root = self.root[i][j]
                lines.append("  " * level + str(names[root - 1]))
                walk(i, root - 1, level + 1)
                walk(root, j, level + 1)

        walk(0, n, 0)
        return lines


def optimal_bst(p: Sequence[int], q: Sequence[int]) -> OBSTTables:
    """Build the tables for keys with success weights ``p`` (keys 1..n) and
    failure weights ``q`` (gaps 0..n)."""
    success = [0, *p]
    failure = list(q)
    n = len(success) - 1
    if len(failure) != n + 1:
        raise ValueError("q must have exactly one more entry than p")
    size = n + 1
    w = [[0] * size for _ in range(size)]
    c = [[0] * size for _ in range(size)]
    r = [[0] * size for _ in range(size)]
    for i in range(size):
        w[i][i] = failure[i]
    for i in range(n):
        w[i][i + 1] = failure[i] + failure[i + 1] + success[i + 1]
        c[i][i + 1] = w[i][i + 1]
        r[i][i + 1] = i + 1
    for span in range(2, n + 1):
        for i in range(n - span + 1):
            j = i + span
            w[i][j] = w[i][j - 1] + success[j] + failure[j]
            k = min(
                range(r[i][j - 1], r[i + 1][j] + 1),
                key=lambda m: c[i][m - 1] + c[m][j],
            )
            c[i][j] = w[i][j] + c[i][k - 1] + c[k][j]
            r[i][j] = k

    def freeze(table: list[list[int]]) -> Table:
        return tuple(tuple(row) for row in table)

    return OBSTTables(freeze(w), freeze(c), freeze(r))