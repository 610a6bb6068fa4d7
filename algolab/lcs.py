"""Longest common subsequence with the traceback table."""

from __future__ import annotations

from dataclasses import dataclass

DIAGONAL = "\\"
UP = "^"
LEFT = "<"
NONE = " "


@dataclass(frozen=True)
class LCSResult:
    """The length table, arrow table, cells on the traceback and the subsequence."""

    x: str
    y: str
    lengths: tuple[tuple[int, ...], ...]
    arrows: tuple[tuple[str, ...], ...]
    trace: frozenset[tuple[int, int]]
    sequence: str

    @property
    def length(self) -> int:
        return self.lengths[-1][-1]

    def render(self) -> str:
        """The table with arrows shown on the traceback, then the result."""
        header = "    " + "       " + "".join(f"  {ch}  " for ch in self.y)
        rows = []
        for i, (length_row, arrow_row) in enumerate(zip(self.lengths, self.arrows)):
            label = "     " if i == 0 else f" {self.x[i - 1]}   "
            cells = "".join(
                f" {arrow if (i, j) in self.trace else ' '}{length:2d} "
                for j, (length, arrow) in enumerate(zip(length_row, arrow_row))
            )
            rows.append(label + cells)
        return "\n".join(
            [header, *rows, "", f"LCS Length: {self.length}", "", f"LCS: {self.sequence}"]
        )


def lcs(x: str, y: str) -> LCSResult:
    """Longest common subsequence of ``x`` and ``y``; ties prefer moving up."""
    m, n = len(x), len(y)
    lengths = [[0] * (n + 1) for _ in range(m + 1)]
    arrows = [[NONE] * (n + 1) for _ in range(m + 1)]
    for i, a in enumerate(x, start=1):
        for j, b in enumerate(y, start=1):
            if a == b:
                lengths[i][j] = lengths[i - 1][j - 1] + 1
                arrows[i][j] = DIAGONAL
            elif lengths[i - 1][j] >= lengths[i][j - 1]:
                lengths[i][j] = lengths[i - 1][j]
                arrows[i][j] = UP
            else:
                lengths[i][j] = lengths[i][j - 1]
                arrows[i][j] = LEFT

    trace = set()
    picked = []
    i, j = m, n
    while i > 0 and j > 0:
        trace.add((i, j))
        if arrows[i][j] == DIAGONAL:
            picked.append(x[i - 1])
            i -= 1
            j -= 1
        elif arrows[i][j] == UP:
            i -= 1
        else:
            j -= 1

    return LCSResult(
        x=x,
        y=y,
        lengths=tuple(tuple(row) for row in lengths),
        arrows=tuple(tuple(row) for row in arrows),
        trace=frozenset(trace),
        sequence="".join(reversed(picked)),
    )