"""Sum of subsets by backtracking, with the explored state-space tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

_INDENT = 4


@dataclass(frozen=True)
class SearchNode:
    """One node of the search tree.

    ``included`` is None at the root, True when the node was reached by
    taking the previous item and False when by leaving it out.
    """

    total: int
    index: int
    remaining: int
    depth: int
    included: bool | None
    selection: tuple[int, ...]

    @property
    def label(self) -> str:
        return f"[ {self.total} | {self.index} | {self.remaining} ]"


def subset_search(weights: Sequence[int], target: int) -> Iterator[SearchNode]:
    """Yield the nodes of the search tree in depth-first order."""
    weights = tuple(weights)
    n = len(weights)

    def visit(
        total: int,
        k: int,
        remaining: int,
        depth: int,
        included: bool | None,
        selection: tuple[int, ...],
    ) -> Iterator[SearchNode]:
        yield SearchNode(total, k, remaining, depth, included, selection)
        if k >= n:
            return
        weight = weights[k]
        if total + weight <= target:
            yield from visit(
                total + weight, k + 1, remaining - weight, depth + 1, True, selection + (1,)
            )
        if total + remaining - weight >= target:
            yield from visit(
                total, k + 1, remaining - weight, depth + 1, False, selection + (0,)
            )

    yield from visit(0, 0, sum(weights), 0, None, ())


def render_tree(weights: Sequence[int], target: int) -> str:
    """Draw the search tree as indented text with branch markers."""
    lines = []
    for node in subset_search(weights, target):
        if node.included is not None:
            marker = "/" if node.included else "\\"
            lines.append(" " * (_INDENT * (node.depth - 1)) + marker)
        lines.append(" " * (_INDENT * node.depth) + node.label)
    return "\n".join(lines)


def matching_subsets(weights: Sequence[int], target: int) -> Iterator[tuple[int, ...]]:
    """Yield 0/1 selection vectors of the subsets that sum to ``target``."""
    weights = tuple(weights)
    for node in subset_search(weights, target):
        if node.index >= len(weights) and node.total == target:
            yield node.selection