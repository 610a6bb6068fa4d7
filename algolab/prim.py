"""Minimum spanning trees by Prim's method over an edge list."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from algolab.kruskal import DisconnectedGraphError


@dataclass(frozen=True)
class PrimStep:
    """One edge added to the tree, and the cheapest known link to every
    vertex afterwards (0 for vertices already in the tree)."""

    iteration: int
    source: int
    dest: int
    cost: float
    vicinity: tuple[float, ...]


@dataclass(frozen=True)
class PrimResult:
    """Total tree cost and the steps that built the tree."""

    cost: float
    steps: tuple[PrimStep, ...]

    @property
    def edges(self) -> tuple[tuple[int, int, float], ...]:
        """Tree edges as (tree vertex, new vertex, cost) in the order added."""
        return tuple((step.source, step.dest, step.cost) for step in self.steps)


def prim(edges: Iterable[tuple[int, int, float]], num_vertices: int) -> PrimResult:
    """Grow a minimum spanning tree from vertex 1; vertices are numbered 1..n."""
    if num_vertices < 1:
        raise ValueError("the graph must have at least one vertex")
    edge_list = [tuple(edge) for edge in edges]
    for source, dest, _ in edge_list:
        if not (1 <= source <= num_vertices and 1 <= dest <= num_vertices):
            raise ValueError(f"edge ({source}, {dest}) has a vertex outside 1..{num_vertices}")

    selected = [False] * num_vertices
    costs = [math.inf] * num_vertices
    selected[0] = True
    costs[0] = 0
    steps: list[PrimStep] = []
    total: float = 0

    while len(steps) < num_vertices - 1:
        best = math.inf
        choice: tuple[int, int] | None = None
        for source, dest, cost in edge_list:
            s, d = source - 1, dest - 1
            if selected[s] and not selected[d]:
                costs[d] = min(costs[d], cost)
                if cost < best:
                    best = cost
                    choice = (source, dest)
            elif selected[d] and not selected[s]:
                costs[s] = min(costs[s], cost)
                if cost <= best:
                    best = cost
                    choice = (dest, source)
        if choice is None:
            raise DisconnectedGraphError("the graph is not connected; no spanning tree exists")
        x, y = choice
        selected[y - 1] = True
        total += best
        vicinity = tuple(0 if done else cost for done, cost in zip(selected, costs))
        steps.append(PrimStep(len(steps) + 1, x, y, best, vicinity))

    return PrimResult(total, tuple(steps))