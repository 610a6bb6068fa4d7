"""Shortest source-to-sink paths through a multistage graph."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

EdgeTriple = tuple[int, int, float]


@dataclass(frozen=True)
class StagePath:
    """A cheapest path with its cost and the per-vertex tables behind it.

    ``costs`` maps each vertex to its best cost (to the sink when searching
    forward, from the source when searching backward). ``links`` maps each
    vertex to its chosen successor or predecessor respectively.
    """

    cost: float
    vertices: tuple[int, ...]
    costs: dict[int, float]
    links: dict[int, int]


def _cost_table(edges: list[EdgeTriple], num_vertices: int) -> dict[tuple[int, int], float]:
    table: dict[tuple[int, int], float] = {}
    for start, end, weight in edges:
        if not (1 <= start <= num_vertices and 1 <= end <= num_vertices):
            raise ValueError(f"edge ({start}, {end}) has a vertex outside 1..{num_vertices}")
        table[start, end] = weight
    return table


def _check_sizes(num_vertices: int, num_stages: int) -> None:
    if num_vertices < 2:
        raise ValueError("a multistage graph needs at least two vertices")
    if not 2 <= num_stages <= num_vertices:
        raise ValueError(f"number of stages must be between 2 and {num_vertices}")


def assign_stages(edges: Iterable[EdgeTriple], num_vertices: int) -> dict[int, int | None]:
    """Stage number of every vertex 1..num_vertices; None where none applies.

    Vertex 1 is stage 1. Each later vertex takes one more than the stage of
    a lower-numbered vertex that has an edge into it.
    """
    linked = {(start, end) for start, end, _ in edges}
    stage: dict[int, float] = {vertex: math.inf for vertex in range(1, num_vertices + 1)}
    if num_vertices >= 1:
        stage[1] = 1
    for i in range(2, num_vertices + 1):
        for j in range(1, i + 1):
            if stage[j] < stage[i] and (j, i) in linked:
                stage[i] = stage[j] + 1
    return {
        vertex: None if math.isinf(value) else int(value) for vertex, value in stage.items()
    }


def forward_path(
    edges: Iterable[EdgeTriple], num_vertices: int, num_stages: int
) -> StagePath:
    """Cheapest path from vertex 1 to the last vertex, costs computed sink-first."""
    _check_sizes(num_vertices, num_stages)
    table = _cost_table(list(edges), num_vertices)
    best: dict[int, float] = {num_vertices: 0.0}
    links: dict[int, int] = {}
    for j in range(num_vertices - 1, 0, -1):
        lowest = math.inf
        for r in range(j + 1, num_vertices + 1):
            weight = table.get((j, r))
            if weight is not None and weight + best[r] < lowest:
                lowest = weight + best[r]
                links[j] = r
        best[j] = lowest
    if math.isinf(best[1]):
        raise ValueError("the last vertex cannot be reached from vertex 1")

    vertices = [1]
    current = 1
    for _ in range(num_stages - 2):
        if current not in links:
            raise ValueError("no path through the given number of stages")
        current = links[current]
        vertices.append(current)
    vertices.append(num_vertices)
    return StagePath(best[1], tuple(vertices), dict(sorted(best.items())), links)


def backward_path(
    edges: Iterable[EdgeTriple], num_vertices: int, num_stages: int
) -> StagePath:
    """Cheapest path from vertex 1 to the last vertex, costs computed source-first."""
    _check_sizes(num_vertices, num_stages)
    table = _cost_table(list(edges), num_vertices)
    best: dict[int, float] = {1: 0.0}
    links: dict[int, int] = {}
    for j in range(2, num_vertices + 1):
        lowest = math.inf
        for r in range(1, j):
            weight = table.get((r, j))
            if weight is not None and weight + best[r] < lowest:
                lowest = weight + best[r]
                links[j] = r
        best[j] = lowest
    if math.isinf(best[num_vertices]):
        raise ValueError("the last vertex cannot be reached from vertex 1")

    vertices = [num_vertices]
    current = num_vertices
    for _ in range(num_stages - 1):
        if current not in links:
            raise ValueError("no path through the given number of stages")
        current = links[current]
        vertices.append(current)
    vertices.reverse()
    return StagePath(best[num_vertices], tuple(vertices), best, links)