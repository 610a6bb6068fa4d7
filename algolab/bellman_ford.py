"""Single-source shortest paths with negative edges by Bellman-Ford."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence


class NegativeCycleError(ValueError):
    """The graph has a negative-weight cycle reachable from the source."""


@dataclass(frozen=True)
class ShortestPaths:
    """Distances and parent links from ``source``, with the distances after
    each relaxation round."""

    source: int
    distances: tuple[float, ...]
    parents: tuple[int | None, ...]
    history: tuple[tuple[float, ...], ...]

    def path(self, target: int) -> list[int] | None:
        """Vertices on a shortest path from the source to ``target``, or None."""
        if math.isinf(self.distances[target]):
            return None
        vertices = []
        current: int | None = target
        while current is not None:
            vertices.append(current)
            if len(vertices) > len(self.distances):
                raise ValueError("parent links form a cycle")
            current = self.parents[current]
        vertices.reverse()
        return vertices


def bellman_ford(graph: Sequence[Sequence[float]], source: int) -> ShortestPaths:
    """Shortest distances from ``source``; ``math.inf`` marks no edge."""
    matrix = [list(row) for row in graph]
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("graph must be a square matrix")
    if not 0 <= source < n:
        raise ValueError(f"source must be between 0 and {n - 1}")

    edges = [
        (u, v, weight)
        for u, row in enumerate(matrix)
        for v, weight in enumerate(row)
        if not math.isinf(weight)
    ]
    dist = [math.inf] * n
    parents: list[int | None] = [None] * n
    dist[source] = 0
    history = []
    for _ in range(n - 1):
        for u, v, weight in edges:
            if not math.isinf(dist[u]) and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
                parents[v] = u
        history.append(tuple(dist))

    if any(
        not math.isinf(dist[u]) and dist[u] + weight < dist[v]
        for u, v, weight in edges
    ):
        raise NegativeCycleError("graph contains a negative weight cycle")

    return ShortestPaths(source, tuple(dist), tuple(parents), tuple(history))