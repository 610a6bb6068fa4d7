"""Single-source shortest paths with non-negative weights by Dijkstra's method."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class DijkstraResult:
    """Distances and parents from ``source``; ``order`` lists the vertices in
    the order they were settled and ``history`` the distances after each."""

    source: int
    distances: tuple[float, ...]
    parents: tuple[int | None, ...]
    order: tuple[int, ...]
    history: tuple[tuple[float, ...], ...]

    def path(self, target: int) -> list[int] | None:
        """Vertices on a shortest path from the source to ``target``, or None."""
        if math.isinf(self.distances[target]):
            return None
        vertices = []
        current: int | None = target
        while current is not None:
            vertices.append(current)
            current = self.parents[current]
        vertices.reverse()
        return vertices


def dijkstra(cost: Sequence[Sequence[float]], source: int) -> DijkstraResult:
    """Shortest distances from ``source``; ``math.inf`` marks no edge."""
    matrix = [list(row) for row in cost]
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("cost matrix must be square")
    if not 0 <= source < n:
        raise ValueError(f"source must be between 0 and {n - 1}")

    dist = list(matrix[source])
    parents: list[int | None] = [
        None if math.isinf(weight) else source for weight in matrix[source]
    ]
    dist[source] = 0
    parents[source] = None
    settled = {source}
    order: list[int] = []
    history: list[tuple[float, ...]] = []

    for _ in range(n - 1):
        candidates = [v for v in range(n) if v not in settled and not math.isinf(dist[v])]
        if not candidates:
            break
        u = min(candidates, key=dist.__getitem__)
        settled.add(u)
        order.append(u)
        for w, weight in enumerate(matrix[u]):
            if w not in settled and not math.isinf(weight) and dist[u] + weight < dist[w]:
                dist[w] = dist[u] + weight
                parents[w] = u
        history.append(tuple(dist))

    return DijkstraResult(source, tuple(dist), tuple(parents), tuple(order), tuple(history))