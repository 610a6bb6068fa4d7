"""All-pairs shortest paths by the Floyd-Warshall recurrence."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

Distances = tuple[tuple[float, ...], ...]
Predecessors = tuple[tuple["int | None", ...], ...]


@dataclass(frozen=True)
class AllPairsResult:
    """Final distances and predecessors, with a snapshot of both after the
    initial step and after each intermediate vertex."""

    distances: Distances
    predecessors: Predecessors
    history: tuple[tuple[Distances, Predecessors], ...]

    def path(self, source: int, target: int) -> list[int] | None:
        """Vertices on a shortest path from ``source`` to ``target``, or None."""
        if math.isinf(self.distances[source][target]):
            return None
        vertices = [target]
        current = target
        while current != source:
            current = self.predecessors[source][current]
            if current is None:
                return None
            vertices.append(current)
            if len(vertices) > len(self.distances):
                raise ValueError("path runs through a negative cycle")
        vertices.reverse()
        return vertices


def _freeze(rows: list[list]) -> tuple:
    return tuple(tuple(row) for row in rows)


def floyd_warshall(cost: Sequence[Sequence[float]]) -> AllPairsResult:
    """Shortest distances between all vertices; ``math.inf`` marks no edge."""
    dist = [list(row) for row in cost]
    n = len(dist)
    if any(len(row) != n for row in dist):
        raise ValueError("cost matrix must be square")
    pred: list[list[int | None]] = [
        [None if i == j else i for j in range(n)] for i in range(n)
    ]
    history = [(_freeze(dist), _freeze(pred))]
    for k in range(n):
        for i in range(n):
            if math.isinf(dist[i][k]):
                continue
            for j in range(n):
                if math.isinf(dist[k][j]):
                    continue
                through = dist[i][k] + dist[k][j]
                if dist[i][j] > through:
                    dist[i][j] = through
                    pred[i][j] = pred[k][j]
        history.append((_freeze(dist), _freeze(pred)))
    return AllPairsResult(_freeze(dist), _freeze(pred), tuple(history))