"""Minimum spanning trees by Kruskal's method."""

from __future__ import annotations

from typing import Hashable, Iterable, NamedTuple


class Edge(NamedTuple):
    """An undirected weighted edge."""

    u: Hashable
    v: Hashable
    weight: float


class DisconnectedGraphError(ValueError):
    """The graph is not connected, so no spanning tree exists."""


def kruskal(
    num_vertices: int, edges: Iterable[tuple[Hashable, Hashable, float]]
) -> tuple[float, tuple[Edge, ...]]:
    """Total cost and edges of a minimum spanning tree.

    Edges are considered by weight, ties broken by the first endpoint.
    """
    if num_vertices < 1:
        raise ValueError("the graph must have at least one vertex")
    queue = sorted((Edge(*edge) for edge in edges), key=lambda e: (e.weight, e.u))
    parent: dict[Hashable, Hashable] = {}

    def find(vertex: Hashable) -> Hashable:
        parent.setdefault(vertex, vertex)
        while parent[vertex] != vertex:
            parent[vertex] = parent[parent[vertex]]
            vertex = parent[vertex]
        return vertex

    tree: list[Edge] = []
    total: float = 0
    for edge in queue:
        if len(tree) == num_vertices - 1:
            break
        root_u, root_v = find(edge.u), find(edge.v)
        if root_u != root_v:
            tree.append(edge)
            total += edge.weight
            parent[root_u] = root_v

    if len(tree) != num_vertices - 1:
        raise DisconnectedGraphError("the graph is not connected; no spanning tree exists")
    return total, tuple(tree)