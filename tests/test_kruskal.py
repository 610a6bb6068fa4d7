import pytest

from algolab.kruskal import DisconnectedGraphError, Edge, kruskal

EDGES = [
    (1, 2, 1), (1, 3, 2), (2, 3, 1), (2, 6, 1), (2, 5, 2), (2, 8, 3),
    (3, 4, 3), (3, 5, 2), (3, 6, 2), (4, 6, 2), (5, 6, 3), (5, 8, 1),
    (6, 7, 1), (7, 5, 2), (8, 5, 1),
]


def _reachable(tree, start):
    seen = {start}
    frontier = [start]
    while frontier:
        vertex = frontier.pop()
        for u, v, _ in tree:
            for a, b in ((u, v), (v, u)):
                if a == vertex and b not in seen:
                    seen.add(b)
                    frontier.append(b)
    return seen


def test_minimum_cost():
    cost, _ = kruskal(8, EDGES)
    assert cost == 9


def test_tree_spans_all_vertices():
    cost, tree = kruskal(8, EDGES)
    assert len(tree) == 7
    assert _reachable(tree, 1) == set(range(1, 9))
    assert sum(edge.weight for edge in tree) == cost
    assert all(edge in [Edge(*e) for e in EDGES] for edge in tree)


def test_tie_broken_by_first_endpoint():
    _, tree = kruskal(3, [(2, 3, 1), (1, 3, 1), (1, 2, 1)])
    assert tree == (Edge(1, 3, 1), Edge(1, 2, 1))


def test_single_vertex():
    assert kruskal(1, []) == (0, ())


def test_disconnected_raises():
    with pytest.raises(DisconnectedGraphError):
        kruskal(4, [(1, 2, 1), (3, 4, 1)])


def test_disconnected_is_value_error():
    with pytest.raises(ValueError):
        kruskal(3, [(1, 2, 1)])


def test_no_vertices_raises():
    with pytest.raises(ValueError):
        kruskal(0, [])