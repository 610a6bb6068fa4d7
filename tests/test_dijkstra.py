import math

import pytest

from algolab.all_pairs import floyd_warshall
from algolab.dijkstra import dijkstra

INF = math.inf
COST = [
    [0, 40, 20, 10, 50, INF, 60, INF],
    [INF, 0, 1, INF, 5, INF, INF, INF],
    [INF, INF, 0, INF, 2, 10, 2, INF],
    [INF, INF, 5, 0, INF, INF, 5, INF],
    [INF, INF, INF, INF, 0, 3, INF, 5],
    [INF, INF, INF, INF, INF, 0, 3, 5],
    [INF, INF, INF, INF, INF, INF, 0, 3],
    [INF, 2, 3, 5, INF, INF, INF, 0],
]


def test_matches_floyd_warshall():
    result = dijkstra(COST, 0)
    assert result.distances == floyd_warshall(COST).distances[0]


def test_path_to_vertex_one():
    assert dijkstra(COST, 0).path(1) == [0, 3, 6, 7, 1]


def test_path_weights_equal_distances():
    result = dijkstra(COST, 0)
    for target in range(len(COST)):
        vertices = result.path(target)
        assert vertices[0] == 0
        assert vertices[-1] == target
        total = sum(COST[a][b] for a, b in zip(vertices, vertices[1:]))
        assert total == result.distances[target]


def test_history_tracks_each_settled_vertex():
    result = dijkstra(COST, 0)
    assert len(result.history) == len(result.order) == len(COST) - 1
    assert result.history[-1] == result.distances
    assert sorted(result.order) == list(range(1, len(COST)))


def test_unreachable_vertex():
    result = dijkstra([[0, INF], [INF, 0]], 0)
    assert result.distances == (0, INF)
    assert result.path(1) is None
    assert result.path(0) == [0]
    assert result.order == ()


def test_bad_source_raises():
    with pytest.raises(ValueError):
        dijkstra(COST, 8)


def test_non_square_raises():
    with pytest.raises(ValueError):
        dijkstra([[0, 1]], 0)