import math

import pytest

from algolab.bellman_ford import NegativeCycleError, bellman_ford

INF = math.inf

SAMPLE = [
    [0, 4, INF, 7, -3, INF, 4],
    [6, 0, -2, 6, INF, 1, INF],
    [4, 3, 0, INF, 1, 4, INF],
    [3, INF, 3, 0, INF, 5, 5],
    [INF, 4, INF, 2, 0, INF, INF],
    [-1, 2, -2, INF, -2, 1, 1],
    [INF, INF, INF, 6, -2, 1, 0],
]


def test_small_worked_example():
    result = bellman_ford([[0, 4, INF], [INF, 0, -2], [INF, INF, 0]], 0)
    assert result.distances == (0, 4, 2)
    assert result.path(2) == [0, 1, 2]


def test_source_distance_is_zero():
    result = bellman_ford(SAMPLE, 0)
    assert result.distances[0] == 0
    assert result.path(0) == [0]


@pytest.mark.parametrize("source", range(len(SAMPLE)))
def test_no_edge_can_be_relaxed(source):
    d = bellman_ford(SAMPLE, source).distances
    for u, row in enumerate(SAMPLE):
        for v, weight in enumerate(row):
            if not math.isinf(weight):
                assert d[v] <= d[u] + weight


@pytest.mark.parametrize("source", range(len(SAMPLE)))
def test_paths_cost_their_distance(source):
    result = bellman_ford(SAMPLE, source)
    for target in range(len(SAMPLE)):
        path = result.path(target)
        assert path[0] == source and path[-1] == target
        cost = sum(SAMPLE[a][b] for a, b in zip(path, path[1:]))
        assert cost == result.distances[target]


def test_history_has_one_entry_per_round():
    result = bellman_ford(SAMPLE, 0)
    assert len(result.history) == len(SAMPLE) - 1
    assert result.history[-1] == result.distances
    for before, after in zip(result.history, result.history[1:]):
        assert all(b >= a for b, a in zip(before, after))


def test_negative_cycle_detected():
    with pytest.raises(NegativeCycleError):
        bellman_ford([[0, 1], [-2, 0]], 0)


def test_negative_cycle_is_value_error():
    with pytest.raises(ValueError):
        bellman_ford([[0, 1, INF], [INF, 0, -3], [1, INF, 0]], 0)


def test_unreachable_vertex():
    result = bellman_ford([[0, INF], [INF, 0]], 0)
    assert math.isinf(result.distances[1])
    assert result.path(1) is None


@pytest.mark.parametrize("source", [-1, 7])
def test_source_out_of_range(source):
    with pytest.raises(ValueError):
        bellman_ford(SAMPLE, source)


def test_non_square_rejected():
    with pytest.raises(ValueError):
        bellman_ford([[0, 1, 2], [1, 0]], 0)