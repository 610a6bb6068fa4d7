from itertools import permutations

import pytest

from algolab.coloring import colorings

TRIANGLE = [[0, 1, 1], [1, 0, 1], [1, 1, 0]]


def test_path_with_two_colors():
    path = [[0, 1, 0], [1, 0, 1], [0, 1, 0]]
    assert list(colorings(path, 2)) == [(1, 2, 1), (2, 1, 2)]


def test_triangle_needs_three_colors():
    assert list(colorings(TRIANGLE, 2)) == []


def test_triangle_with_three_colors():
    assert set(colorings(TRIANGLE, 3)) == set(permutations((1, 2, 3)))


def test_colorings_are_proper_and_ordered():
    graph = [
        [0, 1, 0, 1, 0],
        [1, 0, 1, 0, 1],
        [0, 1, 0, 1, 0],
        [1, 0, 1, 0, 1],
        [0, 1, 0, 1, 0],
    ]
    found = list(colorings(graph, 3))
    assert found == sorted(found)
    for coloring in found:
        assert all(1 <= c <= 3 for c in coloring)
        for i in range(5):
            for j in range(5):
                if graph[i][j]:
                    assert coloring[i] != coloring[j]


def test_edgeless_graph_allows_everything():
    empty = [[0] * 3 for _ in range(3)]
    assert len(list(colorings(empty, 2))) == 2 ** 3


def test_non_square_raises():
    with pytest.raises(ValueError):
        list(colorings([[0, 1]], 2))