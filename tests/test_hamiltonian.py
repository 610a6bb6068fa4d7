from itertools import permutations

import pytest

from algolab.hamiltonian import hamiltonian_cycles


def _complete(n):
    return [[0 if i == j else 1 for j in range(n)] for i in range(n)]


def test_complete_graph_has_every_ordering():
    cycles = list(hamiltonian_cycles(_complete(4)))
    expected = [(0, *perm, 0) for perm in permutations(range(1, 4))]
    assert cycles == expected


def test_square_cycle():
    square = [
        [0, 1, 0, 1],
        [1, 0, 1, 0],
        [0, 1, 0, 1],
        [1, 0, 1, 0],
    ]
    assert list(hamiltonian_cycles(square)) == [(0, 1, 2, 3, 0), (0, 3, 2, 1, 0)]


def test_path_graph_has_no_cycle():
    path = [
        [0, 1, 0],
        [1, 0, 1],
        [0, 1, 0],
    ]
    assert list(hamiltonian_cycles(path)) == []


def test_cycles_use_existing_edges_and_visit_all():
    graph = [
        [0, 1, 1, 0, 1],
        [1, 0, 1, 1, 0],
        [1, 1, 0, 1, 1],
        [0, 1, 1, 0, 1],
        [1, 0, 1, 1, 0],
    ]
    cycles = list(hamiltonian_cycles(graph))
    assert cycles
    for cycle in cycles:
        assert cycle[0] == cycle[-1] == 0
        assert sorted(cycle[:-1]) == list(range(5))
        assert all(graph[a][b] for a, b in zip(cycle, cycle[1:]))


def test_non_square_matrix_raises():
    with pytest.raises(ValueError):
        list(hamiltonian_cycles([[0, 1], [1]]))