from itertools import product

import pytest

from algolab.knapsack01 import dynamic_knapsack

CASES = [
    ([1, 2, 5], [2, 3, 4], 6),
    ([10, 5, 15, 7, 6, 18, 3], [2, 3, 5, 7, 1, 4, 1], 15),
    ([60, 100, 120], [10, 20, 30], 50),
    ([3, 3, 3, 3], [2, 2, 2, 2], 5),
    ([4, 9, 1], [5, 12, 1], 3),
    ([7, 2, 9, 4], [3, 1, 4, 2], 0),
]


def best_by_enumeration(profits, weights, capacity):
    best = 0
    for choice in product((0, 1), repeat=len(profits)):
        weight = sum(w for w, c in zip(weights, choice) if c)
        if weight <= capacity:
            best = max(best, sum(p for p, c in zip(profits, choice) if c))
    return best


def test_worked_example():
    result = dynamic_knapsack([1, 2, 5], [2, 3, 4], 6)
    assert (result.selected, result.profit, result.weight) == ((1, 0, 1), 6, 6)


@pytest.mark.parametrize("profits, weights, capacity", CASES)
def test_profit_is_optimal(profits, weights, capacity):
    result = dynamic_knapsack(profits, weights, capacity)
    assert result.profit == best_by_enumeration(profits, weights, capacity)


@pytest.mark.parametrize("profits, weights, capacity", CASES)
def test_selection_matches_totals(profits, weights, capacity):
    result = dynamic_knapsack(profits, weights, capacity)
    assert result.weight <= capacity
    assert result.profit == sum(p for p, s in zip(profits, result.selected) if s)
    assert result.weight == sum(w for w, s in zip(weights, result.selected) if s)


@pytest.mark.parametrize("profits, weights, capacity", CASES)
def test_stages_are_pruned_and_feasible(profits, weights, capacity):
    result = dynamic_knapsack(profits, weights, capacity)
    assert len(result.stages) == len(profits) + 1
    for stage in result.stages:
        assert stage[0].profit == 0 and stage[0].weight == 0
        assert all(pair.weight <= capacity for pair in stage)
        assert all(a.profit < b.profit for a, b in zip(stage, stage[1:]))
        assert all(a.weight <= b.weight for a, b in zip(stage, stage[1:]))


def test_best_profit_is_in_last_stage():
    result = dynamic_knapsack([10, 5, 15, 7], [2, 3, 5, 7], 10)
    assert result.profit == max(pair.profit for pair in result.stages[-1])


def test_no_items():
    result = dynamic_knapsack([], [], 10)
    assert result.selected == ()
    assert result.profit == 0
    assert len(result.stages) == 1


def test_length_mismatch():
    with pytest.raises(ValueError):
        dynamic_knapsack([1, 2], [1], 5)