"""0/1 knapsack solved by backtracking with a fractional upper bound."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class KnapsackSolution:
    """Best packing found: total profit, total weight and a 0/1 vector per item."""

    profit: int
    weight: int
    selected: tuple[int, ...]

    @property
    def items(self) -> tuple[int, ...]:
        """Indices of the items packed."""
        return tuple(index for index, flag in enumerate(self.selected) if flag)


def upper_bound(
    weights: Sequence[int],
    profits: Sequence[int],
    capacity: int,
    profit: int,
    weight: int,
    k: int,
) -> float:
    """Bound on the profit reachable from item ``k + 1`` on, filling greedily
    and taking a fraction of the first item that no longer fits."""
    bound = float(profit)
    load = weight
    for item_weight, item_profit in zip(weights[k + 1 :], profits[k + 1 :]):
        load += item_weight
        if load < capacity:
            bound += item_profit
        else:
            return bound + (1 - (load - capacity) / item_weight) * item_profit
    return bound


def backtrack_knapsack(
    weights: Sequence[int], profits: Sequence[int], capacity: int
) -> KnapsackSolution:
    """Search for the most profitable packing.

    The bound is only a true upper bound when items are ordered by
    non-increasing profit/weight ratio.
    """
    weights = list(weights)
    profits = list(profits)
    if len(weights) != len(profits):
        raise ValueError("weights and profits must have the same length")
    if any(w <= 0 for w in weights):
        raise ValueError("weights must be positive")
    n = len(weights)
    if n == 0:
        return KnapsackSolution(0, 0, ())

    best_profit = 0
    best_weight = 0
    best_selection: tuple[int, ...] = (0,) * n
    chosen = [0] * n

    def search(k: int, profit: int, weight: int) -> None:
        nonlocal best_profit, best_weight, best_selection
        last = k == n - 1
        if weight + weights[k] <= capacity:
            chosen[k] = 1
            if not last:
                search(k + 1, profit + profits[k], weight + weights[k])
            if last and profit + profits[k] > best_profit:
                best_profit = profit + profits[k]
                best_weight = weight + weights[k]
                best_selection = tuple(chosen)
        if upper_bound(weights, profits, capacity, profit, weight, k) >= best_profit:
            chosen[k] = 0
            if not last:
                search(k + 1, profit, weight)
            if last and profit > best_profit:
                best_profit = profit
                best_weight = weight
                best_selection = tuple(chosen)

    search(0, 0, 0)
    return KnapsackSolution(best_profit, best_weight, best_selection)