"""Fractional knapsack filled greedily under several orderings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence


class Strategy(Enum):
    """Order in which items are taken."""

    LEAST_WEIGHT = "least weight"
    MAX_PROFIT = "maximum profit"
    MAX_RATIO = "maximum profit/weight ratio"


@dataclass(frozen=True)
class FractionalSolution:
    """Fraction of each item taken, with the profit and weight carried."""

    fractions: tuple[float, ...]
    profit: float
    weight: float

    @property
    def expression(self) -> str:
        """The solution vector written as a sum such as ``X1 + 0.50X2``."""
        terms = []
        for number, fraction in enumerate(self.fractions, start=1):
            if fraction == 1.0:
                terms.append(f"X{number}")
            elif fraction > 0:
                terms.append(f"{fraction:.2f}X{number}")
        return " + ".join(terms)


def _ordering_key(strategy: Strategy, weights: list[float], profits: list[float]):
    if strategy is Strategy.LEAST_WEIGHT:
        return lambda i: weights[i]
    if strategy is Strategy.MAX_PROFIT:
        return lambda i: -profits[i]
    return lambda i: -(profits[i] / weights[i])


def greedy_knapsack(
    weights: Sequence[float],
    profits: Sequence[float],
    capacity: float,
    strategy: Strategy,
) -> FractionalSolution:
    """Fill ``capacity`` taking items in the order ``strategy`` prescribes,
    splitting the first item that does not fit whole."""
    weights = list(weights)
    profits = list(profits)
    if len(weights) != len(profits):
        raise ValueError("weights and profits must have the same length")
    if any(w <= 0 for w in weights):
        raise ValueError("weights must be positive")
    order = sorted(range(len(weights)), key=_ordering_key(strategy, weights, profits))

    fractions = [0.0] * len(weights)
    remaining = capacity
    profit = 0.0
    for index in order:
        if remaining <= 0:
            break
        if weights[index] <= remaining:
            fractions[index] = 1.0
            remaining -= weights[index]
            profit += profits[index]
        else:
            fractions[index] = remaining / weights[index]
            profit += fractions[index] * profits[index]
            remaining = 0
    weight = sum(f * w for f, w in zip(fractions, weights))
    return FractionalSolution(tuple(fractions), profit, weight)


def evaluate_fractions(profits: Sequence[float], fractions: Sequence[float]) -> float:
    """Total profit of taking the given fraction of each item."""
    profits = list(profits)
    fractions = list(fractions)
    if len(profits) != len(fractions):
        raise ValueError("profits and fractions must have the same length")
    return sum(f * p for f, p in zip(fractions, profits))