"""0/1 knapsack by dynamic programming over dominance-pruned (profit, weight) sets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class Pair:
    """A reachable (profit, weight) state.

    ``origin`` is the index of the state it was built from and ``item`` the
    item added to reach it; both are None for the empty packing.
    """

    profit: float
    weight: float
    origin: int | None = None
    item: int | None = None


@dataclass(frozen=True)
class KnapsackResult:
    """Chosen items as a 0/1 vector, their totals and the sets S^0..S^n."""

    selected: tuple[int, ...]
    profit: float
    weight: float
    stages: tuple[tuple[Pair, ...], ...]


def _largest(pairs: list[Pair], low: int, high: int, weight: float, capacity: float) -> int:
    """Last index in ``low..high`` whose pair can still take ``weight``."""
    found = low - 1
    while low <= high:
        mid = (low + high) // 2
        if pairs[mid].weight + weight <= capacity:
            found = mid
            low = mid + 1
        else:
            high = mid - 1
    return found


def dynamic_knapsack(
    profits: Sequence[float], weights: Sequence[float], capacity: float
) -> KnapsackResult:
    """Find the most profitable packing that fits ``capacity``."""
    profits = list(profits)
    weights = list(weights)
    if len(profits) != len(weights):
        raise ValueError("profits and weights must have the same length")

    pairs = [Pair(0, 0)]
    bounds = [0, 1]
    first, last = 0, 0
    for item, (profit, weight) in enumerate(zip(profits, weights)):
        k = first
        usable = _largest(pairs, first, last, weight, capacity)
        for j in range(first, usable + 1):
            new_profit = pairs[j].profit + profit
            new_weight = pairs[j].weight + weight
            while k <= last and pairs[k].weight <= new_weight:
                pairs.append(pairs[k])
                k += 1
            if new_profit > pairs[-1].profit:
                pairs.append(Pair(new_profit, new_weight, j, item))
            while k <= last and pairs[k].profit <= pairs[-1].profit:
                k += 1
        pairs.extend(pairs[k : last + 1])
        first, last = last + 1, len(pairs) - 1
        bounds.append(len(pairs))

    stages = tuple(
        tuple(pairs[start:end]) for start, end in zip(bounds, bounds[1:])
    )
    best = max(stages[-1], key=lambda pair: pair.profit)
    selected = [0] * len(profits)
    node = best
    while node.origin is not None:
        selected[node.item] = 1
        node = pairs[node.origin]

    return KnapsackResult(
        selected=tuple(selected),
        profit=sum(p for p, flag in zip(profits, selected) if flag),
        weight=sum(w for w, flag in zip(weights, selected) if flag),
        stages=stages,
    )