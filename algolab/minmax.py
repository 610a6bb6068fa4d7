"""Minimum and maximum found by divide and conquer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence


@dataclass(frozen=True)
class MinMaxStep:
    """Result of one subproblem over ``items[low..high]``."""

    low: int
    high: int
    minimum: Any
    maximum: Any


@dataclass(frozen=True)
class MinMaxResult:
    """Overall minimum and maximum, with subproblems in the order they finished."""

    minimum: Any
    maximum: Any
    steps: tuple[MinMaxStep, ...]


def min_max(items: Sequence[Any]) -> MinMaxResult:
    """Find the smallest and largest of ``items`` by recursive halving."""
    values = list(items)
    if not values:
        raise ValueError("min_max() needs at least one item")
    steps: list[MinMaxStep] = []

    def solve(i: int, j: int) -> tuple[Any, Any]:
        if i == j:
            low = high = values[i]
        elif i == j - 1:
            a, b = values[i], values[j]
            low, high = (a, b) if a < b else (b, a)
        else:
            mid = (i + j) // 2
            min1, max1 = solve(i, mid)
            min2, max2 = solve(mid + 1, j)
            low = min1 if min1 < min2 else min2
            high = max1 if max1 > max2 else max2
        steps.append(MinMaxStep(i, j, low, high))
        return low, high

    low, high = solve(0, len(values) - 1)
    return MinMaxResult(low, high, tuple(steps))