"""Selection of the k-th largest element by repeated partitioning."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, MutableSequence, Sequence


@dataclass(frozen=True)
class SelectionStep:
    """Arrangement after one partition and where its pivot landed."""

    arrangement: tuple[Any, ...]
    pivot_index: int


@dataclass(frozen=True)
class SelectionResult:
    """The selected value and the partition steps that led to it."""

    value: Any
    steps: tuple[SelectionStep, ...]


def partition(items: MutableSequence[Any], low: int, high: int) -> int:
    """Partition ``items[low..high]`` in place around ``items[low]``.

    Larger-or-equal elements end up before the pivot, smaller ones after it.
    Returns the pivot's final index.
    """
    pivot = items[low]
    i, j = low + 1, high
    while True:
        while i <= high and items[i] >= pivot:
            i += 1
        while j >= low and items[j] < pivot:
            j -= 1
        if i >= j:
            break
        items[i], items[j] = items[j], items[i]
    items[low], items[j] = items[j], items[low]
    return j


def select_kth_largest(items: Sequence[Any], k: int) -> SelectionResult:
    """Find the k-th largest element, with ``k`` counted from 1."""
    values = list(items)
    if not 1 <= k <= len(values):
        raise ValueError(f"k must be between 1 and {len(values)}")
    target = k - 1
    low, high = 0, len(values) - 1
    steps: list[SelectionStep] = []
    while low <= high:
        j = partition(values, low, high)
        steps.append(SelectionStep(tuple(values), j))
        if j == target:
            return SelectionResult(values[j], tuple(steps))
        if j > target:
            high = j - 1
        else:
            low = j + 1
    raise AssertionError("selection did not converge")