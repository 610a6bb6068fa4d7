"""Quicksort into descending order, recording each partition pass."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, MutableSequence, Sequence


@dataclass(frozen=True)
class QuicksortPass:
    """One partition of ``low..high`` and the whole arrangement after it."""

    number: int
    low: int
    high: int
    pivot_index: int
    pivot: Any
    arrangement: tuple[Any, ...]


def _partition(values: MutableSequence[Any], low: int, high: int) -> int:
    pivot = values[low]
    i, j = low, high
    while i < j:
        while values[i] >= pivot and i < high:
            i += 1
        while values[j] < pivot:
            j -= 1
        if i < j:
            values[i], values[j] = values[j], values[i]
    values[low], values[j] = values[j], values[low]
    return j


def quicksort_descending(
    items: Iterable[Any],
) -> tuple[list[Any], tuple[QuicksortPass, ...]]:
    """Sort into descending order; return the sorted list and the passes made."""
    values = list(items)
    passes: list[QuicksortPass] = []
    pending = [(0, len(values) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot_index = _partition(values, low, high)
        passes.append(
            QuicksortPass(
                number=len(passes) + 1,
                low=low,
                high=high,
                pivot_index=pivot_index,
                pivot=values[pivot_index],
                arrangement=tuple(values),
            )
        )
        pending.append((pivot_index + 1, high))
        pending.append((low, pivot_index - 1))
    return values, tuple(passes)


def format_partition(items: Sequence[Any], pivot_index: int | None = None) -> str:
    """Render items in brackets, setting the pivot apart when one is given."""
    values = list(items)
    if pivot_index is None:
        return "[ " + "".join(f"{v} " for v in values) + "]"
    before = "".join(f"{v} " for v in values[:pivot_index])
    after = "".join(f"{v} " for v in values[pivot_index + 1 :])
    return f"[ {before}] {values[pivot_index]} [ {after}]"