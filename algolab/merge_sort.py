"""Top-down merge sort."""

from __future__ import annotations

from typing import Any, Iterable


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list with ``items`` in ascending, stable order."""
    values = list(items)
    if len(values) <= 1:
        return values
    mid = (len(values) - 1) // 2 + 1
    left = merge_sort(values[:mid])
    right = merge_sort(values[mid:])
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged