"""Binary search over a sorted sequence."""

from __future__ import annotations

from typing import Any, Sequence


def binary_search(items: Sequence[Any], target: Any) -> int | None:
    """Return the index of ``target`` in sorted ``items``, or None if absent."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = low + (high - low) // 2
        value = items[mid]
        if value == target:
            return mid
        if value > target:
            high = mid - 1
        else:
            low = mid + 1
    return None