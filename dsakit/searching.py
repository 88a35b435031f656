"""Linear and binary search over sequences."""

from __future__ import annotations

from bisect import bisect_left
from typing import Any, Sequence


def linear_search(items: Sequence[Any], target: Any) -> int:
    """Return the index of the first ``target`` in ``items``, or -1."""
    return next((i for i, value in enumerate(items) if value == target), -1)


def binary_search(items: Sequence[Any], target: Any) -> int:
    """Return an index of ``target`` in the ascending ``items``, or -1."""
    index = bisect_left(items, target)
    if index < len(items) and items[index] == target:
        return index
    return -1