"""A max-heap, middle-element helpers for lists and next-larger lookup."""

from __future__ import annotations

import heapq
from typing import Iterable, Iterator, Sequence, TypeVar

T = TypeVar("T")


class MaxHeap:
    """A binary max-heap of numbers."""

    def __init__(self, items: Iterable[float] = ()) -> None:
        self._data = [-value for value in items]
        heapq.heapify(self._data)

    def push(self, value: float) -> None:
        """Add ``value`` to the heap."""
        heapq.heappush(self._data, -value)

    def pop(self) -> float:
        """Remove and return the largest value."""
        if not self._data:
            raise IndexError("pop from an empty heap")
        return -heapq.heappop(self._data)

    def peek(self) -> float:
        """Return the largest value without removing it."""
        if not self._data:
            raise IndexError("peek at an empty heap")
        return -self._data[0]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[float]:
        """Iterate over the values in heap layout order."""
        return (-value for value in self._data)

    def sorted_values(self) -> list[float]:
        """Return the values in ascending order."""
        return sorted(-value for value in self._data)

    def __repr__(self) -> str:
        return f"MaxHeap({list(self)!r})"


def middle_index(seq: Sequence[object]) -> int:
    """Return the index of the middle element, the first of two for even lengths."""
    n = len(seq)
    if n == 0:
        raise IndexError("empty sequence has no middle")
    return n // 2 if n % 2 else n // 2 - 1


def middle(seq: Sequence[T]) -> T:
    """Return the middle element of ``seq``."""
    return seq[middle_index(seq)]


def delete_middle(seq: Sequence[T]) -> list[T]:
    """Return a new list with the middle element of ``seq`` removed."""
    index = middle_index(seq)
    items = list(seq)
    del items[index]
    return items


def insert_middle(seq: Sequence[T], value: T) -> list[T]:
    """Return a new list with ``value`` inserted at the middle position of ``seq``."""
    items = list(seq)
    n = len(items)
    index = n // 2 if n % 2 else max(n // 2 - 1, 0)
    items.insert(index, value)
    return items


def next_larger(values: Sequence[int]) -> list[int]:
    """For each value, return the first larger value to its right, or -1."""
    result = [-1] * len(values)
    waiting: list[int] = []
    for i, value in enumerate(values):
        while waiting and values[waiting[-1]] < value:
            result[waiting.pop()] = value
        waiting.append(i)
    return result