"""Number-theory helpers and the greedy fractional knapsack."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Item:
    """An item that can be taken whole or in part."""

    value: int
    weight: int

    @property
    def ratio(self) -> float:
        """Value carried by one unit of weight."""
        return self.value / self.weight


def _require_positive(n: int) -> None:
    if n <= 0:
        raise ValueError(f"expected a positive integer, got {n}")


def count_divisors(n: int) -> int:
    """Return the number of distinct positive divisors of ``n``."""
    _require_positive(n)
    count = 0
    for i in range(1, math.isqrt(n) + 1):
        if n % i == 0:
            count += 1 if n // i == i else 2
    return count


def divisors(n: int) -> list[int]:
    """Return the positive divisors of ``n`` in ascending order."""
    _require_positive(n)
    small: list[int] = []
    large: list[int] = []
    for i in range(1, math.isqrt(n) + 1):
        if n % i == 0:
            small.append(i)
            if n // i != i:
                large.append(n // i)
    return small + large[::-1]


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``g = gcd(a, b)`` and ``a*x + b*y == g``."""
    if a == 0:
        return b, 0, 1
    g, x1, y1 = extended_gcd(b % a, a)
    return g, y1 - (b // a) * x1, x1


def fractional_knapsack(items: Iterable[Item], capacity: float) -> float:
    """Return the largest value that fits in ``capacity``, splitting items if needed.

    Items are taken greedily by value per unit of weight; the first item that
    does not fit whole is taken in part and filling stops there.
    """
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    chosen = list(items)
    for item in chosen:
        if item.weight <= 0:
            raise ValueError(f"item weight must be positive: {item!r}")
    chosen.sort(key=lambda item: item.ratio, reverse=True)

    used = 0
    total = 0.0
    for item in chosen:
        if used + item.weight <= capacity:
            used += item.weight
            total += item.value
        else:
            total += (capacity - used) * item.ratio
            break
    return total