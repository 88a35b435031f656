"""Small recursive functions: factorial, powers, sums and series."""

from __future__ import annotations

import math
from typing import Iterator


def _require_non_negative(n: int, name: str = "n") -> None:
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")


def factorial(n: int) -> int:
    """Return ``n!``."""
    _require_non_negative(n)
    return math.prod(range(2, n + 1))


def power(m: int, n: int) -> int:
    """Return ``m`` raised to the non-negative integer power ``n``."""
    _require_non_negative(n)
    if n == 0:
        return 1
    half = power(m, n // 2)
    return half * half * (m if n % 2 else 1)


def sum_to(n: int) -> int:
    """Return ``0 + 1 + ... + n``."""
    _require_non_negative(n)
    return sum(range(n + 1))


def mccarthy91(n: int) -> int:
    """Evaluate McCarthy's nested-recursive function at ``n``.

    The nesting is unwound with a depth counter so that small arguments do
    not exhaust the interpreter's recursion limit.
    """
    pending = 1
    while pending:
        if n > 100:
            n -= 10
            pending -= 1
        else:
            n += 11
            pending += 1
    return n


def exp_taylor(x: float, n: int) -> float:
    """Approximate ``e**x`` by the Taylor series up to the ``x**n / n!`` term."""
    _require_non_negative(n)
    total = 1.0
    term = 1.0
    for k in range(1, n + 1):
        term *= x / k
        total += term
    return total


def _indirect_a(n: int) -> Iterator[int]:
    if n > 0:
        yield n
        yield from _indirect_b(n - 1)


def _indirect_b(n: int) -> Iterator[int]:
    if n > 1:
        yield n
        yield from _indirect_a(n // 2)


def indirect_sequence(n: int) -> Iterator[int]:
    """Yield the values visited by two mutually recursive functions.

    The first yields ``n`` and passes ``n - 1`` on; the second yields its
    argument and passes half of it back.
    """
    return _indirect_a(n)


def tree_recursion(n: int) -> Iterator[int]:
    """Yield ``n`` and then, twice over, everything ``tree_recursion(n - 1)`` yields."""
    if n > 0:
        yield n
        yield from tree_recursion(n - 1)
        yield from tree_recursion(n - 1)