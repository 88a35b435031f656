import math

import pytest

from dsakit.arith import (
    Item,
    count_divisors,
    divisors,
    extended_gcd,
    fractional_knapsack,
)


@pytest.mark.parametrize("n", [1, 2, 12, 36, 97, 100, 360, 1024])
def test_count_matches_divisor_list(n):
    assert count_divisors(n) == len(divisors(n))


@pytest.mark.parametrize("n", [1, 7, 28, 100, 225, 9973])
def test_divisors_divide_and_are_sorted(n):
    result = divisors(n)
    assert all(n % d == 0 for d in result)
    assert result == sorted(set(result))
    assert result[0] == 1
    assert result[-1] == n


@pytest.mark.parametrize("n", [36, 100, 210])
def test_divisors_pair_up(n):
    result = divisors(n)
    assert [n // d for d in reversed(result)] == result


def test_prime_has_two_divisors():
    assert divisors(97) == [1, 97]
    assert count_divisors(97) == len([1, 97])


@pytest.mark.parametrize("n", [0, -4])
def test_non_positive_rejected(n):
    with pytest.raises(ValueError):
        count_divisors(n)
    with pytest.raises(ValueError):
        divisors(n)


@pytest.mark.parametrize(
    "a,b", [(56, 15), (15, 56), (0, 7), (7, 0), (240, 46), (17, 17), (1, 1)]
)
def test_extended_gcd_bezout(a, b):
    g, x, y = extended_gcd(a, b)
    assert g == math.gcd(a, b)
    assert a * x + b * y == g


def test_extended_gcd_zero_base_case():
    assert extended_gcd(0, 5) == (5, 0, 1)


def test_knapsack_worked_example():
    items = [Item(100, 30), Item(70, 20), Item(40, 40)]
    assert fractional_knapsack(items, 60) == pytest.approx(180.0)


def test_knapsack_everything_fits():
    items = [Item(100, 30), Item(70, 20), Item(40, 40)]
    assert fractional_knapsack(items, 1000) == sum(i.value for i in items)


def test_knapsack_zero_capacity():
    assert fractional_knapsack([Item(5, 2)], 0) == 0


def test_knapsack_partial_single_item():
    item = Item(100, 40)
    assert fractional_knapsack([item], 10) == pytest.approx(item.ratio * 10)


def test_knapsack_order_of_input_irrelevant():
    items = [Item(10, 5), Item(60, 10), Item(120, 30), Item(100, 20)]
    assert fractional_knapsack(items, 50) == pytest.approx(
        fractional_knapsack(list(reversed(items)), 50)
    )


def test_knapsack_rejects_bad_input():
    with pytest.raises(ValueError):
        fractional_knapsack([Item(1, 0)], 5)
    with pytest.raises(ValueError):
        fractional_knapsack([Item(1, 1)], -1)