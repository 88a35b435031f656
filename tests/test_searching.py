import pytest

from dsakit.searching import binary_search, linear_search

UNSORTED = [7, 3, 9, 3, 1, 12, 5]
SORTED = sorted(UNSORTED)


@pytest.mark.parametrize("target", sorted(set(UNSORTED)))
def test_linear_finds_first(target):
    assert linear_search(UNSORTED, target) == UNSORTED.index(target)


def test_linear_missing():
    assert linear_search(UNSORTED, 42) == -1
    assert linear_search([], 1) == -1


@pytest.mark.parametrize("target", SORTED)
def test_binary_finds_present(target):
    index = binary_search(SORTED, target)
    assert SORTED[index] == target


@pytest.mark.parametrize("target", [0, 2, 8, 100])
def test_binary_missing(target):
    assert binary_search(SORTED, target) == -1


def test_binary_empty():
    assert binary_search([], 5) == -1


def test_both_agree_on_sorted_distinct():
    data = list(range(0, 100, 3))
    for target in range(-1, 101):
        assert binary_search(data, target) == linear_search(data, target)