import pytest

from dsakit.sequences import (
    MaxHeap,
    delete_middle,
    insert_middle,
    middle,
    middle_index,
    next_larger,
)


def _is_max_heap(layout):
    return all(
        layout[(child - 1) // 2] >= value
        for child, value in enumerate(layout)
        if child > 0
    )


def test_heap_push_pop_sequence():
    heap = MaxHeap([10, 20, 30, 40, 50])
    heap.push(60)
    assert heap.peek() == 60
    assert heap.pop() == 60
    assert heap.peek() == 50
    assert len(heap) == 5
    assert heap.sorted_values() == [10, 20, 30, 40, 50]


def test_heap_layout_invariant():
    heap = MaxHeap([5, 1, 9, 3, 7, 2, 8])
    heap.push(6)
    assert _is_max_heap(list(heap))
    assert sorted(heap) == heap.sorted_values()


def test_heap_pops_in_descending_order():
    data = [4, 8, 1, 9, 4, 0, 3]
    heap = MaxHeap(data)
    popped = [heap.pop() for _ in range(len(data))]
    assert popped == sorted(data, reverse=True)
    assert len(heap) == 0


def test_heap_empty_errors():
    heap = MaxHeap()
    with pytest.raises(IndexError):
        heap.pop()
    with pytest.raises(IndexError):
        heap.peek()


def test_middle_odd_and_even():
    assert middle([5, 10, 15, 20, 25]) == 15
    assert middle([5, 10, 15, 20]) == 10


def test_middle_index_empty():
    with pytest.raises(IndexError):
        middle_index([])


@pytest.mark.parametrize("seq", [[1], [1, 2], [1, 2, 3], [4, 5, 6, 7, 8, 9]])
def test_delete_middle_removes_one(seq):
    result = delete_middle(seq)
    index = middle_index(seq)
    assert result == seq[:index] + seq[index + 1 :]
    assert len(result) == len(seq) - 1


@pytest.mark.parametrize("seq", [[1, 2, 3], [1, 2, 3, 4], [7]])
def test_insert_then_delete_middle_round_trip(seq):
    grown = insert_middle(seq, 99)
    assert len(grown) == len(seq) + 1
    assert 99 in grown


def test_insert_middle_positions():
    assert insert_middle([5, 10, 15], 99) == [5, 99, 10, 15]
    assert insert_middle([5, 10, 15, 20], 99) == [5, 99, 10, 15, 20]
    assert insert_middle([], 99) == [99]


def test_insert_middle_does_not_mutate():
    seq = [1, 2, 3]
    insert_middle(seq, 4)
    assert seq == [1, 2, 3]


def test_next_larger_source_example():
    assert next_larger([11, 13, 21, 3]) == [13, 21, -1, -1]


def test_next_larger_invariant():
    values = [4, 5, 2, 25, 7, 7, 1, 30, 3]
    result = next_larger(values)
    for i, found in enumerate(result):
        later = values[i + 1 :]
        bigger = [v for v in later if v > values[i]]
        if bigger:
            assert found == bigger[0]
        else:
            assert found == -1


def test_next_larger_descending_has_none():
    assert next_larger([9, 7, 5, 3]) == [-1, -1, -1, -1]
    assert next_larger([]) == []