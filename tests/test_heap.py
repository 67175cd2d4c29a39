import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.heap import MaxHeap, heap_sort


def drain(heap):
    out = []
    while len(heap):
        assert heap.top() == max([heap.top(), *out[-1:]]) if not out else heap.top() <= out[-1]
        out.append(heap.pop())
    return out


def test_drains_in_descending_order():
    values = [8, 4, 5, 4, 1, 2]
    heap = MaxHeap()
    for value in values:
        heap.push(value)
    assert len(heap) == len(values)
    assert heap.top() == max(values)
    assert drain(heap) == sorted(values, reverse=True)
    assert len(heap) == 0


def test_empty_heap_raises():
    heap = MaxHeap()
    with pytest.raises(IndexError):
        heap.top()
    with pytest.raises(IndexError):
        heap.pop()


@given(st.lists(st.integers()))
def test_heap_matches_sorted(values):
    heap = MaxHeap()
    for value in values:
        heap.push(value)
    assert drain(heap) == sorted(values, reverse=True)


def test_heap_sort_example():
    values = [1, 2, 5, 4, 3]
    assert heap_sort(values) == sorted(values)
    assert values == [1, 2, 5, 4, 3]


@given(st.lists(st.integers()))
def test_heap_sort_matches_sorted(values):
    assert heap_sort(values) == sorted(values)


@given(st.lists(st.text(max_size=4)))
def test_heap_sort_strings(values):
    assert heap_sort(values) == sorted(values)