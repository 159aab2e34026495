from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.heaps import (
    build_max_heap,
    build_min_heap,
    delete_max,
    kth_largest,
    max_heap_insert,
    min_heap_insert,
    overflow_minimums,
)

SAMPLE = [-1, 21, 9, 4, 2, 54, 6, 5, 2, 90]


def is_max_heap(heap):
    return all(heap[(i - 1) // 2] >= heap[i] for i in range(1, len(heap)))


def is_min_heap(heap):
    return all(heap[(i - 1) // 2] <= heap[i] for i in range(1, len(heap)))


def test_build_max_heap_sample():
    heap = build_max_heap(SAMPLE)
    assert is_max_heap(heap)
    assert heap[0] == max(SAMPLE)
    assert Counter(heap) == Counter(SAMPLE)


def test_build_min_heap_sample():
    heap = build_min_heap(SAMPLE)
    assert is_min_heap(heap)
    assert heap[0] == min(SAMPLE)
    assert Counter(heap) == Counter(SAMPLE)


@given(st.lists(st.integers(), max_size=60))
def test_heap_properties_hold(values):
    max_heap = build_max_heap(values)
    min_heap = build_min_heap(values)
    assert is_max_heap(max_heap)
    assert is_min_heap(min_heap)
    assert sorted(max_heap) == sorted(values)
    assert sorted(min_heap) == sorted(values)


def test_insert_into_existing_heap():
    heap = build_max_heap([5, 3, 4])
    max_heap_insert(heap, 10)
    assert heap[0] == 10
    assert is_max_heap(heap)
    low = build_min_heap([5, 3, 4])
    min_heap_insert(low, -2)
    assert low[0] == -2
    assert is_min_heap(low)


def test_delete_max_twice_on_sample():
    heap = build_max_heap(SAMPLE)
    ordered = sorted(SAMPLE, reverse=True)
    assert delete_max(heap) == ordered[0]
    assert delete_max(heap) == ordered[1]
    assert is_max_heap(heap)
    assert sorted(heap, reverse=True) == ordered[2:]


@given(st.lists(st.integers(), min_size=1, max_size=60))
def test_delete_max_drains_in_descending_order(values):
    heap = build_max_heap(values)
    drained = [delete_max(heap) for _ in range(len(values))]
    assert drained == sorted(values, reverse=True)
    assert heap == []


def test_delete_max_empty():
    with pytest.raises(IndexError):
        delete_max([])


def test_kth_largest_source_example():
    assert kth_largest(SAMPLE, 3) == 21


@given(st.lists(st.integers(), min_size=1, max_size=40), st.data())
def test_kth_largest_matches_sorted(values, data):
    k = data.draw(st.integers(1, len(values)))
    assert kth_largest(values, k) == sorted(values, reverse=True)[k - 1]


@pytest.mark.parametrize("k", [0, len(SAMPLE) + 1])
def test_kth_largest_out_of_range(k):
    with pytest.raises(ValueError):
        kth_largest(SAMPLE, k)


def test_overflow_minimums_source_example():
    assert overflow_minimums([6, 5, 3, 2, 8, 9, 12], 3) == [2, 3, 5, 6]


@given(st.lists(st.integers(), max_size=40), st.integers(0, 10))
def test_overflow_minimums_length(values, k):
    released = overflow_minimums(values, k)
    assert len(released) == max(0, len(values) - k)


@given(st.lists(st.integers(), max_size=40))
def test_overflow_minimums_k_zero_returns_input(values):
    assert overflow_minimums(values, 0) == values


def test_overflow_minimums_negative_k():
    with pytest.raises(ValueError):
        overflow_minimums([1, 2], -1)