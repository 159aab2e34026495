"""Binary heaps kept in plain lists, and heap-based selection."""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from typing import Any, Callable


def _sift_up(heap: list[Any], key: Any, before: Callable[[Any, Any], bool]) -> None:
    heap.append(key)
    index = len(heap) - 1
    while index > 0:
        parent = (index - 1) // 2
        if not before(key, heap[parent]):
            break
        heap[index] = heap[parent]
        index = parent
    heap[index] = key


def max_heap_insert(heap: list[Any], key: Any) -> None:
    """Add ``key`` to a max-heap kept in ``heap``."""
    _sift_up(heap, key, lambda a, b: a > b)


def min_heap_insert(heap: list[Any], key: Any) -> None:
    """Add ``key`` to a min-heap kept in ``heap``."""
    _sift_up(heap, key, lambda a, b: a < b)


def build_max_heap(values: Iterable[Any]) -> list[Any]:
    """Return a max-heap built by inserting the values one at a time."""
    heap: list[Any] = []
    for value in values:
        max_heap_insert(heap, value)
    return heap


def build_min_heap(values: Iterable[Any]) -> list[Any]:
    """Return a min-heap built by inserting the values one at a time."""
    heap: list[Any] = []
    for value in values:
        min_heap_insert(heap, value)
    return heap


def delete_max(heap: list[Any]) -> Any:
    """Remove and return the largest value of a max-heap."""
    if not heap:
        raise IndexError("delete_max() from an empty heap")
    top = heap[0]
    last = heap.pop()
    if not heap:
        return top
    heap[0] = last
    index = 0
    size = len(heap)
    while True:
        largest = index
        for child in (2 * index + 1, 2 * index + 2):
            if child < size and heap[child] > heap[largest]:
                largest = child
        if largest == index:
            return top
        heap[index], heap[largest] = heap[largest], heap[index]
        index = largest


def kth_largest(values: Iterable[Any], k: int) -> Any:
    """Return the ``k``-th largest value, keeping a min-heap of size ``k``."""
    window: list[Any] = []
    seen = 0
    for value in values:
        seen += 1
        heapq.heappush(window, value)
        if len(window) > k:
            heapq.heappop(window)
    if not 1 <= k <= seen:
        raise ValueError(f"k must be between 1 and {seen}")
    return window[0]


def overflow_minimums(values: Iterable[Any], k: int) -> list[Any]:
    """Return the values pushed out of a min-heap each time it exceeds ``k``.

    For input that is at most ``k`` places from sorted order this yields the
    first values in sorted order.
    """
    if k < 0:
        raise ValueError("k must not be negative")
    window: list[Any] = []
    released: list[Any] = []
    for value in values:
        heapq.heappush(window, value)
        if len(window) > k:
            released.append(heapq.heappop(window))
    return released