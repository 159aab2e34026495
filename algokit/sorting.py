"""Classic comparison and counting sorts.

Every function takes any iterable of comparable values and returns a new
sorted list. The input is left untouched.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent values that are out of order."""
    values = list(items)
    size = len(values)
    for done in range(size):
        for j in range(size - done - 1):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
    return values


def counting_sort(items: Iterable[int], limit: int = 1000) -> list[int]:
    """Sort integers in ``range(limit)`` by counting their occurrences."""
    counts = [0] * limit
    for value in items:
        if not 0 <= value < limit:
            raise ValueError(f"value {value} is outside range(0, {limit})")
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def _sift_down(values: list[Any], root: int, size: int) -> None:
    while True:
        largest = root
        for child in (2 * root + 1, 2 * root + 2):
            if child < size and values[child] > values[largest]:
                largest = child
        if largest == root:
            return
        values[root], values[largest] = values[largest], values[root]
        root = largest


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by building a max-heap and moving its root to the end repeatedly."""
    values = list(items)
    size = len(values)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(values, root, size)
    for end in range(size - 1, 0, -1):
        values[0], values[end] = values[end], values[0]
        _sift_down(values, 0, end)
    return values


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by inserting each value into the sorted run before it."""
    values = list(items)
    for i in range(1, len(values)):
        key = values[i]
        j = i - 1
        while j >= 0 and values[j] > key:
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = key
    return values


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] > right[j]:
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Stable top-down merge sort."""
    values = list(items)
    if len(values) <= 1:
        return values
    middle = (len(values) + 1) // 2
    return _merge(merge_sort(values[:middle]), merge_sort(values[middle:]))


def _partition(values: list[Any], low: int, high: int) -> int:
    """Partition ``values[low:high]`` around its first value; return its final index."""
    pivot = values[low]
    i, j = low, high
    while True:
        i += 1
        while i < high and values[i] <= pivot:
            i += 1
        j -= 1
        while values[j] > pivot:
            j -= 1
        if i >= j:
            break
        values[i], values[j] = values[j], values[i]
    values[low], values[j] = values[j], values[low]
    return j


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Quicksort with the first value of each range as pivot."""
    values = list(items)
    pending = [(0, len(values))]
    while pending:
        low, high = pending.pop()
        if high - low > 1:
            split = _partition(values, low, high)
            pending.append((low, split))
            pending.append((split + 1, high))
    return values


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining value to the front each pass."""
    values = list(items)
    for i in range(len(values)):
        smallest = min(range(i, len(values)), key=values.__getitem__)
        values[i], values[smallest] = values[smallest], values[i]
    return values


def _insert_sorted(ordered: list[Any], value: Any) -> None:
    if not ordered or ordered[-1] <= value:
        ordered.append(value)
        return
    top = ordered.pop()
    _insert_sorted(ordered, value)
    ordered.append(top)


def recursive_sort(items: Iterable[Any]) -> list[Any]:
    """Sort recursively: sort all but the last value, then insert the last."""
    values = list(items)
    if not values:
        return values
    last = values.pop()
    ordered = recursive_sort(values)
    _insert_sorted(ordered, last)
    return ordered