"""Algorithms over flat sequences of numbers and strings."""

from __future__ import annotations

import heapq
from collections.abc import MutableSequence, Sequence


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return indices ``(i, j)``, ``i < j``, of two values adding up to ``target``.

    Returns ``None`` when no such pair exists.
    """
    wanted: dict[int, int] = {}
    for index, value in enumerate(nums):
        wanted.setdefault(target - value, index)
        partner = wanted.get(value)
        if partner is not None and partner != index:
            return partner, index
    return None


def three_sum(nums: Sequence[int]) -> list[tuple[int, int, int]]:
    """Return every distinct triplet of values that sums to zero.

    Each triplet is ordered as (middle pointer, anchor, high pointer) over the
    sorted values, so its second element is always the smallest.
    """
    values = sorted(nums)
    size = len(values)
    triplets: list[tuple[int, int, int]] = []
    anchor = 0
    while anchor < size:
        low, high = anchor + 1, size - 1
        while high > low:
            total = values[anchor] + values[low] + values[high]
            if total > 0:
                high -= 1
            elif total < 0:
                low += 1
            else:
                triplets.append((values[low], values[anchor], values[high]))
                edge = values[high]
                while low < high and values[low] == edge:
                    low += 1
                while low < high and values[high] == edge:
                    high -= 1
        while anchor + 1 < size and values[anchor] == values[anchor + 1]:
            anchor += 1
        anchor += 1
    return triplets


def majority_element(nums: Sequence[int]) -> int:
    """Return the candidate majority value found by a single voting pass."""
    if not nums:
        raise ValueError("majority_element() needs at least one value")
    votes = 0
    candidate = nums[0]
    for value in nums:
        if votes == 0:
            candidate = value
        votes += 1 if value == candidate else -1
    return candidate


def majority_elements(nums: Sequence[int]) -> list[int]:
    """Return every value occurring more than ``len(nums) // 3`` times."""
    first, second = -1, -1
    first_votes = second_votes = 0
    for value in nums:
        if value == first:
            first_votes += 1
        elif value == second:
            second_votes += 1
        elif first_votes == 0:
            first, first_votes = value, 1
        elif second_votes == 0:
            second, second_votes = value, 1
        else:
            first_votes -= 1
            second_votes -= 1

    first_count = second_count = 0
    for value in nums:
        if value == first:
            first_count += 1
        elif value == second:
            second_count += 1

    threshold = len(nums) // 3
    result = []
    if first_count > threshold:
        result.append(first)
    if second_count > threshold:
        result.append(second)
    return result


def contains_nearby_duplicate(nums: Sequence[int], k: int) -> bool:
    """Tell whether two equal values sit at most ``k`` positions apart."""
    last_seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        previous = last_seen.get(value)
        if previous is not None and index - previous <= k:
            return True
        last_seen[value] = index
    return False


def arithmetic_triplets(nums: Sequence[int], diff: int) -> int:
    """Count triplets whose consecutive members differ by ``diff``."""
    total = 0
    for index, middle in enumerate(nums):
        left = sum(1 for value in nums[:index] if middle - value == diff)
        right = sum(1 for value in nums[index + 1:] if value - middle == diff)
        total += min(left, right)
    return total


def find_duplicate(nums: Sequence[int]) -> int:
    """Return the first value that is met a second time while scanning."""
    seen: set[int] = set()
    for value in nums:
        if value in seen:
            return value
        seen.add(value)
    raise ValueError("no duplicate value")


def next_permutation(nums: MutableSequence[int]) -> None:
    """Rearrange ``nums`` in place into its next lexicographic permutation.

    The last permutation wraps round to the first (ascending) one.
    """
    pivot = next(
        (i for i in range(len(nums) - 2, -1, -1) if nums[i] < nums[i + 1]),
        None,
    )
    if pivot is None:
        nums.reverse()
        return
    swap = next(i for i in range(len(nums) - 1, pivot, -1) if nums[i] > nums[pivot])
    nums[pivot], nums[swap] = nums[swap], nums[pivot]
    nums[pivot + 1:] = nums[pivot + 1:][::-1]


def max_subarray(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run."""
    if not nums:
        raise ValueError("max_subarray() needs at least one value")
    current = 0
    best = None
    for value in nums:
        current = max(current + value, value)
        best = current if best is None else max(best, current)
    return best


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping or touching closed intervals."""
    ordered = sorted(intervals)
    if not ordered:
        raise ValueError("merge_intervals() needs at least one interval")
    merged = [list(ordered[0])]
    for start, end in ordered[1:]:
        last = merged[-1]
        if last[1] >= start:
            last[1] = max(last[1], end)
        else:
            merged.append([start, end])
    return merged


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a sequence of 0s, 1s and 2s in place."""
    zeros = [value for value in nums if value == 0]
    ones = [value for value in nums if value == 1]
    rest = [value for value in nums if value not in (0, 1)]
    nums[:] = zeros + ones + rest


def merge_sorted(nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` of ``nums2`` into the first ``m`` of ``nums1``, in place."""
    if len(nums1) < m + n:
        raise ValueError("nums1 has no room for the merged values")
    nums1[:m + n] = list(heapq.merge(nums1[:m], nums2[:n]))


def can_partition(nums: Sequence[int]) -> bool:
    """Tell whether the values split into two parts of equal sum."""
    total = sum(nums)
    if total % 2:
        return False
    goal = total // 2
    reachable = {0}
    for value in nums:
        reachable |= {s + value for s in reachable if s + value <= goal}
    return goal in reachable


def min_cost_identical(arr: Sequence[int], brr: Sequence[int], k: int) -> int:
    """Cost to make ``arr`` equal ``brr``; rearranging freely costs ``k`` once."""
    direct = sum(abs(a - b) for a, b in zip(arr, brr, strict=True))
    rearranged = sum(abs(a - b) for a, b in zip(sorted(arr), sorted(brr), strict=True))
    return min(rearranged + k, direct)


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by all strings."""
    if not strs:
        raise ValueError("longest_common_prefix() needs at least one string")
    first, last = min(strs), max(strs)
    length = 0
    for a, b in zip(first, last):
        if a != b:
            break
        length += 1
    return first[:length]