"""Knapsack-style dynamic programming: 0/1 and unbounded knapsack, subset sum, rod cutting, partition."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache


def _check_items(values: Sequence[int], weights: Sequence[int], capacity: int) -> None:
    if len(values) != len(weights):
        raise ValueError("values and weights must have the same length")
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must be non-negative")


def knapsack_recursive(values: Sequence[int], weights: Sequence[int], capacity: int) -> int:
    """Best total value of a 0/1 knapsack, by plain recursion."""
    _check_items(values, weights, capacity)

    def best(n: int, room: int) -> int:
        if n == 0 or room == 0:
            return 0
        skip = best(n - 1, room)
        if weights[n - 1] <= room:
            return max(values[n - 1] + best(n - 1, room - weights[n - 1]), skip)
        return skip

    return best(len(values), capacity)


def knapsack_memo(values: Sequence[int], weights: Sequence[int], capacity: int) -> int:
    """Best total value of a 0/1 knapsack, by memoized recursion."""
    _check_items(values, weights, capacity)

    @lru_cache(maxsize=None)
    def best(n: int, room: int) -> int:
        if n == 0 or room == 0:
            return 0
        skip = best(n - 1, room)
        if weights[n - 1] <= room:
            return max(values[n - 1] + best(n - 1, room - weights[n - 1]), skip)
        return skip

    return best(len(values), capacity)


def _bounded_table(values: Sequence[int], weights: Sequence[int], capacity: int) -> int:
    best = [0] * (capacity + 1)
    for value, weight in zip(values, weights):
        for room in range(capacity, max(weight, 1) - 1, -1):
            best[room] = max(best[room], value + best[room - weight])
    return best[capacity]


def knapsack_table(values: Sequence[int], weights: Sequence[int], capacity: int) -> int:
    """Best total value of a 0/1 knapsack, by tabulation."""
    _check_items(values, weights, capacity)
    return _bounded_table(values, weights, capacity)


def knapsack_unbounded(values: Sequence[int], weights: Sequence[int], capacity: int) -> int:
    """Best total value when every item may be taken any number of times."""
    _check_items(values, weights, capacity)
    if any(weight == 0 for weight in weights):
        raise ValueError("weights must be positive for an unbounded knapsack")
    best = [0] * (capacity + 1)
    for value, weight in zip(values, weights):
        for room in range(weight, capacity + 1):
            best[room] = max(best[room], value + best[room - weight])
    return best[capacity]


def target_subset_sum(nums: Sequence[int], target: int) -> bool:
    """Tell whether some subset of the non-negative numbers adds up to target."""
    _check_items(nums, nums, target)
    return _bounded_table(nums, nums, target) == target


def rod_cutting(prices: Sequence[int], lengths: Sequence[int], rod_length: int) -> int:
    """Best price for cutting a rod into pieces of the given lengths."""
    return knapsack_unbounded(prices, lengths, rod_length)


def min_partition_difference(nums: Sequence[int]) -> int:
    """Smallest difference between the sums of two groups splitting the numbers."""
    if any(num < 0 for num in nums):
        raise ValueError("numbers must be non-negative")
    total = sum(nums)
    group = _bounded_table(nums, nums, total // 2)
    return abs(total - 2 * group)