"""Problems solved with priority queues: nearest points, rope joining, weak rows, window maxima."""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from itertools import takewhile


def _check_k(k: int, size: int) -> None:
    if not 0 <= k <= size:
        raise ValueError(f"k must be between 0 and {size}, got {k}")


def nearest_cars(points: Sequence[tuple[int, int]], k: int) -> list[int]:
    """Indices of the k points closest to the origin, nearest first, ties by index."""
    _check_k(k, len(points))
    closest = heapq.nsmallest(k, ((x * x + y * y, i) for i, (x, y) in enumerate(points)))
    return [i for _, i in closest]


def min_rope_cost(lengths: Sequence[int]) -> int:
    """Least total cost of joining all ropes, a join costing the sum of the two lengths."""
    heap = list(lengths)
    heapq.heapify(heap)
    cost = 0
    while len(heap) > 1:
        joined = heapq.heappop(heap) + heapq.heappop(heap)
        cost += joined
        heapq.heappush(heap, joined)
    return cost


def weakest_rows(matrix: Sequence[Sequence[int]], k: int) -> list[int]:
    """Indices of the k rows with the fewest leading soldiers (ones), ties by index."""
    _check_k(k, len(matrix))
    strengths = (
        (sum(1 for _ in takewhile(lambda cell: cell == 1, row)), i)
        for i, row in enumerate(matrix)
    )
    return [i for _, i in heapq.nsmallest(k, strengths)]


def sliding_window_max(values: Sequence[int], k: int) -> list[int]:
    """Largest value of every window of k consecutive values."""
    if not 1 <= k <= len(values):
        raise ValueError(f"window size must be between 1 and {len(values)}, got {k}")
    heap = [(-value, i) for i, value in enumerate(values[:k])]
    heapq.heapify(heap)
    maxima = [-heap[0][0]]
    for i in range(k, len(values)):
        while heap and heap[0][1] <= i - k:
            heapq.heappop(heap)
        heapq.heappush(heap, (-values[i], i))
        maxima.append(-heap[0][0])
    return maxima