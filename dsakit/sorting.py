"""Classic comparison and counting sorts, each returning a new ascending list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping neighbours that are out of order."""
    items = list(values)
    for settled in range(len(items) - 1):
        for j in range(len(items) - settled - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining value to the front of the unsorted part."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by sliding each value left until it meets one no larger."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        j = i - 1
        while j >= 0 and items[j] > current:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current
    return items


def counting_sort(values: Iterable[int]) -> list[int]:
    """Sort integers by counting how often each value between the extremes occurs."""
    items = list(values)
    if not items:
        return []
    low, high = min(items), max(items)
    counts = [0] * (high - low + 1)
    for value in items:
        counts[value - low] += 1
    return [low + offset for offset, count in enumerate(counts) for _ in range(count)]


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if right[j] < left[i]:
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by splitting in halves, sorting each, and merging them."""
    items = list(values)
    if len(items) < 2:
        return items
    mid = len(items) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[Any], start: int, end: int) -> int:
    pivot = items[end]
    boundary = start - 1
    for j in range(start, end):
        if items[j] < pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[end] = items[end], items[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by partitioning around the last value of each range."""
    items = list(values)
    ranges = [(0, len(items) - 1)]
    while ranges:
        start, end = ranges.pop()
        if start >= end:
            continue
        pivot = _partition(items, start, end)
        ranges.append((start, pivot - 1))
        ranges.append((pivot + 1, end))
    return items