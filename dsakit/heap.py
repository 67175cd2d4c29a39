"""A binary max-heap and in-place heap sort."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def _sift_down(items: list[Any], i: int, size: int) -> None:
    while True:
        largest = i
        for child in (2 * i + 1, 2 * i + 2):
            if child < size and items[child] > items[largest]:
                largest = child
        if largest == i:
            return
        items[i], items[largest] = items[largest], items[i]
        i = largest


class MaxHeap:
    """A heap whose top is always its largest value."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Add a value, moving it up past every smaller parent."""
        items = self._items
        items.append(value)
        child = len(items) - 1
        while child > 0:
            parent = (child - 1) // 2
            if not items[child] > items[parent]:
                break
            items[child], items[parent] = items[parent], items[child]
            child = parent

    def pop(self) -> Any:
        """Remove and return the largest value."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        items = self._items
        items[0], items[-1] = items[-1], items[0]
        top = items.pop()
        _sift_down(items, 0, len(items))
        return top

    def top(self) -> Any:
        """The largest value, left in place."""
        if not self._items:
            raise IndexError("top of an empty heap")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order, sorted by building and draining a max-heap."""
    items = list(values)
    n = len(items)
    for i in range(n // 2 - 1, -1, -1):
        _sift_down(items, i, n)
    for end in range(n - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, 0, end)
    return items