"""Queues and stacks built several ways, and a few queue problems."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class _Node:
    value: Any
    next: _Node | None = None


class LinkedQueue:
    """First-in first-out queue on a chain of nodes."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0

    def push(self, value: Any) -> None:
        """Add a value at the back."""
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the front value."""
        if self._head is None:
            raise IndexError("pop from an empty queue")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def front(self) -> Any:
        """The front value, left in place."""
        if self._head is None:
            raise IndexError("front of an empty queue")
        return self._head.value

    def __len__(self) -> int:
        return self._size


class CircularQueue:
    """Fixed-capacity queue in a ring buffer."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._size = 0

    def push(self, value: Any) -> None:
        """Add a value at the back; raise OverflowError when the queue is full."""
        if self._size == len(self._slots):
            raise OverflowError("queue is full")
        self._slots[(self._front + self._size) % len(self._slots)] = value
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the front value."""
        if not self._size:
            raise IndexError("pop from an empty queue")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % len(self._slots)
        self._size -= 1
        return value

    def front(self) -> Any:
        """The front value, left in place."""
        if not self._size:
            raise IndexError("front of an empty queue")
        return self._slots[self._front]

    def __len__(self) -> int:
        return self._size


class TwoStackQueue:
    """Queue on two stacks, paying for order on every push."""

    def __init__(self) -> None:
        self._main: list[Any] = []
        self._spare: list[Any] = []

    def push(self, value: Any) -> None:
        """Add a value at the back."""
        while self._main:
            self._spare.append(self._main.pop())
        self._main.append(value)
        while self._spare:
            self._main.append(self._spare.pop())

    def pop(self) -> Any:
        """Remove and return the front value."""
        if not self._main:
            raise IndexError("pop from an empty queue")
        return self._main.pop()

    def front(self) -> Any:
        """The front value, left in place."""
        if not self._main:
            raise IndexError("front of an empty queue")
        return self._main[-1]

    def __len__(self) -> int:
        return len(self._main)


class TwoQueueStack:
    """Stack on two queues, paying for order on every push."""

    def __init__(self) -> None:
        self._main: deque[Any] = deque()
        self._spare: deque[Any] = deque()

    def push(self, value: Any) -> None:
        """Add a value on top."""
        while self._main:
            self._spare.append(self._main.popleft())
        self._main.append(value)
        while self._spare:
            self._main.append(self._spare.popleft())

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._main:
            raise IndexError("pop from an empty stack")
        return self._main.popleft()

    def top(self) -> Any:
        """The top value, left in place."""
        if not self._main:
            raise IndexError("top of an empty stack")
        return self._main[0]

    def __len__(self) -> int:
        return len(self._main)


class DequeQueue:
    """Queue on a double-ended queue."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def push(self, value: Any) -> None:
        """Add a value at the back."""
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the front value."""
        if not self._items:
            raise IndexError("pop from an empty queue")
        return self._items.popleft()

    def front(self) -> Any:
        """The front value, left in place."""
        if not self._items:
            raise IndexError("front of an empty queue")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)


class DequeStack:
    """Stack on a double-ended queue."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def push(self, value: Any) -> None:
        """Add a value on top."""
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def top(self) -> Any:
        """The top value, left in place."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)


def first_non_repeating(text: str) -> list[str | None]:
    """For every prefix of text, its first character seen only once, or None if there is none."""
    counts: Counter[str] = Counter()
    waiting: deque[str] = deque()
    answers: list[str | None] = []
    for ch in text:
        counts[ch] += 1
        waiting.append(ch)
        while waiting and counts[waiting[0]] > 1:
            waiting.popleft()
        answers.append(waiting[0] if waiting else None)
    return answers


def interleave(queue: Iterable[Any]) -> list[Any]:
    """Alternate the first half of an even-sized queue with its second half."""
    items: Sequence[Any] = list(queue)
    if len(items) % 2:
        raise ValueError("queue size must be even")
    half = len(items) // 2
    return [value for pair in zip(items[:half], items[half:]) for value in pair]


def reverse_queue(queue: Iterable[Any]) -> list[Any]:
    """The queue's values, back to front, by passing them through a stack."""
    stack = list(queue)
    reversed_items = []
    while stack:
        reversed_items.append(stack.pop())
    return reversed_items