"""Last-in first-out stacks, stack reversal, and the stock span problem."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol


class _StackLike(Protocol):
    def push(self, value: Any) -> None: ...

    def pop(self) -> Any: ...

    def __len__(self) -> int: ...


class Stack:
    """Stack kept in a growable array."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put a value on top."""
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


@dataclass(eq=False)
class _Node:
    value: Any
    next: _Node | None = None


class LinkedStack:
    """Stack kept as a chain of nodes, the top at the head."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._size = 0

    def push(self, value: Any) -> None:
        """Put a value on top."""
        self._head = _Node(value, self._head)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._head is None:
            raise IndexError("pop from an empty stack")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.value

    def top(self) -> Any:
        """The top value, left in place."""
        if self._head is None:
            raise IndexError("top of an empty stack")
        return self._head.value

    def __len__(self) -> int:
        return self._size


def push_bottom(stack: _StackLike, value: Any) -> None:
    """Put a value underneath everything already on the stack."""
    held = []
    while len(stack):
        held.append(stack.pop())
    stack.push(value)
    for item in reversed(held):
        stack.push(item)


def reverse_stack(stack: _StackLike) -> None:
    """Turn the stack upside down in place."""
    popped = []
    while len(stack):
        popped.append(stack.pop())
    for item in popped:
        stack.push(item)


def stock_span(prices: Sequence[int]) -> list[int]:
    """For each day, how many consecutive days up to it had a price no higher than its own."""
    spans: list[int] = []
    higher: list[int] = []
    for i, price in enumerate(prices):
        while higher and price >= prices[higher[-1]]:
            higher.pop()
        spans.append(i - higher[-1] if higher else i + 1)
        higher.append(i)
    return spans