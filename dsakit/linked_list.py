"""Singly linked list with merge sort and zig-zag reordering, and a doubly linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """A node of a singly linked list."""

    value: Any
    next: Node | None = None


def _split(head: Node) -> Node:
    """Cut a list of at least two nodes after its first half; return the second half."""
    slow = fast = head
    before = head
    while fast is not None and fast.next is not None:
        before = slow
        slow = slow.next
        fast = fast.next.next
    before.next = None
    return slow


def _merge(left: Node | None, right: Node | None) -> Node | None:
    anchor = Node(None)
    end = anchor
    while left is not None and right is not None:
        if left.value <= right.value:
            end.next, left = left, left.next
        else:
            end.next, right = right, right.next
        end = end.next
    end.next = left if left is not None else right
    return anchor.next


def _sort(head: Node | None) -> Node | None:
    if head is None or head.next is None:
        return head
    right = _split(head)
    return _merge(_sort(head), _sort(right))


def _reverse(head: Node | None) -> Node | None:
    previous = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


def _last(head: Node | None) -> Node | None:
    while head is not None and head.next is not None:
        head = head.next
    return head


class LinkedList:
    """A singly linked list that keeps both its head and its tail."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self.tail: Node | None = None
        for value in values:
            self.push_back(value)

    def push_front(self, value: Any) -> None:
        """Put a value before the first node."""
        self.head = Node(value, self.head)
        if self.tail is None:
            self.tail = self.head

    def push_back(self, value: Any) -> None:
        """Put a value after the last node."""
        node = Node(value)
        if self.tail is None:
            self.head = self.tail = node
        else:
            self.tail.next = node
            self.tail = node

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def merge_sort(self) -> None:
        """Sort the nodes in ascending order by relinking them, keeping equal values in order."""
        self.head = _sort(self.head)
        self.tail = _last(self.head)

    def zigzag(self) -> None:
        """Reorder first, last, second, second-to-last and so on, in place."""
        if self.head is None or self.head.next is None:
            return
        left: Node | None = self.head
        right = _reverse(_split(self.head))
        tail = right
        while left is not None and right is not None:
            left_next, right_next = left.next, right.next
            left.next = right
            right.next = left_next
            tail = right
            left, right = left_next, right_next
        if right is not None:
            tail.next = right
            tail = right
        self.tail = tail


@dataclass(eq=False)
class _DoubleNode:
    value: Any
    next: _DoubleNode | None = None
    prev: _DoubleNode | None = None


class DoublyLinkedList:
    """A list whose nodes link both forward and backward."""

    def __init__(self) -> None:
        self._head: _DoubleNode | None = None
        self._tail: _DoubleNode | None = None

    def push_front(self, value: Any) -> None:
        """Put a value before the first node."""
        node = _DoubleNode(value, self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node

    def pop_front(self) -> Any:
        """Remove and return the first value."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        node.next = None
        return node.value

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next