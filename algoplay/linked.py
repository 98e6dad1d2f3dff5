"""Queue and stack built from linked nodes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(slots=True, eq=False)
class _QueueNode:
    value: int
    next: _QueueNode | None = None
    prev: _QueueNode | None = None


@dataclass(slots=True, eq=False)
class _StackNode:
    value: int
    next: _StackNode | None = None


class LinkedQueue:
    """First-in first-out queue on a doubly linked list."""

    def __init__(self) -> None:
        self._head: _QueueNode | None = None
        self._tail: _QueueNode | None = None
        self._size = 0

    def enqueue(self, value: int) -> None:
        """Append a value at the tail."""
        node = _QueueNode(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def dequeue(self) -> int:
        """Remove and return the value at the head."""
        node = self._head
        if node is None:
            raise IndexError("dequeue from an empty queue")
        self._head = node.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        self._size -= 1
        return node.value

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size


class LinkedStack:
    """Last-in first-out stack on a singly linked list."""

    def __init__(self) -> None:
        self._head: _StackNode | None = None
        self._size = 0

    def push(self, value: int) -> None:
        """Put a value on top."""
        self._head = _StackNode(value, self._head)
        self._size += 1

    def pop(self) -> int:
        """Remove and return the top value."""
        node = self._head
        if node is None:
            raise IndexError("pop from an empty stack")
        self._head = node.next
        self._size -= 1
        return node.value

    def clear(self) -> None:
        """Remove every value."""
        self._head = None
        self._size = 0

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size