"""FIFO queues: fixed-size ring buffer, bounded array, linked list and two stacks."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

DEFAULT_CAPACITY = 1000


class QueueEmptyError(IndexError):
    """Raised when reading from or removing from an empty queue."""


class QueueFullError(OverflowError):
    """Raised when adding to a queue that has no room left."""


class CircularQueue:
    """A fixed-capacity queue backed by a ring buffer that reuses freed slots."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def enqueue(self, item: Any) -> None:
        """Add an item at the rear; raise QueueFullError when full."""
        if self.is_full():
            raise QueueFullError("circular queue is full")
        self._slots[(self._front + self._size) % self.capacity] = item
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the front item."""
        if self.is_empty():
            raise QueueEmptyError("circular queue is empty")
        item = self._slots[self._front]
        self._slots[self._front] = None
        self._size -= 1
        self._front = 0 if self._size == 0 else (self._front + 1) % self.capacity
        return item

    def peek_front(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("circular queue is empty")
        return self._slots[self._front]

    def peek_rear(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("circular queue is empty")
        return self._slots[(self._front + self._size - 1) % self.capacity]

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self.capacity

    def __len__(self) -> int:
        return self._size


class ArrayQueue:
    """A queue over a fixed block of slots that are never reused.

    Every enqueue consumes one slot for good, so the queue reports itself
    full once ``capacity`` items have been added in total, however many of
    them have since been removed.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []
        self._head = 0

    def enqueue(self, item: Any) -> None:
        if len(self._items) == self.capacity:
            raise QueueFullError("queue overflow")
        self._items.append(item)

    def dequeue(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("queue underflow")
        item = self._items[self._head]
        self._items[self._head] = None
        self._head += 1
        return item

    def peek(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._items[self._head]

    def is_empty(self) -> bool:
        return self._head >= len(self._items)

    def __len__(self) -> int:
        return len(self._items) - self._head


@dataclass
class _Node:
    value: Any
    next: Optional["_Node"] = None


class LinkedQueue:
    """An unbounded queue built from singly linked nodes."""

    def __init__(self) -> None:
        self._front: Optional[_Node] = None
        self._rear: Optional[_Node] = None
        self._size = 0

    def enqueue(self, item: Any) -> None:
        node = _Node(item)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        if self._front is None:
            raise QueueEmptyError("queue underflow")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.value

    def peek(self) -> Any:
        if self._front is None:
            raise QueueEmptyError("queue is empty")
        return self._front.value

    def is_empty(self) -> bool:
        return self._front is None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Yield items from front to rear."""
        node = self._front
        while node is not None:
            yield node.value
            node = node.next


class StackQueue:
    """A queue built from two last-in-first-out stacks."""

    def __init__(self) -> None:
        self._inbox: list[Any] = []
        self._outbox: list[Any] = []

    def _refill(self) -> None:
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())

    def push(self, item: Any) -> None:
        self._inbox.append(item)

    def pop(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        self._refill()
        return self._outbox.pop()

    def peek(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        self._refill()
        return self._outbox[-1]

    def is_empty(self) -> bool:
        return not self._inbox and not self._outbox

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)