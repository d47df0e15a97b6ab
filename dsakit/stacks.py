"""LIFO stacks: bounded array, linked list, single queue; bracket matching."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

DEFAULT_CAPACITY = 1000

_PAIRS = {")": "(", "}": "{", "]": "["}
_OPENERS = frozenset(_PAIRS.values())


class StackEmptyError(IndexError):
    """Raised when reading from or removing from an empty stack."""


class StackFullError(OverflowError):
    """Raised when pushing onto a stack that has no room left."""


class ArrayStack:
    """A stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, item: Any) -> None:
        if len(self._items) == self.capacity:
            raise StackFullError("stack overflow")
        self._items.append(item)

    def pop(self) -> Any:
        if not self._items:
            raise StackEmptyError("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


@dataclass
class _Node:
    value: Any
    next: Optional["_Node"] = None


class LinkedStack:
    """An unbounded stack built from singly linked nodes."""

    def __init__(self) -> None:
        self._top: Optional[_Node] = None
        self._size = 0

    def push(self, item: Any) -> None:
        self._top = _Node(item, self._top)
        self._size += 1

    def pop(self) -> Any:
        if self._top is None:
            raise StackEmptyError("stack underflow")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.value

    def peek(self) -> Any:
        if self._top is None:
            raise StackEmptyError("stack is empty")
        return self._top.value

    def is_empty(self) -> bool:
        return self._top is None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Yield items from top to bottom."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.next


class QueueStack:
    """A stack kept in a FIFO queue whose front is always the newest item."""

    def __init__(self) -> None:
        self._queue: deque[Any] = deque()

    def push(self, item: Any) -> None:
        self._queue.append(item)
        for _ in range(len(self._queue) - 1):
            self._queue.append(self._queue.popleft())

    def pop(self) -> Any:
        if not self._queue:
            raise StackEmptyError("stack is empty")
        return self._queue.popleft()

    def peek(self) -> Any:
        if not self._queue:
            raise StackEmptyError("stack is empty")
        return self._queue[0]

    def is_empty(self) -> bool:
        return not self._queue

    def __len__(self) -> int:
        return len(self._queue)


def is_valid_parentheses(s: str) -> bool:
    """Tell whether every bracket in ``s`` is closed in the right order.

    Any character that is not an opening bracket is treated as a closer,
    so characters other than brackets make the string invalid.
    """
    open_brackets: list[str] = []
    for ch in s:
        if ch in _OPENERS:
            open_brackets.append(ch)
        elif not open_brackets or _PAIRS.get(ch) != open_brackets[-1]:
            return False
        else:
            open_brackets.pop()
    return not open_brackets