"""Bounded queues: a ring-buffer queue and a double-ended queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any

DEFAULT_RING_SIZE = 10
DEFAULT_DEQUE_CAPACITY = 20


class QueueFullError(Exception):
    """Raised when an item is added to a full queue."""


class QueueEmptyError(IndexError):
    """Raised when an item is taken from an empty queue."""


class CircularQueue:
    """A FIFO queue over a ring buffer of ``size`` slots; it holds ``size - 1`` items."""

    def __init__(self, size: int = DEFAULT_RING_SIZE) -> None:
        if size < 1:
            raise ValueError("ring size must be at least 1")
        self._slots: list[Any] = [None] * size
        self._front = 0
        self._rear = 0

    def is_full(self) -> bool:
        return (self._rear + 1) % len(self._slots) == self._front

    def is_empty(self) -> bool:
        return self._rear == self._front

    def enqueue(self, item: Any) -> None:
        """Add ``item`` at the rear."""
        if self.is_full():
            raise QueueFullError("queue is full")
        self._slots[self._rear] = item
        self._rear = (self._rear + 1) % len(self._slots)

    def dequeue(self) -> Any:
        """Remove and return the item at the front."""
        item = self.front()
        self._slots[self._front] = None
        self._front = (self._front + 1) % len(self._slots)
        return item

    def front(self) -> Any:
        """Return the item at the front without removing it."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._slots[self._front]

    def __len__(self) -> int:
        return (self._rear - self._front) % len(self._slots)

    def __iter__(self) -> Iterator[Any]:
        size = len(self._slots)
        return (self._slots[(self._front + i) % size] for i in range(len(self)))


class BoundedDeque:
    """A double-ended queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_DEQUE_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: deque[Any] = deque()

    def _check_room(self) -> None:
        if len(self._items) >= self.capacity:
            raise QueueFullError("queue is full")

    def push_front(self, item: Any) -> None:
        self._check_room()
        self._items.appendleft(item)

    def push_back(self, item: Any) -> None:
        self._check_room()
        self._items.append(item)

    def pop_front(self) -> Any:
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items.popleft()

    def pop_back(self) -> Any:
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)