"""FIFO queue backed by a circular buffer that doubles when full."""

from __future__ import annotations

import operator
from collections.abc import Iterator
from itertools import chain, islice
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

DEFAULT_RESERVE = 4


class RingQueue(Generic[T]):
    """First-in first-out queue stored in a ring buffer."""

    def __init__(self, reserve: int = DEFAULT_RESERVE) -> None:
        reserve = operator.index(reserve)
        if reserve < 1:
            raise ValueError("reserve must be at least 1")
        self._slots: list[Optional[T]] = [None] * reserve
        self._head = 0
        self._tail = 0
        self._count = 0

    def _grow(self) -> None:
        if self._count == len(self._slots):
            ordered = list(self)
            self._slots = ordered + [None] * len(ordered)
            self._head = 0
            self._tail = self._count

    def enqueue(self, value: T) -> None:
        """Add a value at the back of the queue."""
        self._grow()
        self._slots[self._tail] = value
        self._tail = (self._tail + 1) % len(self._slots)
        self._count += 1

    def dequeue(self) -> T:
        """Remove and return the value at the front of the queue."""
        value = self.front()
        self._slots[self._head] = None
        self._head = (self._head + 1) % len(self._slots)
        self._count -= 1
        return value

    def front(self) -> T:
        """Return the oldest value without removing it."""
        if not self._count:
            raise IndexError("front of empty queue")
        return self._slots[self._head]

    def back(self) -> T:
        """Return the newest value without removing it."""
        if not self._count:
            raise IndexError("back of empty queue")
        return self._slots[self._tail - 1]

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        ring = chain(self._slots[self._head:], self._slots[: self._head])
        return islice(ring, self._count)

    @property
    def capacity(self) -> int:
        """Number of slots currently reserved."""
        return len(self._slots)

    def __repr__(self) -> str:
        return f"RingQueue({list(self)!r}, capacity={self.capacity})"