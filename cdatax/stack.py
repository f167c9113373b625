"""LIFO stack with a doubling reserved capacity."""

from __future__ import annotations

import operator
from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_RESERVE = 4


class Stack(Generic[T]):
    """Last-in first-out stack; iteration runs from bottom to top."""

    def __init__(self, reserve: int = DEFAULT_RESERVE) -> None:
        reserve = operator.index(reserve)
        if reserve < 1:
            raise ValueError("reserve must be at least 1")
        self._capacity = reserve
        self._items: list[T] = []

    def push(self, value: T) -> None:
        """Put a value on top, doubling the capacity if it is full."""
        if len(self._items) == self._capacity:
            self._capacity <<= 1
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def top(self) -> T:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    @property
    def capacity(self) -> int:
        """Number of slots currently reserved."""
        return self._capacity

    def __repr__(self) -> str:
        return f"Stack({self._items!r}, capacity={self._capacity})"