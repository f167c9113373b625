"""Growable array that doubles its reserved capacity when full."""

from __future__ import annotations

import operator
from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_RESERVE = 4


class DynamicArray(Generic[T]):
    """Append-only array with an explicit, doubling capacity."""

    def __init__(self, reserve: int = DEFAULT_RESERVE) -> None:
        reserve = operator.index(reserve)
        if reserve < 1:
            raise ValueError("reserve must be at least 1")
        self._capacity = reserve
        self._items: list[T] = []

    def append(self, value: T) -> None:
        """Add a value at the end, doubling the capacity if it is full."""
        if len(self._items) == self._capacity:
            self._capacity <<= 1
        self._items.append(value)

    def __getitem__(self, index: int) -> T:
        position = operator.index(index)
        count = len(self._items)
        if position < 0:
            position += count
        if not 0 <= position < count:
            raise IndexError("array index out of range")
        return self._items[position]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    @property
    def capacity(self) -> int:
        """Number of slots currently reserved."""
        return self._capacity

    def __repr__(self) -> str:
        return f"DynamicArray({self._items!r}, capacity={self._capacity})"