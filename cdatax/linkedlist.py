"""Doubly linked list with positional insertion and lookup."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(slots=True, eq=False)
class _Node(Generic[T]):
    value: T
    previous: Optional["_Node[T]"] = None
    next: Optional["_Node[T]"] = None


class LinkedList(Generic[T]):
    """Doubly linked list that walks from the nearer end when seeking."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._count = 0
        for item in items or ():
            self.append(item)

    def _normalize(self, index: int, upper: int) -> int:
        position = operator.index(index)
        if position < 0:
            position += self._count
        if not 0 <= position < upper:
            raise IndexError("list index out of range")
        return position

    def _node_at(self, position: int) -> _Node[T]:
        if position < self._count // 2:
            node = self._head
            for _ in range(position):
                node = node.next
        else:
            node = self._tail
            for _ in range(self._count - 1 - position):
                node = node.previous
        return node

    def insert(self, index: int, value: T) -> None:
        """Insert a value so that it ends up at the given position."""
        position = self._normalize(index, self._count + 1)
        new = _Node(value)
        if position == self._count:
            new.previous = self._tail
            if self._tail is None:
                self._head = new
            else:
                self._tail.next = new
            self._tail = new
        else:
            after = self._node_at(position)
            new.next = after
            new.previous = after.previous
            if after.previous is None:
                self._head = new
            else:
                after.previous.next = new
            after.previous = new
        self._count += 1

    def append(self, value: T) -> None:
        """Add a value at the end."""
        self.insert(self._count, value)

    def __getitem__(self, index: int) -> T:
        return self._node_at(self._normalize(index, self._count)).value

    def first(self) -> T:
        """Return the first value."""
        if self._head is None:
            raise IndexError("first of empty list")
        return self._head.value

    def last(self) -> T:
        """Return the last value."""
        if self._tail is None:
            raise IndexError("last of empty list")
        return self._tail.value

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[T]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.previous

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"