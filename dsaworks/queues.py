"""Queues backed by a fixed list, by linked cells and by two stacks."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


class QueueFullError(Exception):
    """Raised when enqueuing onto a full queue."""


class QueueEmptyError(Exception):
    """Raised when dequeuing from an empty queue."""


class ArrayQueue:
    """A linear queue over ``size`` slots.

    Slots freed by dequeuing are not reused: once ``size`` elements have
    been enqueued the queue stays full.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self.size = size
        self._slots: list[int] = []
        self._front = 0

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def __iter__(self) -> Iterator[int]:
        """Elements from front to rear."""
        return iter(self._slots[self._front:])

    def __repr__(self) -> str:
        return f"ArrayQueue(size={self.size}, items={list(self)!r})"

    def enqueue(self, x: int) -> None:
        if self.is_full():
            raise QueueFullError(f"queue is full (capacity {self.size})")
        self._slots.append(x)

    def dequeue(self) -> int:
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        value = self._slots[self._front]
        self._front += 1
        return value

    def is_empty(self) -> bool:
        return self._front == len(self._slots)

    def is_full(self) -> bool:
        return len(self._slots) == self.size


@dataclass(eq=False)
class _Cell:
    data: int
    next: Optional[_Cell] = None


class LinkedQueue:
    """An unbounded queue built from linked cells."""

    def __init__(self) -> None:
        self._front: Optional[_Cell] = None
        self._rear: Optional[_Cell] = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[int]:
        """Elements from front to rear."""
        p = self._front
        while p is not None:
            yield p.data
            p = p.next

    def __repr__(self) -> str:
        return f"LinkedQueue({list(self)!r})"

    def enqueue(self, x: int) -> None:
        cell = _Cell(x)
        if self._rear is None:
            self._front = self._rear = cell
        else:
            self._rear.next = cell
            self._rear = cell
        self._count += 1

    def dequeue(self) -> int:
        if self._front is None:
            raise QueueEmptyError("queue is empty")
        cell = self._front
        self._front = cell.next
        if self._front is None:
            self._rear = None
        self._count -= 1
        return cell.data

    def is_empty(self) -> bool:
        return self._front is None


class TwoStackQueue:
    """A queue made of an inbound and an outbound stack."""

    def __init__(self) -> None:
        self._inbound: list[int] = []
        self._outbound: list[int] = []

    def __len__(self) -> int:
        return len(self._inbound) + len(self._outbound)

    def __repr__(self) -> str:
        items = list(reversed(self._outbound)) + self._inbound
        return f"TwoStackQueue({items!r})"

    def enqueue(self, x: int) -> None:
        self._inbound.append(x)

    def dequeue(self) -> int:
        if not self._outbound:
            if not self._inbound:
                raise QueueEmptyError("queue is empty")
            while self._inbound:
                self._outbound.append(self._inbound.pop())
        return self._outbound.pop()

    def is_empty(self) -> bool:
        return not self._inbound and not self._outbound