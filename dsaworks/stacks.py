"""Stacks backed by a fixed-size list and by linked nodes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(Exception):
    """Raised when reading from or popping an empty stack."""


class ArrayStack:
    """A stack holding at most ``size`` elements."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self.size = size
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Elements from the top of the stack down."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"ArrayStack(size={self.size}, items={self._items!r})"

    def push(self, x: int) -> None:
        if self.is_full():
            raise StackOverflowError(f"stack is full (capacity {self.size})")
        self._items.append(x)

    def pop(self) -> int:
        if self.is_empty():
            raise StackUnderflowError("stack is empty")
        return self._items.pop()

    def peek(self, position: int) -> int:
        """Element at 1-based position counted from the top."""
        if not 1 <= position <= len(self._items):
            raise IndexError(f"invalid position {position}")
        return self._items[-position]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.size

    def top(self) -> int:
        if self.is_empty():
            raise StackUnderflowError("stack is empty")
        return self._items[-1]


@dataclass(eq=False)
class _Cell:
    data: int
    next: Optional[_Cell] = None


class LinkedStack:
    """An unbounded stack built from linked cells."""

    def __init__(self) -> None:
        self._top: Optional[_Cell] = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[int]:
        """Elements from the top of the stack down."""
        p = self._top
        while p is not None:
            yield p.data
            p = p.next

    def __repr__(self) -> str:
        return f"LinkedStack({list(self)!r})"

    def push(self, x: int) -> None:
        self._top = _Cell(x, self._top)
        self._count += 1

    def pop(self) -> int:
        if self._top is None:
            raise StackUnderflowError("stack is empty")
        cell = self._top
        self._top = cell.next
        self._count -= 1
        return cell.data

    def peek(self, position: int) -> int:
        """Element at 1-based position counted from the top."""
        if position < 1:
            raise IndexError(f"invalid position {position}")
        for i, value in enumerate(self, start=1):
            if i == position:
                return value
        raise IndexError(f"invalid position {position}")

    def is_empty(self) -> bool:
        return self._top is None

    def top(self) -> int:
        if self._top is None:
            raise StackUnderflowError("stack is empty")
        return self._top.data