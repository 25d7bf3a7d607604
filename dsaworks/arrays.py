"""A fixed-capacity array with search, ordering and set operations."""

from __future__ import annotations

import argparse
import bisect
import sys
from collections.abc import Iterable, Iterator


class ArrayFullError(Exception):
    """Raised when an element is added to an array already at capacity."""


class Array:
    """A list of integers that may hold at most ``size`` elements."""

    def __init__(self, size: int = 10, items: Iterable[int] = ()) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self.size = size
        self._items = list(items)
        if len(self._items) > size:
            raise ArrayFullError(f"{len(self._items)} items exceed capacity {size}")

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")

    def __getitem__(self, index: int) -> int:
        self._check_index(index)
        return self._items[index]

    def __setitem__(self, index: int, value: int) -> None:
        self._check_index(index)
        self._items[index] = value

    def __str__(self) -> str:
        return " ".join(str(x) for x in self._items)

    def __repr__(self) -> str:
        return f"Array(size={self.size}, items={self._items!r})"

    def _ensure_room(self) -> None:
        if len(self._items) >= self.size:
            raise ArrayFullError(f"array is full (capacity {self.size})")

    def append(self, x: int) -> None:
        """Add x at the end."""
        self._ensure_room()
        self._items.append(x)

    def insert(self, index: int, x: int) -> None:
        """Insert x at index, shifting later elements right."""
        if not 0 <= index <= len(self._items):
            raise IndexError(f"index {index} out of range")
        self._ensure_room()
        self._items.insert(index, x)

    def delete(self, index: int) -> int:
        """Remove and return the element at index."""
        self._check_index(index)
        return self._items.pop(index)

    def linear_search(self, key: int) -> int:
        """Return the index of key, or -1.

        A found element is swapped with the first one, so repeated
        searches for it become faster.
        """
        items = self._items
        for i, value in enumerate(items):
            if value == key:
                items[i], items[0] = items[0], items[i]
                return i
        return -1

    def binary_search(self, key: int) -> int:
        """Return the index of key in a sorted array, or -1."""
        low, high = 0, len(self._items) - 1
        while low <= high:
            mid = (low + high) // 2
            value = self._items[mid]
            if key == value:
                return mid
            if key < value:
                high = mid - 1
            else:
                low = mid + 1
        return -1

    def recursive_binary_search(self, key: int) -> int:
        """Binary search written recursively; returns the index or -1."""
        items = self._items

        def search(low: int, high: int) -> int:
            if low > high:
                return -1
            mid = (low + high) // 2
            if key == items[mid]:
                return mid
            if key < items[mid]:
                return search(low, mid - 1)
            return search(mid + 1, high)

        return search(0, len(items) - 1)

    def _require_items(self) -> None:
        if not self._items:
            raise ValueError("array is empty")

    def max(self) -> int:
        self._require_items()
        return max(self._items)

    def min(self) -> int:
        self._require_items()
        return min(self._items)

    def sum(self) -> int:
        return sum(self._items)

    def average(self) -> float:
        self._require_items()
        return self.sum() / len(self._items)

    def reverse(self) -> None:
        """Reverse the elements in place."""
        self._items.reverse()

    def insert_sorted(self, x: int) -> None:
        """Insert x into a sorted array, after any equal elements."""
        self._ensure_room()
        bisect.insort_right(self._items, x)

    def is_sorted(self) -> bool:
        return all(a <= b for a, b in zip(self._items, self._items[1:]))

    def rearrange(self) -> None:
        """Move negative elements to the left of non-negative ones, in place."""
        items = self._items
        i, j = 0, len(items) - 1
        while i < j:
            while i < len(items) and items[i] < 0:
                i += 1
            while j >= 0 and items[j] >= 0:
                j -= 1
            if i < j:
                items[i], items[j] = items[j], items[i]

    def _combine(self, other: Array, keep_left: bool, keep_right: bool,
                 keep_common: bool) -> Array:
        a, b = self._items, other._items
        i = j = 0
        out: list[int] = []
        while i < len(a) and j < len(b):
            if a[i] < b[j]:
                if keep_left:
                    out.append(a[i])
                i += 1
            elif b[j] < a[i]:
                if keep_right:
                    out.append(b[j])
                j += 1
            else:
                if keep_common:
                    out.append(a[i])
                i += 1
                j += 1
        if keep_left:
            out.extend(a[i:])
        if keep_right:
            out.extend(b[j:])
        return Array(len(a) + len(b), out)

    def merge(self, other: Array) -> Array:
        """Merge two sorted arrays, keeping every element of both."""
        a, b = self._items, other._items
        i = j = 0
        out: list[int] = []
        while i < len(a) and j < len(b):
            if a[i] < b[j]:
                out.append(a[i])
                i += 1
            else:
                out.append(b[j])
                j += 1
        out.extend(a[i:])
        out.extend(b[j:])
        return Array(len(a) + len(b), out)

    def union(self, other: Array) -> Array:
        """Sorted union; an element in both arrays appears once."""
        return self._combine(other, True, True, True)

    def intersection(self, other: Array) -> Array:
        """Elements present in both sorted arrays."""
        return self._combine(other, False, False, True)

    def difference(self, other: Array) -> Array:
        """Elements of this sorted array that are not in the other."""
        return self._combine(other, True, False, False)


_MENU = (
    "\n\n----Menu----\n"
    "1. Insert\n"
    "2. Delete\n"
    "3. Search\n"
    "4. Sum\n"
    "5. Display\n"
    "6. Exit\n"
    "Enter you choice: "
)


def _tokens(stream) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int:
    return int(next(tokens))


def main(argv: list[str] | None = None) -> int:
    """Run the interactive array menu on standard input and output."""
    parser = argparse.ArgumentParser(description="Interactive array menu.")
    parser.add_argument("size", nargs="?", type=int, help="capacity of the array")
    args = parser.parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        size = args.size
        if size is None:
            print("Enter Size of Array: ", end="")
            size = _read_int(tokens)
        array = Array(size)
        while True:
            print(_MENU, end="")
            choice = _read_int(tokens)
            if choice == 1:
                print("Enter an element and index: ", end="")
                x = _read_int(tokens)
                index = _read_int(tokens)
                try:
                    array.insert(index, x)
                except (IndexError, ArrayFullError) as exc:
                    print(f"Cannot insert: {exc}")
            elif choice == 2:
                print("Enter index: ", end="")
                index = _read_int(tokens)
                try:
                    print(f"Deleted Element is {array.delete(index)}")
                except IndexError as exc:
                    print(f"Cannot delete: {exc}")
            elif choice == 3:
                print("Enter element to search: ", end="")
                x = _read_int(tokens)
                print(f"Element index {array.linear_search(x)}", end="")
            elif choice == 4:
                print(f"Sum is {array.sum()}")
            elif choice == 5:
                print("\nElements are")
                print(array, end="")
            if choice >= 6:
                break
    except StopIteration:
        pass
    except ValueError as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1
    print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())