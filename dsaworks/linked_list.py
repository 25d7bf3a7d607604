"""A singly linked list of integers with the classic list algorithms."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class Node:
    """One cell of a singly linked list."""

    data: int
    next: Optional[Node] = None


class LinkedList:
    """A singly linked list whose cells are reachable from ``head``.

    Iteration and ``len`` assume the list has no loop; use ``has_loop``
    first when a loop may have been introduced by relinking nodes.
    """

    def __init__(self, items: Iterable[int] = ()) -> None:
        self.head: Optional[Node] = None
        last: Optional[Node] = None
        for x in items:
            node = Node(x)
            if last is None:
                self.head = node
            else:
                last.next = node
            last = node

    @classmethod
    def _from_head(cls, head: Optional[Node]) -> LinkedList:
        result = cls()
        result.head = head
        return result

    def _nodes(self) -> Iterator[Node]:
        p = self.head
        while p is not None:
            yield p
            p = p.next

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __str__(self) -> str:
        return " ".join(str(x) for x in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def has_loop(self) -> bool:
        """Detect a cycle with a slow and a fast pointer."""
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
            if slow is fast:
                return True
        return False

    def _require_items(self) -> None:
        if self.head is None:
            raise ValueError("list is empty")

    def max(self) -> int:
        """Largest element, found with a loop."""
        self._require_items()
        largest = self.head.data
        for x in self:
            if x > largest:
                largest = x
        return largest

    def recursive_max(self) -> int:
        """Largest element, found recursively."""
        self._require_items()

        def largest(node: Node) -> int:
            if node.next is None:
                return node.data
            rest = largest(node.next)
            return rest if rest > node.data else node.data

        return largest(self.head)

    def merge(self, other: LinkedList) -> LinkedList:
        """Merge two sorted lists by relinking their nodes.

        Both input lists give up their nodes and are left empty.
        """
        a, b = self.head, other.head
        anchor = Node(0)
        last = anchor
        while a is not None and b is not None:
            if a.data < b.data:
                last.next = a
                last = a
                a = a.next
            else:
                last.next = b
                last = b
                b = b.next
        last.next = a if a is not None else b
        self.head = None
        other.head = None
        return LinkedList._from_head(anchor.next)

    def middle(self) -> int:
        """Middle element; for an even length, the first of the two middles."""
        self._require_items()
        slow = fast = self.head
        while fast is not None:
            fast = fast.next
            if fast is not None:
                fast = fast.next
            if fast is not None:
                slow = slow.next
        return slow.data

    def remove_duplicates(self) -> None:
        """Drop elements equal to their predecessor, as in a sorted list."""
        p = self.head
        if p is None:
            return
        q = p.next
        while q is not None:
            if p.data != q.data:
                p = q
            else:
                p.next = q.next
            q = p.next

    def reverse(self) -> None:
        """Reverse the list in place by relinking nodes."""
        previous: Optional[Node] = None
        p = self.head
        while p is not None:
            following = p.next
            p.next = previous
            previous = p
            p = following
        self.head = previous

    def reverse_recursive(self) -> None:
        """Reverse the list in place with a recursive walk."""

        def relink(previous: Optional[Node], node: Optional[Node]) -> None:
            if node is not None:
                relink(node, node.next)
                node.next = previous
            else:
                self.head = previous

        relink(None, self.head)

    def search(self, key: int) -> Optional[Node]:
        """Find key and move its node to the front; return the node or None."""
        previous: Optional[Node] = None
        for node in self._nodes():
            if node.data == key:
                if previous is not None:
                    previous.next = node.next
                    node.next = self.head
                    self.head = node
                return node
            previous = node
        return None

    def recursive_search(self, key: int) -> Optional[Node]:
        """Find key recursively without changing the list."""

        def find(node: Optional[Node]) -> Optional[Node]:
            if node is None:
                return None
            if node.data == key:
                return node
            return find(node.next)

        return find(self.head)

    def sorted_insert(self, x: int) -> Node:
        """Insert x into a sorted list before the first element not less than it."""
        new = Node(x)
        previous: Optional[Node] = None
        p = self.head
        while p is not None and p.data < x:
            previous = p
            p = p.next
        if previous is None:
            new.next = self.head
            self.head = new
        else:
            new.next = previous.next
            previous.next = new
        return new