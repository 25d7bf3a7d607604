"""Binary trees: construction from level-order input or from traversals, and walks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Optional

ABSENT = -1


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    data: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


class BinaryTree:
    """A binary tree reachable from ``root``; an empty tree has no root."""

    def __init__(self, root: Optional[TreeNode] = None) -> None:
        self.root = root

    def __repr__(self) -> str:
        return f"BinaryTree(levelorder={self.levelorder()!r})"

    @classmethod
    def from_level_values(cls, values: Iterable[int]) -> BinaryTree:
        """Build a tree from values given level by level.

        The first value is the root; then, for each node in the order it was
        created, come its left and its right child. ``-1`` means no node.
        Values that run out leave the remaining children absent; values left
        over once every node has been given its children raise ValueError.
        """
        feed = iter(values)
        first = next(feed, ABSENT)
        if first == ABSENT:
            if next(feed, None) is not None:
                raise ValueError("values given after an absent root")
            return cls()
        root = TreeNode(first)
        pending = deque([root])
        while pending:
            node = pending.popleft()
            left = next(feed, ABSENT)
            if left != ABSENT:
                node.left = TreeNode(left)
                pending.append(node.left)
            right = next(feed, ABSENT)
            if right != ABSENT:
                node.right = TreeNode(right)
                pending.append(node.right)
        if next(feed, None) is not None:
            raise ValueError("more values than the tree has places for")
        return cls(root)

    @classmethod
    def from_traversals(cls, inorder: Sequence[int], preorder: Sequence[int]) -> BinaryTree:
        """Rebuild a tree from its inorder and preorder sequences."""
        if len(inorder) != len(preorder):
            raise ValueError("inorder and preorder differ in length")
        upcoming = iter(preorder)

        def build(start: int, end: int) -> Optional[TreeNode]:
            if start > end:
                return None
            node = TreeNode(next(upcoming))
            try:
                split = inorder.index(node.data, start, end + 1)
            except ValueError:
                raise ValueError(
                    f"value {node.data} does not fit the inorder sequence"
                ) from None
            node.left = build(start, split - 1)
            node.right = build(split + 1, end)
            return node

        return cls(build(0, len(inorder) - 1))

    def preorder(self) -> list[int]:
        out: list[int] = []

        def walk(node: Optional[TreeNode]) -> None:
            if node is not None:
                out.append(node.data)
                walk(node.left)
                walk(node.right)

        walk(self.root)
        return out

    def inorder(self) -> list[int]:
        out: list[int] = []

        def walk(node: Optional[TreeNode]) -> None:
            if node is not None:
                walk(node.left)
                out.append(node.data)
                walk(node.right)

        walk(self.root)
        return out

    def postorder(self) -> list[int]:
        out: list[int] = []

        def walk(node: Optional[TreeNode]) -> None:
            if node is not None:
                walk(node.left)
                walk(node.right)
                out.append(node.data)

        walk(self.root)
        return out

    def levelorder(self) -> list[int]:
        if self.root is None:
            return []
        out = [self.root.data]
        pending = deque([self.root])
        while pending:
            node = pending.popleft()
            for child in (node.left, node.right):
                if child is not None:
                    out.append(child.data)
                    pending.append(child)
        return out

    def height(self) -> int:
        """Number of nodes on the longest path from the root; 0 when empty."""

        def measure(node: Optional[TreeNode]) -> int:
            if node is None:
                return 0
            return 1 + max(measure(node.left), measure(node.right))

        return measure(self.root)

    def iterative_preorder(self) -> list[int]:
        out: list[int] = []
        stack: list[TreeNode] = []
        node = self.root
        while node is not None or stack:
            if node is not None:
                out.append(node.data)
                stack.append(node)
                node = node.left
            else:
                node = stack.pop().right
        return out

    def iterative_inorder(self) -> list[int]:
        out: list[int] = []
        stack: list[TreeNode] = []
        node = self.root
        while node is not None or stack:
            if node is not None:
                stack.append(node)
                node = node.left
            else:
                node = stack.pop()
                out.append(node.data)
                node = node.right
        return out

    def iterative_postorder(self) -> list[int]:
        out: list[int] = []
        stack: list[tuple[TreeNode, bool]] = []
        node = self.root
        while node is not None or stack:
            if node is not None:
                stack.append((node, False))
                node = node.left
            else:
                top, right_done = stack.pop()
                if not right_done:
                    stack.append((top, True))
                    node = top.right
                else:
                    out.append(top.data)
                    node = None
        return out