"""Binary search tree with insertion, removal and the four traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class TreeNode:
    """A tree node; smaller values go left, equal or larger go right."""

    value: int
    left: TreeNode | None = None
    right: TreeNode | None = None


class BinarySearchTree:
    """A binary search tree of integers that allows duplicates."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: TreeNode | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Insert ``value``; duplicates go into the right subtree."""
        if self.root is None:
            self.root = TreeNode(value)
            return
        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = TreeNode(value)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = TreeNode(value)
                    return
                node = node.right

    def remove(self, value: int) -> None:
        """Remove one occurrence of ``value``; raises KeyError if absent.

        A node with two children takes the largest value of its left subtree.
        """
        self.root = self._remove(self.root, value)

    @classmethod
    def _remove(cls, node: TreeNode | None, value: int) -> TreeNode | None:
        if node is None:
            raise KeyError(value)
        if value < node.value:
            node.left = cls._remove(node.left, value)
        elif value > node.value:
            node.right = cls._remove(node.right, value)
        elif node.left is None:
            return node.right
        elif node.right is None:
            return node.left
        else:
            largest = node.left
            while largest.right is not None:
                largest = largest.right
            node.value = largest.value
            node.left = cls._remove(node.left, largest.value)
        return node

    def breadth_first(self) -> list[int]:
        """Return the values level by level, left to right."""
        result: list[int] = []
        queue: deque[TreeNode] = deque([self.root] if self.root else [])
        while queue:
            node = queue.popleft()
            result.append(node.value)
            queue.extend(child for child in (node.left, node.right) if child)
        return result

    def preorder(self) -> list[int]:
        """Return the values in node, left, right order."""
        return list(self._preorder(self.root))

    def inorder(self) -> list[int]:
        """Return the values in left, node, right order (ascending)."""
        return list(self._inorder(self.root))

    def postorder(self) -> list[int]:
        """Return the values in left, right, node order."""
        return list(self._postorder(self.root))

    @classmethod
    def _preorder(cls, node: TreeNode | None) -> Iterator[int]:
        if node is not None:
            yield node.value
            yield from cls._preorder(node.left)
            yield from cls._preorder(node.right)

    @classmethod
    def _inorder(cls, node: TreeNode | None) -> Iterator[int]:
        if node is not None:
            yield from cls._inorder(node.left)
            yield node.value
            yield from cls._inorder(node.right)

    @classmethod
    def _postorder(cls, node: TreeNode | None) -> Iterator[int]:
        if node is not None:
            yield from cls._postorder(node.left)
            yield from cls._postorder(node.right)
            yield node.value