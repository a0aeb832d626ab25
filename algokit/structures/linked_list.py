"""Singly and doubly linked lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """A list node holding a value and links to its neighbours."""

    value: Any
    next: Node | None = None
    prev: Node | None = None


def _walk(head: Node | None) -> Iterator[Any]:
    node = head
    while node is not None:
        yield node.value
        node = node.next


class LinkedList:
    """A singly linked list that appends at the tail."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self._tail: Node | None = None
        self._length = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add ``value`` at the end of the list."""
        node = Node(value)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def __iter__(self) -> Iterator[Any]:
        return _walk(self.head)

    def __len__(self) -> int:
        return self._length


class DoublyLinkedList:
    """A doubly linked list that grows at the front and sorts in place."""

    def __init__(self) -> None:
        self.head: Node | None = None
        self._length = 0

    def push_front(self, value: Any) -> None:
        """Insert ``value`` at the start of the list."""
        node = Node(value, next=self.head)
        if self.head is not None:
            self.head.prev = node
        self.head = node
        self._length += 1

    def bubble_sort(self) -> None:
        """Sort the values ascending by swapping neighbouring values."""
        if self.head is None:
            return
        end: Node | None = None
        swapped = True
        while swapped:
            swapped = False
            node = self.head
            while node.next is not end:
                following = node.next
                if node.value > following.value:
                    node.value, following.value = following.value, node.value
                    swapped = True
                node = following
            end = node

    def __iter__(self) -> Iterator[Any]:
        return _walk(self.head)

    def __len__(self) -> int:
        return self._length