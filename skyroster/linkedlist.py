"""Singly linked list of integers with cursors for positional edits."""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional, Union

PathType = Union[str, "os.PathLike[str]"]


@dataclass(eq=False)
class Node:
    """One link of the list."""

    data: int = 0
    next: Optional["Node"] = None


class Cursor:
    """A position in a list: a node, or past the end when ``node`` is None."""

    __slots__ = ("node",)

    def __init__(self, node: Optional[Node] = None) -> None:
        self.node = node

    def advance(self) -> None:
        """Move to the following node; a cursor past the end stays there."""
        if self.node is not None:
            self.node = self.node.next

    def valid(self) -> bool:
        """True while the cursor points at a node."""
        return self.node is not None

    @property
    def data(self) -> int:
        """The value stored at the cursor's node."""
        if self.node is None:
            raise ValueError("cursor is past the end of the list")
        return self.node.data

    @data.setter
    def data(self, value: int) -> None:
        if self.node is None:
            raise ValueError("cursor is past the end of the list")
        self.node.data = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        return self.node is other.node

    def __repr__(self) -> str:
        if self.node is None:
            return "Cursor(end)"
        return f"Cursor({self.node.data!r})"


class LinkedList:
    """A singly linked list of ints with head and tail links."""

    def __init__(self) -> None:
        self._head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0

    def begin(self) -> Cursor:
        """A cursor at the first node."""
        return Cursor(self._head)

    def end(self) -> Cursor:
        """A cursor past the last node."""
        return Cursor(None)

    def front(self) -> int:
        """The first value."""
        if self._head is None:
            raise IndexError("front of empty list")
        return self._head.data

    def push_front(self, value: int) -> None:
        """Add ``value`` before the first node."""
        node = Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, value: int) -> None:
        """Add ``value`` after the last node."""
        if self._tail is None:
            self.push_front(value)
            return
        node = Node(value)
        self._tail.next = node
        self._tail = node
        self._size += 1

    def pop_front(self) -> None:
        """Remove the first node; an empty list is left alone."""
        if self._head is None:
            return
        self._head = self._head.next
        self._size -= 1
        if self._head is None:
            self._tail = None

    def insert_after(self, cursor: Cursor, value: int) -> Cursor:
        """Insert ``value`` after the cursor's node.

        Returns a cursor at the new node, or ``cursor`` itself when the list
        is empty or the cursor is past the end.
        """
        if self._head is None or cursor.node is None:
            return cursor
        current = cursor.node
        node = Node(value, current.next)
        current.next = node
        if node.next is None:
            self._tail = node
        self._size += 1
        return Cursor(node)

    def erase_after(self, cursor: Cursor) -> Cursor:
        """Remove the node after the cursor's node.

        Returns a cursor at the node that followed the removed one, or
        ``cursor`` itself when there was nothing to remove.
        """
        if self._head is None or cursor.node is None or cursor.node.next is None:
            return cursor
        current = cursor.node
        removed = current.next
        current.next = removed.next
        if removed.next is None:
            self._tail = current
        self._size -= 1
        return Cursor(current.next)

    def clear(self) -> None:
        """Remove every node."""
        self._head = None
        self._tail = None
        self._size = 0

    def copy(self) -> "LinkedList":
        """A new list holding the same values in new nodes."""
        duplicate = LinkedList()
        for value in self:
            duplicate.push_back(value)
        return duplicate

    def find(self, value: int) -> Cursor:
        """A cursor at the first node holding ``value``, or past the end."""
        cursor = self.begin()
        while cursor.valid():
            if cursor.data == value:
                return cursor
            cursor.advance()
        return self.end()

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._head is not None

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"


def read_ages(path: PathType) -> LinkedList:
    """Read ``name,age`` lines and collect the ages in file order."""
    ages = LinkedList()
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            fields = line.rstrip("\r\n").split(",")
            age = fields[1] if len(fields) > 1 else ""
            ages.push_back(int(age))
    return ages