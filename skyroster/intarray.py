"""A growable array of integers that keeps track of its own capacity."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Union

DEFAULT_CAPACITY = 5

PathType = Union[str, "os.PathLike[str]"]


class IntArray:
    """A sequence of ints with an explicit capacity that doubles when full."""

    def __init__(self, max_size: int = DEFAULT_CAPACITY) -> None:
        if max_size < 0:
            raise ValueError("capacity cannot be negative")
        self._capacity = max_size
        self._items: list[int] = []

    @property
    def max_size(self) -> int:
        """The number of values the array can hold before it grows."""
        return self._capacity

    def reserve(self, n: int) -> None:
        """Raise the capacity to ``n``; a smaller ``n`` leaves it unchanged."""
        if n < 0:
            raise ValueError("capacity cannot be negative")
        if n > self._capacity:
            self._capacity = n

    def _grow(self) -> None:
        self.reserve(max(self._capacity * 2, 1))

    def clear(self) -> None:
        """Drop every value and return to the default capacity."""
        self._items.clear()
        self._capacity = DEFAULT_CAPACITY

    def append(self, value: int) -> None:
        """Add ``value`` at the end, doubling the capacity when full."""
        if len(self._items) == self._capacity:
            self._grow()
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the last value."""
        if not self._items:
            raise IndexError("pop from empty IntArray")
        return self._items.pop()

    def insert(self, index: int, value: int) -> None:
        """Insert ``value`` before position ``index``.

        ``index`` must lie within the capacity; an index past the current
        size but within the capacity leaves the array unchanged.
        """
        if not 0 <= index <= self._capacity:
            raise IndexError(f"insert index {index} out of range")
        if len(self._items) == self._capacity:
            self._grow()
        if index <= len(self._items):
            self._items.insert(index, value)

    def erase(self, index: int) -> None:
        """Remove the value at ``index``, shifting later values down."""
        self._check_index(index)
        del self._items[index]

    def resize(self, n: int) -> None:
        """Change the size to ``n``, padding with zeros when growing."""
        if n < 0:
            raise ValueError("size cannot be negative")
        size = len(self._items)
        if n > size:
            if n > self._capacity:
                self.reserve(max(self._capacity * 2, n))
            self._items.extend([0] * (n - size))
        else:
            del self._items[n:]

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> int:
        self._check_index(index)
        return self._items[index]

    def __setitem__(self, index: int, value: int) -> None:
        self._check_index(index)
        self._items[index] = value

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __str__(self) -> str:
        return " ".join(str(value) for value in self._items)

    def __repr__(self) -> str:
        return f"IntArray({self._items!r}, max_size={self._capacity})"


def read_ints(path: PathType) -> IntArray:
    """Read comma-separated integers from every line of a file."""
    array = IntArray()
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            tokens = line.rstrip("\r\n").split(",")
            if tokens[-1] == "":
                tokens.pop()
            for token in tokens:
                array.append(int(token))
    return array