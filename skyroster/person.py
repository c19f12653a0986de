"""A named person with an age, and comparisons between people."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Person:
    """A person known by name and age."""

    name: str = "noname"
    age: int = 0

    def __str__(self) -> str:
        return f"Name: {self.name}, Age: ${self.age}"


def equivalent(p1: Person, p2: Person) -> bool:
    """True when both people share a name and an age."""
    return p1.name == p2.name and p1.age == p2.age


def compare(p1: Person, p2: Person, comparator: bool) -> bool:
    """Order by age: ``p1 <= p2`` when ``comparator`` is true, else ``p1 > p2``."""
    if comparator:
        return p1.age <= p2.age
    return p1.age > p2.age