"""Rotation of integer sequences."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence


def rotate(data: MutableSequence[int], n: int) -> None:
    """Rotate ``data`` in place so the value at ``i`` moves to ``i + n``.

    Negative ``n`` rotates the other way; ``n`` wraps around the length.
    """
    values = list(data)
    if len(values) <= 1:
        return
    shift = n % len(values)
    if shift == 0:
        return
    rotated = values[-shift:] + values[:-shift]
    for position, value in enumerate(rotated):
        data[position] = value


def is_rotated(a: Sequence[int], b: Sequence[int]) -> bool:
    """Tell whether ``b`` is ``a`` rotated.

    The rotation is aligned on the first occurrence in ``b`` of the first
    value of ``a``.
    """
    first, second = list(a), list(b)
    if len(first) != len(second):
        return False
    if not first:
        return True
    try:
        start = second.index(first[0])
    except ValueError:
        return False
    return second[start:] + second[:start] == first