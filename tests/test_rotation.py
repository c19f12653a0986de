import pytest

from skyroster.intarray import IntArray
from skyroster.rotation import is_rotated, rotate


def make(*values):
    array = IntArray()
    for value in values:
        array.append(value)
    return array


BASE = (10, 20, 30, 40, 50)


def test_rotate_positive_moves_values_forward():
    array = make(*BASE)
    rotate(array, 2)
    assert list(array) == [40, 50, 10, 20, 30]


@pytest.mark.parametrize("n", [1, 2, 3, -1, -3, 7, -12])
def test_rotate_then_back_restores(n):
    array = make(*BASE)
    rotate(array, n)
    rotate(array, -n)
    assert list(array) == list(BASE)


@pytest.mark.parametrize("n", [0, 5, -5, 10])
def test_rotate_by_multiple_of_length_is_identity(n):
    array = make(*BASE)
    rotate(array, n)
    assert list(array) == list(BASE)


def test_rotate_wraps_large_shifts():
    wrapped, plain = make(*BASE), make(*BASE)
    rotate(wrapped, 7)
    rotate(plain, 2)
    assert list(wrapped) == list(plain)
    rotate(wrapped, -12)
    rotate(plain, -2)
    assert list(wrapped) == list(plain)


def test_rotate_preserves_length_and_values():
    array = make(*BASE)
    rotate(array, -3)
    assert len(array) == len(BASE)
    assert sorted(array) == sorted(BASE)


def test_rotate_single_and_empty():
    single = make(1)
    rotate(single, 3)
    assert list(single) == [1]
    empty = make()
    rotate(empty, 2)
    assert list(empty) == []


def test_rotated_copy_is_recognised():
    array = make(*BASE)
    rotate(array, 3)
    assert is_rotated(make(*BASE), array)


def test_is_rotated_example():
    assert is_rotated(make(1, 2, 3), make(2, 3, 1))


def test_is_rotated_rejects_different_sizes():
    assert not is_rotated(make(1, 2, 3), make(1, 2))


def test_is_rotated_rejects_missing_value():
    assert not is_rotated(make(1, 2, 3), make(4, 2, 3))


def test_is_rotated_rejects_reordering():
    assert not is_rotated(make(1, 2, 3), make(1, 3, 2))


def test_is_rotated_empty():
    assert is_rotated(make(), make())


def test_is_rotated_aligns_on_first_match():
    assert is_rotated(make(1, 2, 1, 3), make(1, 2, 1, 3))
    assert not is_rotated(make(1, 2, 1, 3), make(1, 3, 1, 2))