import pytest

from piece_supply.pieces import Piece
from piece_supply.stack import BoundedStack

A, B, C, D = (Piece(kind="L", id=i) for i in range(4))


def test_push_pop_lifo() -> None:
    s = BoundedStack(capacity=3)
    for p in (A, B, C):
        assert s.push(p) is True
    assert [s.pop(), s.pop(), s.pop()] == [C, B, A]


def test_push_when_full_is_noop() -> None:
    s = BoundedStack(capacity=2)
    s.push(A)
    s.push(B)
    assert s.push(C) is False
    assert list(s) == [B, A]


def test_pop_and_peek_when_empty() -> None:
    s = BoundedStack(capacity=2)
    assert s.pop() is None
    assert s.peek() is None


def test_peek_does_not_remove() -> None:
    s = BoundedStack(capacity=2)
    s.push(A)
    assert s.peek() == A
    assert len(s) == 1


def test_iterates_top_to_bottom() -> None:
    s = BoundedStack(capacity=3)
    for p in (A, B, C):
        s.push(p)
    assert list(s) == [C, B, A]


def test_set_from_top_overwrites_in_place() -> None:
    s = BoundedStack(capacity=3)
    for p in (A, B, C):
        s.push(p)
    s._set_from_top(0, D)
    s._set_from_top(2, C)
    assert list(s) == [D, B, C]
    assert len(s) == 3


def test_set_from_top_out_of_range_raises() -> None:
    s = BoundedStack(capacity=3)
    s.push(A)
    with pytest.raises(IndexError):
        s._set_from_top(1, B)


def test_non_positive_capacity_rejected() -> None:
    with pytest.raises(ValueError):
        BoundedStack(capacity=-1)
