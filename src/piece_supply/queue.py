from collections.abc import Iterator
from typing import Protocol

from piece_supply.pieces import Piece


class PieceQueue(Protocol):
    capacity: int

    def enqueue(self, piece: Piece) -> bool: ...

    def dequeue(self) -> Piece | None: ...

    def get(self, index: int) -> Piece: ...

    def set(self, index: int, piece: Piece) -> None: ...

    def is_full(self) -> bool: ...

    def is_empty(self) -> bool: ...

    def __len__(self) -> int: ...

    def __iter__(self) -> Iterator[Piece]: ...


class BoundedQueue:
    """Fixed-capacity FIFO over a ring of slots.

    Logical index 0 is the front. ``get`` and ``set`` address logical
    positions, so callers never see where the ring currently wraps.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("queue capacity must be positive")
        self.capacity = capacity
        self._slots: list[Piece | None] = [None] * capacity
        self._head = 0
        self._size = 0

    def is_full(self) -> bool:
        return self._size == self.capacity

    def is_empty(self) -> bool:
        return self._size == 0

    def enqueue(self, piece: Piece) -> bool:
        if self.is_full():
            return False
        self._slots[(self._head + self._size) % self.capacity] = piece
        self._size += 1
        return True

    def dequeue(self) -> Piece | None:
        if self.is_empty():
            return None
        piece = self._slots[self._head]
        self._slots[self._head] = None
        self._head = (self._head + 1) % self.capacity
        self._size -= 1
        return piece

    def get(self, index: int) -> Piece:
        return self._slots[self._slot(index)]

    def set(self, index: int, piece: Piece) -> None:
        self._slots[self._slot(index)] = piece

    def _slot(self, index: int) -> int:
        if not 0 <= index < self._size:
            raise IndexError(f"queue index {index} out of range for size {self._size}")
        return (self._head + index) % self.capacity

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Piece]:
        for i in range(self._size):
            yield self.get(i)

    def __repr__(self) -> str:
        return f"BoundedQueue({len(self)}/{self.capacity})"
