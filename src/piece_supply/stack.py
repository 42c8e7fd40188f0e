from collections.abc import Iterator

from piece_supply.pieces import Piece


class BoundedStack:
    """Fixed-capacity LIFO. Iteration runs from the top down."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("stack capacity must be positive")
        self.capacity = capacity
        self._items: list[Piece] = []

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def push(self, piece: Piece) -> bool:
        if self.is_full():
            return False
        self._items.append(piece)
        return True

    def pop(self) -> Piece | None:
        if self.is_empty():
            return None
        return self._items.pop()

    def peek(self) -> Piece | None:
        if self.is_empty():
            return None
        return self._items[-1]

    def _set_from_top(self, offset: int, piece: Piece) -> None:
        # Overwrites a slot without push/pop; only the swap actions use this.
        if not 0 <= offset < len(self._items):
            raise IndexError(f"stack offset {offset} out of range for size {len(self._items)}")
        self._items[-1 - offset] = piece

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Piece]:
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"BoundedStack({len(self)}/{self.capacity})"
