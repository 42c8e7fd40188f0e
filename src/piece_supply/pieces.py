import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

logger = logging.getLogger(__name__)

DEFAULT_KINDS = ("I", "O", "T", "L")


@dataclass(frozen=True)
class Piece:
    kind: str
    id: int

    def __str__(self) -> str:
        return f"[{self.kind} {self.id}]"


class RandomSource(Protocol):
    def choice(self, seq: Sequence[str]) -> str: ...


class PieceFactory:
    """Creates pieces with ids taken from a counter owned by the factory.

    Ids start at 0 and are never reused for the lifetime of the factory, so a
    process should build exactly one factory and hand it to the manager.
    """

    def __init__(self, kinds: Sequence[str] = DEFAULT_KINDS, rng: RandomSource | None = None) -> None:
        if not kinds:
            raise ValueError("piece alphabet must not be empty")
        self._kinds = tuple(kinds)
        self._rng = rng or random.Random()
        self._next_id = 0

    @classmethod
    def seeded(cls, kinds: Sequence[str], seed: int | None) -> "PieceFactory":
        return cls(kinds, random.Random(seed))

    def create(self) -> Piece:
        piece = Piece(kind=self._rng.choice(self._kinds), id=self._next_id)
        self._next_id += 1
        logger.debug("Created piece %s", piece)
        return piece


@dataclass(frozen=True)
class Snapshot:
    """Queue contents front to back and stack contents top to bottom."""

    queue: tuple[Piece, ...]
    stack: tuple[Piece, ...]
