import logging

from piece_supply.config import Settings
from piece_supply.models import ActionResult, Rejected, Success
from piece_supply.pieces import Piece, PieceFactory, Snapshot
from piece_supply.queue import BoundedQueue, PieceQueue
from piece_supply.render import render_state
from piece_supply.stack import BoundedStack

logger = logging.getLogger(__name__)

TRIPLE = 3


class SupplyManager:
    """Moves pieces between the next-piece queue and the reserve stack.

    The queue starts full and is topped up with a fresh piece whenever
    ``play`` or ``reserve`` takes one out of it. The stack is never
    replenished. Every rejected action leaves both containers untouched.
    """

    def __init__(
        self,
        factory: PieceFactory,
        queue_capacity: int = 5,
        stack_capacity: int = 3,
    ) -> None:
        self._factory = factory
        self._queue: PieceQueue = BoundedQueue(queue_capacity)
        self._stack = BoundedStack(stack_capacity)
        while not self._queue.is_full():
            self._queue.enqueue(factory.create())

    @property
    def queue_capacity(self) -> int:
        return self._queue.capacity

    @property
    def stack_capacity(self) -> int:
        return self._stack.capacity

    def play(self) -> ActionResult:
        played = self._queue.dequeue()
        if played is None:
            return self._reject("play", "queue is empty, nothing to play")
        description = f"played {played}"
        return self._succeed("play", self._replenish(description))

    def reserve(self) -> ActionResult:
        if self._stack.is_full():
            return self._reject("reserve", "reserve stack is full")
        front = self._queue.dequeue()
        if front is None:
            return self._reject("reserve", "queue is empty, nothing to reserve")
        self._stack.push(front)
        description = f"reserved {front}"
        return self._succeed("reserve", self._replenish(description))

    def use_reserved(self) -> ActionResult:
        used = self._stack.pop()
        if used is None:
            return self._reject("use_reserved", "reserve stack is empty")
        return self._succeed("use_reserved", f"used reserved {used}")

    def swap_front(self) -> ActionResult:
        if self._stack.is_empty():
            return self._reject("swap_front", "reserve stack is empty")
        if self._queue.is_empty():
            return self._reject("swap_front", "queue is empty")
        front = self._queue.get(0)
        top = self._stack.peek()
        self._queue.set(0, top)
        self._stack._set_from_top(0, front)
        return self._succeed("swap_front", f"swapped queue front {front} with stack top {top}")

    def swap_triple(self) -> ActionResult:
        if len(self._stack) < TRIPLE:
            return self._reject("swap_triple", f"reserve stack holds fewer than {TRIPLE} pieces")
        if len(self._queue) < TRIPLE:
            return self._reject("swap_triple", f"queue holds fewer than {TRIPLE} pieces")
        front = [self._queue.get(i) for i in range(TRIPLE)]
        top = list(self._stack)[:TRIPLE]
        # Stack order is copied straight into the queue; queue order goes
        # into the stack reversed so the last of the trio ends up on top.
        for i, piece in enumerate(top):
            self._queue.set(i, piece)
        for offset, piece in enumerate(reversed(front)):
            self._stack._set_from_top(offset, piece)
        return self._succeed(
            "swap_triple",
            f"swapped queue front {_join(front)} with stack top {_join(top)}",
        )

    def snapshot(self) -> Snapshot:
        return Snapshot(queue=tuple(self._queue), stack=tuple(self._stack))

    def inspect(self) -> str:
        return render_state(self.snapshot())

    def _replenish(self, description: str) -> str:
        if self._queue.is_full():
            return description
        piece = self._factory.create()
        self._queue.enqueue(piece)
        return f"{description}; new piece {piece} joined the queue"

    def _succeed(self, action: str, description: str) -> Success:
        logger.info("Action %s: %s", action, description)
        return Success(action=action, description=description)

    def _reject(self, action: str, reason: str) -> Rejected:
        logger.warning("Rejected %s: %s", action, reason)
        return Rejected(action=action, reason=reason)


def _join(pieces: list[Piece]) -> str:
    return " ".join(str(p) for p in pieces)


def build_manager(settings: Settings) -> SupplyManager:
    factory = PieceFactory.seeded(settings.piece_kinds, settings.seed)
    return SupplyManager(
        factory,
        queue_capacity=settings.queue_capacity,
        stack_capacity=settings.stack_capacity,
    )
