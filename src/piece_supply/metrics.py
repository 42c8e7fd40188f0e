from prometheus_client import Counter, Gauge

from piece_supply.pieces import Snapshot

ACTIONS_TOTAL = Counter(
    "piece_supply_actions_total",
    "Total supply actions handled",
    ["action", "result"],
)

QUEUE_SIZE = Gauge(
    "piece_supply_queue_size",
    "Current number of pieces in the next-piece queue",
)

STACK_SIZE = Gauge(
    "piece_supply_stack_size",
    "Current number of pieces in the reserve stack",
)


def record_sizes(snapshot: Snapshot) -> None:
    QUEUE_SIZE.set(len(snapshot.queue))
    STACK_SIZE.set(len(snapshot.stack))
