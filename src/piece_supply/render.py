from piece_supply.pieces import Snapshot

RULE = "=" * 51

MENU = """Available options:

Code\tAction
1\tPlay the piece at the front of the queue
2\tSend the front piece of the queue to the reserve stack
3\tUse the piece on top of the reserve stack
4\tSwap the front of the queue with the top of the stack
5\tSwap the first 3 pieces of the queue with the 3 pieces of the stack
6\tShow current state (queue and stack)
0\tQuit
"""


def render_state(snapshot: Snapshot) -> str:
    queue = " ".join(str(p) for p in snapshot.queue)
    stack = " ".join(str(p) for p in snapshot.stack)
    return "\n".join(
        [
            f"{' CURRENT STATE ':=^51}",
            f"Piece queue\t{queue}",
            f"Reserve stack\t(top -> bottom): {stack}",
            RULE,
        ]
    )
