import sys
from collections.abc import Callable

from piece_supply.config import Settings
from piece_supply.logging_setup import configure_logging
from piece_supply.manager import SupplyManager, build_manager
from piece_supply.models import ActionResult, Success
from piece_supply.render import MENU

ACTIONS: dict[int, Callable[[SupplyManager], ActionResult]] = {
    1: SupplyManager.play,
    2: SupplyManager.reserve,
    3: SupplyManager.use_reserved,
    4: SupplyManager.swap_front,
    5: SupplyManager.swap_triple,
}
SHOW_STATE = 6
QUIT = 0


def run_menu(
    manager: SupplyManager,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    write(f"=== Piece Supply (queue {manager.queue_capacity} / stack {manager.stack_capacity}) ===")
    write(manager.inspect())
    while True:
        write(MENU)
        try:
            raw = read("Chosen option: ")
        except EOFError:
            raw = str(QUIT)
        try:
            option = int(raw.strip())
        except ValueError:
            write("Invalid input. Try again.\n")
            continue
        if option == QUIT:
            write("Shutting down. Removed pieces never return to the game.")
            return
        if option == SHOW_STATE:
            write(manager.inspect())
            continue
        action = ACTIONS.get(option)
        if action is None:
            write("Invalid option. Try again.")
            continue
        result = action(manager)
        if isinstance(result, Success):
            write(f"Action: {result.description}.")
        else:
            write(f"Action not performed: {result.reason}.")
        write(manager.inspect())


def main() -> None:
    settings = Settings()
    configure_logging(settings.log_level, stream=sys.stderr)
    run_menu(build_manager(settings))


if __name__ == "__main__":
    main()
