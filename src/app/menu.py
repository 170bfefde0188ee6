from __future__ import annotations

import enum
import logging
from typing import Sequence

EXIT_CHOICE = "0"
HELP_CHOICE = "help"

logger = logging.getLogger(__name__)


class MenuState(enum.Enum):
    AWAITING_INPUT = "awaiting_input"
    SHOWING_HELP = "showing_help"
    RESOLVED = "resolved"
    EXITED = "exited"


def transition(choice: str, move_count: int) -> tuple[MenuState, int | None]:
    """Map one line of user input to the next menu state.

    Returns the 0-based move index alongside ``RESOLVED``, otherwise ``None``.
    Unrecognised input leaves the menu in ``AWAITING_INPUT``.
    """
    value = choice.strip()
    if value == EXIT_CHOICE:
        state, index = MenuState.EXITED, None
    elif value.lower() == HELP_CHOICE:
        state, index = MenuState.SHOWING_HELP, None
    elif value.isdecimal() and 1 <= int(value) <= move_count:
        state, index = MenuState.RESOLVED, int(value) - 1
    else:
        state, index = MenuState.AWAITING_INPUT, None

    logger.debug("menu input %r -> %s", value, state.name)
    return state, index


def render_menu(moves: Sequence[str]) -> str:
    lines = ["Available moves:"]
    lines.extend(f"{number} - {move}" for number, move in enumerate(moves, start=1))
    lines.append(f"{EXIT_CHOICE} - Exit")
    lines.append(f"{HELP_CHOICE} - Help")
    return "\n".join(lines)
