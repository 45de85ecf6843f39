"""Keyboard token mapping and direction buffering."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

from solo_snake.snake import Direction

if TYPE_CHECKING:
    from solo_snake.state import GameState


class Command(enum.Enum):
    """Non-directional actions a key can trigger."""

    START = "start"
    PAUSE = "pause"


_ARROW_KEYS: dict[str, Direction] = {
    "ArrowUp": Direction.UP,
    "ArrowDown": Direction.DOWN,
    "ArrowLeft": Direction.LEFT,
    "ArrowRight": Direction.RIGHT,
}

# Matched case-insensitively.
_LETTER_KEYS: dict[str, Direction] = {
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}

_COMMAND_KEYS: dict[str, Command] = {
    " ": Command.START,
    "p": Command.PAUSE,
    "P": Command.PAUSE,
    "Escape": Command.PAUSE,
}


def map_key(token: str) -> Direction | None:
    """Translate a key token into a direction, or ``None`` if unrecognized."""
    if token in _ARROW_KEYS:
        return _ARROW_KEYS[token]
    if len(token) == 1:
        return _LETTER_KEYS.get(token.lower())
    return None


def map_command(token: str) -> Command | None:
    return _COMMAND_KEYS.get(token)


def buffer_direction(state: GameState, direction: Direction) -> bool:
    """Store *direction* as the pending move unless it reverses the snake.

    The reversal check uses the committed direction, not the pending one,
    so two inputs between ticks cannot chain into a 180° turn. Returns
    whether the pending direction was updated.
    """
    if direction.is_opposite(state.direction):
        return False
    state.pending_direction = direction
    return True
