"""Mapping of polled key presses to game commands."""

from __future__ import annotations

from dataclasses import dataclass

from term_snake.snake import Direction

KEY_UP = "KEY_UP"
KEY_DOWN = "KEY_DOWN"
KEY_LEFT = "KEY_LEFT"
KEY_RIGHT = "KEY_RIGHT"
KEY_ESCAPE = "\x1b"


@dataclass(frozen=True)
class Turn:
    direction: Direction


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Restart:
    pass


Command = Turn | Quit | Restart

# Arrow keys and WASD, matched case-insensitively for letters.
_TURN_KEYS: dict[str, Direction] = {
    KEY_UP: Direction.UP,
    KEY_DOWN: Direction.DOWN,
    KEY_LEFT: Direction.LEFT,
    KEY_RIGHT: Direction.RIGHT,
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}

_QUIT_KEYS = frozenset({"q", "x", KEY_ESCAPE})
_RESTART_KEYS = frozenset({"r"})


def command_for_key(key: str | None) -> Command | None:
    """Translate a normalised key into a command, or ``None`` if unbound."""
    if not key:
        return None
    if key in _TURN_KEYS:
        return Turn(_TURN_KEYS[key])

    lowered = key.lower() if len(key) == 1 else key
    if lowered in _TURN_KEYS:
        return Turn(_TURN_KEYS[lowered])
    if lowered in _QUIT_KEYS:
        return Quit()
    if lowered in _RESTART_KEYS:
        return Restart()
    return None
