"""ncurses-backed console."""

from __future__ import annotations

import curses
import logging

from term_snake.console.base import Console, ConsoleError
from term_snake.keys import KEY_DOWN, KEY_LEFT, KEY_RIGHT, KEY_UP

logger = logging.getLogger(__name__)

_CURSES_KEYS: dict[int, str] = {
    curses.KEY_UP: KEY_UP,
    curses.KEY_DOWN: KEY_DOWN,
    curses.KEY_LEFT: KEY_LEFT,
    curses.KEY_RIGHT: KEY_RIGHT,
}


def normalise_key(code: int) -> str | None:
    """Map a ``getch`` code to a normalised key name."""
    if code < 0:
        return None
    if code in _CURSES_KEYS:
        return _CURSES_KEYS[code]
    if code < 256:
        return chr(code)
    return None


class CursesConsole(Console):
    """Console using curses for drawing and ``nodelay`` key polling."""

    def __init__(self) -> None:
        self.screen: curses.window | None = None

    def open(self) -> None:
        try:
            screen = curses.initscr()
        except curses.error as exc:
            raise ConsoleError(f"Could not initialise curses: {exc}") from exc
        try:
            curses.noecho()
            curses.cbreak()
            screen.keypad(True)
            screen.nodelay(True)
        except curses.error as exc:
            curses.endwin()
            raise ConsoleError(f"Could not configure curses: {exc}") from exc
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal cannot hide the cursor.")
        self.screen = screen

    def close(self) -> None:
        if self.screen is None:
            return
        self.screen.nodelay(False)
        self.screen.keypad(False)
        curses.nocbreak()
        curses.echo()
        curses.endwin()
        self.screen = None

    def render(self, frame: str) -> None:
        screen = self._require_screen()
        max_y, max_x = screen.getmaxyx()
        screen.erase()
        for row, line in enumerate(frame.split("\n")[:max_y]):
            try:
                screen.addnstr(row, 0, line, max_x - 1)
            except curses.error:
                # Writing into the bottom-right cell moves the cursor off-screen.
                pass
        screen.refresh()

    def poll_key(self) -> str | None:
        return normalise_key(self._require_screen().getch())

    def size(self) -> tuple[int, int]:
        max_y, max_x = self._require_screen().getmaxyx()
        return max_x, max_y

    def _require_screen(self) -> curses.window:
        if self.screen is None:
            raise ConsoleError("Curses console is not open.")
        return self.screen
