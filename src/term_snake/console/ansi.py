"""ANSI escape-code console for POSIX terminals and Windows consoles."""

from __future__ import annotations

import logging
import os
import shutil
import sys
from typing import TextIO

from term_snake.console.base import Console, ConsoleError
from term_snake.keys import KEY_DOWN, KEY_ESCAPE, KEY_LEFT, KEY_RIGHT, KEY_UP

if os.name == "nt":
    import msvcrt
else:
    import select
    import termios
    import tty

logger = logging.getLogger(__name__)

CURSOR_HOME = "\x1b[H"
CLEAR_SCREEN = "\x1b[2J\x1b[H"
CLEAR_LINE_END = "\x1b[K"
CLEAR_SCREEN_END = "\x1b[J"
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"

# CSI (``ESC [``) and SS3 (``ESC O``) arrow key finals.
_ARROW_FINALS: dict[str, str] = {
    "A": KEY_UP,
    "B": KEY_DOWN,
    "C": KEY_RIGHT,
    "D": KEY_LEFT,
}

# Second byte after a 0x00/0xE0 prefix from ``msvcrt``.
_WINDOWS_ARROWS: dict[str, str] = {
    "H": KEY_UP,
    "P": KEY_DOWN,
    "K": KEY_LEFT,
    "M": KEY_RIGHT,
}


def decode_escape(sequence: str) -> str:
    """Normalise an escape sequence read from a POSIX terminal.

    Arrow keys become ``KEY_*`` names; a lone or unknown sequence is
    reported as Escape.
    """
    if len(sequence) == 3 and sequence[1] in "[O":
        return _ARROW_FINALS.get(sequence[2], KEY_ESCAPE)
    return KEY_ESCAPE


class AnsiConsole(Console):
    """Console driven by ANSI escapes with non-blocking keyboard polling."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self._fd: int | None = None
        self._saved_mode: list | None = None

    def open(self) -> None:
        if os.name == "nt":
            # Turns on escape-sequence processing in newer Windows consoles.
            os.system("")
        else:
            try:
                fd = self.stdin.fileno()
            except (AttributeError, OSError, ValueError) as exc:
                raise ConsoleError("Standard input has no file descriptor.") from exc
            if not os.isatty(fd):
                raise ConsoleError("Standard input is not a terminal.")
            self._fd = fd
            self._saved_mode = termios.tcgetattr(fd)
            tty.setcbreak(fd)
        self._write(HIDE_CURSOR + CLEAR_SCREEN)
        logger.debug("ANSI console opened.")

    def close(self) -> None:
        if self._saved_mode is not None and self._fd is not None:
            termios.tcsetattr(self._fd, termios.TCSAFLUSH, self._saved_mode)
            self._saved_mode = None
        self._write(SHOW_CURSOR + CLEAR_SCREEN)
        logger.debug("ANSI console closed.")

    def render(self, frame: str) -> None:
        body = (CLEAR_LINE_END + "\n").join(frame.split("\n"))
        self._write(CURSOR_HOME + body + CLEAR_LINE_END + CLEAR_SCREEN_END)

    def poll_key(self) -> str | None:
        if os.name == "nt":
            return self._poll_windows()
        return self._poll_posix()

    def size(self) -> tuple[int, int]:
        cols, lines = shutil.get_terminal_size()
        return cols, lines

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def _ready(self) -> bool:
        readable, _, _ = select.select([self._fd], [], [], 0)
        return bool(readable)

    def _read_char(self) -> str:
        return os.read(self._fd, 1).decode("utf-8", errors="ignore")

    def _poll_posix(self) -> str | None:
        if self._fd is None or not self._ready():
            return None
        ch = self._read_char()
        if ch != KEY_ESCAPE:
            return ch or None

        sequence = ch
        while len(sequence) < 3 and self._ready():
            sequence += self._read_char()
        return decode_escape(sequence)

    def _poll_windows(self) -> str | None:
        if not msvcrt.kbhit():
            return None
        ch = msvcrt.getwch()
        if ch in ("\x00", "\xe0"):
            return _WINDOWS_ARROWS.get(msvcrt.getwch())
        return ch
