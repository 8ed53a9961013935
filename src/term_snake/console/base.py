"""Abstract terminal capability used by the game loop."""

from __future__ import annotations

import abc
import time


class ConsoleError(RuntimeError):
    """A terminal precondition is unmet or the console API is unavailable."""


class Console(abc.ABC):
    """Render frames, poll keys without blocking, and sleep.

    Use as a context manager: terminal modes are acquired on entry and
    restored on exit, even when the body raises.
    """

    def __enter__(self) -> Console:
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def open(self) -> None:
        """Switch the terminal into game mode."""

    def close(self) -> None:
        """Restore the terminal to its original mode."""

    @abc.abstractmethod
    def render(self, frame: str) -> None:
        """Replace the visible screen contents with *frame*."""

    @abc.abstractmethod
    def poll_key(self) -> str | None:
        """Return one pending key press, or ``None`` if none is waiting."""

    @abc.abstractmethod
    def size(self) -> tuple[int, int]:
        """Return the terminal size as ``(columns, lines)``."""

    def sleep(self, ms: int) -> None:
        time.sleep(ms / 1000)

    def require_size(self, columns: int, lines: int) -> None:
        """Raise :class:`ConsoleError` if the terminal is smaller than asked."""
        have_cols, have_lines = self.size()
        if have_cols < columns or have_lines < lines:
            raise ConsoleError(
                f"Terminal too small: need {columns}x{lines}, "
                f"have {have_cols}x{have_lines}."
            )
