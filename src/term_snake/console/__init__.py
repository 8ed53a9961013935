"""Terminal backends behind a single render/poll/sleep capability."""

from term_snake.console.base import Console, ConsoleError

__all__ = [
    "Console",
    "ConsoleError",
    "make_console",
]


def make_console(backend: str = "ansi") -> Console:
    """Build the console for *backend* (``"ansi"`` or ``"curses"``)."""
    if backend == "ansi":
        from term_snake.console.ansi import AnsiConsole

        return AnsiConsole()
    if backend == "curses":
        try:
            from term_snake.console.curses_console import CursesConsole
        except ImportError as exc:
            raise ConsoleError(
                "The curses backend is unavailable on this platform."
            ) from exc
        return CursesConsole()
    raise ValueError(f"Unknown console backend: {backend!r}")
