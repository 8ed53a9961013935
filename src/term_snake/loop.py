"""Fixed-interval turn loop tying the engine to a console."""

from __future__ import annotations

import logging

from term_snake.console.base import Console
from term_snake.engine import GameEngine
from term_snake.keys import Quit, Restart, Turn, command_for_key
from term_snake.render import BOX, GlyphStyle, render_frame

logger = logging.getLogger(__name__)


class GameLoop:
    """Single-threaded render → poll → update → sleep loop.

    While the game is running each tick sleeps ``tick_ms``; after game over
    the loop polls every ``idle_ms`` waiting for restart or quit.
    """

    def __init__(
        self,
        engine: GameEngine,
        console: Console,
        style: GlyphStyle = BOX,
        tick_ms: int = 250,
        idle_ms: int = 10,
    ) -> None:
        if tick_ms <= 0 or idle_ms <= 0:
            raise ValueError("tick_ms and idle_ms must be positive.")
        self.engine = engine
        self.console = console
        self.style = style
        self.tick_ms = tick_ms
        self.idle_ms = idle_ms
        self._rendered_game_over = False

    def tick(self) -> bool:
        """Run one loop iteration. Returns ``False`` once the player quits."""
        game_over = self.engine.game_over
        # The game-over screen is static; draw it once per game.
        if not (game_over and self._rendered_game_over):
            self.console.render(render_frame(self.engine, self.style))
            self._rendered_game_over = game_over

        command = command_for_key(self.console.poll_key())
        if isinstance(command, Quit):
            logger.info("Quit at tick %d with score %d.", self.engine.tick, self.engine.score)
            return False
        if isinstance(command, Restart) and game_over:
            self.engine.reset()
            self._rendered_game_over = False
            return True
        if isinstance(command, Turn):
            self.engine.turn(command.direction)

        if game_over:
            self.console.sleep(self.idle_ms)
        else:
            self.engine.step()
            self.console.sleep(self.tick_ms)
        return True

    def run(self) -> int:
        """Loop until the player quits; returns the process exit code."""
        while self.tick():
            pass
        return 0
