"""Step-based game engine composing grid, snake, and food logic."""

from __future__ import annotations

import enum
import logging

import numpy as np

from term_snake.food import Food
from term_snake.grid import Grid
from term_snake.highscore import HighScoreStore, NullHighScoreStore
from term_snake.snake import Direction, Growth, Snake

logger = logging.getLogger(__name__)

FOOD_REWARD = 10


class GameStatus(str, enum.Enum):
    """Lifecycle states for a game."""

    RUNNING = "running"
    GAME_OVER = "game_over"


class GameEngine:
    """Single-snake, step-based game engine.

    The engine owns the grid, snake, and food. Each call to :meth:`step`
    advances the game by one tick and returns the updated state dictionary.
    Collisions never raise; they move the game to ``GAME_OVER``.
    """

    def __init__(
        self,
        width: int = 20,
        height: int = 20,
        initial_length: int = 3,
        food_reward: int = FOOD_REWARD,
        seed: int | None = None,
        high_scores: HighScoreStore | None = None,
    ) -> None:
        self.grid = Grid(width=width, height=height)
        center = self.grid.center()
        if initial_length < 1 or center.x - (initial_length - 1) < 0:
            raise ValueError(
                "initial_length does not fit the grid; "
                "increase width or reduce initial_length."
            )
        self.initial_length = initial_length
        self.food_reward = food_reward
        self.rng = np.random.default_rng(seed)
        self.high_scores = high_scores if high_scores is not None else NullHighScoreStore()
        self.high_score = self.high_scores.load()

        self.snake: Snake
        self.food: Food
        self.score = 0
        self.tick = 0
        self.status = GameStatus.RUNNING
        self._pending_direction: Direction | None = None
        self._init_entities()

    def _init_entities(self) -> None:
        self.snake = Snake(
            self.grid.center(), Direction.RIGHT, length=self.initial_length,
        )
        self.food = Food(rng=self.rng)
        self.food.respawn(self.snake.body, self.grid)
        self.score = 0
        self.tick = 0
        self.status = GameStatus.RUNNING
        self._pending_direction = None
        logger.info(
            "New game on %dx%d grid, high score %d.",
            self.grid.width, self.grid.height, self.high_score,
        )

    @property
    def game_over(self) -> bool:
        return self.status == GameStatus.GAME_OVER

    @property
    def direction(self) -> Direction:
        return self.snake.direction

    def turn(self, direction: Direction) -> bool:
        """Buffer at most one valid direction change for the next step.

        Returns whether the change was accepted.
        """
        if self.game_over or self._pending_direction is not None:
            return False
        if direction == self.snake.direction.opposite:
            return False
        self._pending_direction = direction
        return True

    def step(self) -> dict:
        """Advance the game by one tick.

        Returns the full game state as a serializable dict.
        """
        if self.game_over:
            return self.get_state()

        if self._pending_direction is not None:
            self.snake.turn(self._pending_direction)
            self._pending_direction = None

        next_head = self.snake.next_head()

        # --- boundary check ---
        if not self.grid.in_bounds(next_head):
            self._end_game("wall")
            return self.get_state()

        # --- self-collision check (look-ahead) ---
        # The tail leaves its cell this tick unless the snake is about to grow.
        will_grow = next_head == self.food.position
        body_set = set(self.snake.body)
        if not will_grow:
            body_set.discard(self.snake.tail)
        if next_head in body_set:
            self._end_game("self")
            return self.get_state()

        # --- move ---
        growth = self.snake.advance(grow=will_grow)
        if growth is Growth.GREW:
            self.score += self.food_reward
            self.food.respawn(self.snake.body, self.grid)
            logger.debug(
                "Food eaten at %s, score %d, length %d.",
                next_head, self.score, len(self.snake),
            )

        self.tick += 1
        return self.get_state()

    def reset(self) -> None:
        """Start a fresh game, keeping the high score."""
        self._init_entities()

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "tick": self.tick,
            "score": self.score,
            "high_score": self.high_score,
            "status": self.status.value,
            "game_over": self.game_over,
            "grid": self.grid.to_dict(),
            "snake": self.snake.to_dict(),
            "food": self.food.to_dict(),
        }

    def _end_game(self, cause: str) -> None:
        """Mark the snake as dead, freeze the score, and record a high score."""
        self.snake.alive = False
        self.status = GameStatus.GAME_OVER
        self._pending_direction = None
        self.tick += 1
        logger.info(
            "Snake died (%s) at tick %d with score %d.", cause, self.tick, self.score,
        )
        if self.score > self.high_score:
            self.high_score = self.score
            self.high_scores.save(self.score)
            logger.info("New high score: %d", self.score)
