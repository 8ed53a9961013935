"""Food placement logic."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from term_snake.grid import Grid
    from term_snake.snake import Position

logger = logging.getLogger(__name__)


class Food:
    """A single piece of food on the board.

    Placement samples uniformly from the explicit list of free cells, so a
    nearly full board costs one pass over the grid rather than an unbounded
    number of retries. Uses a seeded NumPy RNG for reproducible placement.
    """

    def __init__(self, rng: np.random.Generator | None = None) -> None:
        self.rng = rng if rng is not None else np.random.default_rng()
        self.position: Position | None = None

    def respawn(
        self, occupied: Iterable[Position], grid: Grid,
    ) -> Position | None:
        """Move the food to a random cell outside *occupied*.

        Returns the new position, or ``None`` when no free cell remains.
        """
        free = grid.free_cells(occupied)
        if not free:
            logger.warning("No free cells available for food placement.")
            self.position = None
            return None

        self.position = free[int(self.rng.integers(len(free)))]
        return self.position

    def to_dict(self) -> dict:
        """Serialize food state to a dictionary."""
        return {
            "position": list(self.position) if self.position is not None else None,
        }
