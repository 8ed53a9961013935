"""Bounded playing field for the snake game."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from typing import TYPE_CHECKING

import numpy as np

from term_snake.snake import Position

if TYPE_CHECKING:
    from term_snake.snake import Snake

MIN_SIZE = 4


class CellType(enum.IntEnum):
    """Integer codes stored in a rendered board array."""

    EMPTY = 0
    BODY = 1
    HEAD = 2
    FOOD = 3


class Grid:
    """Fixed-size board with NumPy-backed cell queries.

    Arrays are indexed ``[y, x]`` so that rows map to terminal lines.
    """

    def __init__(self, width: int = 20, height: int = 20) -> None:
        if width < MIN_SIZE or height < MIN_SIZE:
            raise ValueError(f"Grid dimensions must be at least {MIN_SIZE}×{MIN_SIZE}.")
        self.width = width
        self.height = height

    @property
    def area(self) -> int:
        return self.width * self.height

    def in_bounds(self, position: Position) -> bool:
        """Check whether a position lies within the grid."""
        x, y = position
        return 0 <= x < self.width and 0 <= y < self.height

    def center(self) -> Position:
        return Position(self.width // 2, self.height // 2)

    def free_cells(self, occupied: Iterable[Position]) -> list[Position]:
        """Return every in-bounds cell not listed in *occupied*."""
        free = np.ones((self.height, self.width), dtype=bool)
        for x, y in occupied:
            if 0 <= x < self.width and 0 <= y < self.height:
                free[y, x] = False
        ys, xs = np.nonzero(free)
        return [
            Position(x, y)
            for x, y in zip(xs.tolist(), ys.tolist(), strict=True)
        ]

    def to_array(self, snake: Snake, food: Position | None) -> np.ndarray:
        """Paint the snake and food onto a fresh ``(height, width)`` array."""
        cells = np.zeros((self.height, self.width), dtype=np.int8)
        if food is not None and self.in_bounds(food):
            cells[food.y, food.x] = CellType.FOOD
        for x, y in snake.body:
            if 0 <= x < self.width and 0 <= y < self.height:
                cells[y, x] = CellType.BODY
        if self.in_bounds(snake.head):
            cells[snake.head.y, snake.head.x] = CellType.HEAD
        return cells

    def to_dict(self) -> dict:
        """Serialize grid dimensions to a dictionary."""
        return {"width": self.width, "height": self.height}
