"""Snake representation and movement logic."""

from __future__ import annotations

import enum
from collections import deque
from typing import NamedTuple


class Position(NamedTuple):
    """A grid cell; ``x`` grows to the right, ``y`` grows downward."""

    x: int
    y: int


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) unit vectors."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Growth(enum.Enum):
    """Outcome of a single :meth:`Snake.advance` call."""

    GREW = "grew"
    DID_NOT_GROW = "did_not_grow"


class Snake:
    """A snake represented as an ordered deque of body positions.

    The head is ``body[0]``; the tail is ``body[-1]``.
    """

    def __init__(
        self,
        start: Position,
        direction: Direction = Direction.RIGHT,
        length: int = 3,
    ) -> None:
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        dx, dy = direction.value
        x, y = start
        self.body: deque[Position] = deque(
            Position(x - dx * i, y - dy * i) for i in range(length)
        )
        self.direction = direction
        self.alive = True

    def __len__(self) -> int:
        return len(self.body)

    @property
    def head(self) -> Position:
        """Return the head position."""
        return self.body[0]

    @property
    def tail(self) -> Position:
        """Return the tail position."""
        return self.body[-1]

    def turn(self, new_direction: Direction) -> bool:
        """Change direction, ignoring 180° reversals.

        Returns whether the direction was accepted.
        """
        if _OPPOSITES[new_direction] == self.direction:
            return False
        self.direction = new_direction
        return True

    def next_head(self) -> Position:
        """Compute the next head position without moving."""
        dx, dy = self.direction.value
        x, y = self.head
        return Position(x + dx, y + dy)

    def advance(self, grow: bool = False) -> Growth:
        """Move the snake one step forward, keeping the tail if *grow*."""
        self.body.appendleft(self.next_head())
        if grow:
            return Growth.GREW
        self.body.pop()
        return Growth.DID_NOT_GROW

    def contains(self, position: Position) -> bool:
        """Check whether any segment occupies *position*."""
        return position in self.body

    def head_collides_with_body(self) -> bool:
        """Check whether the head overlaps any other body segment."""
        head = self.head
        return any(seg == head for seg in list(self.body)[1:])

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [list(seg) for seg in self.body],
            "direction": self.direction.name.lower(),
            "alive": self.alive,
        }
