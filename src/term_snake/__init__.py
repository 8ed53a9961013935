"""Term Snake: a terminal snake game."""

from term_snake.config import GameConfig
from term_snake.engine import GameEngine, GameStatus
from term_snake.food import Food
from term_snake.grid import CellType, Grid
from term_snake.highscore import HighScoreStore, NullHighScoreStore
from term_snake.loop import GameLoop
from term_snake.snake import Direction, Growth, Position, Snake

__all__ = [
    "CellType",
    "Direction",
    "Food",
    "GameConfig",
    "GameEngine",
    "GameLoop",
    "GameStatus",
    "Grid",
    "Growth",
    "HighScoreStore",
    "NullHighScoreStore",
    "Position",
    "Snake",
]
