"""Game configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, replace
from pathlib import Path

from term_snake.grid import MIN_SIZE
from term_snake.highscore import DEFAULT_PATH

logger = logging.getLogger(__name__)

STYLES = ("box", "ascii", "emoji")
BACKENDS = ("ansi", "curses")


@dataclass(frozen=True)
class GameConfig:
    """Settings for a single play session.

    Supports JSON serialization so a setup can be saved and reused.
    """

    # Board
    grid_width: int = 20
    grid_height: int = 20
    initial_length: int = 3

    # Scoring
    food_reward: int = 10

    # Loop
    tick_ms: int = 250
    idle_ms: int = 10

    # Presentation
    style: str = "box"
    backend: str = "ansi"

    # Persistence; ``None`` disables the high score file.
    high_score_path: str | None = DEFAULT_PATH

    seed: int | None = None

    def __post_init__(self) -> None:
        if self.grid_width < MIN_SIZE or self.grid_height < MIN_SIZE:
            raise ValueError(
                f"grid_width and grid_height must each be at least {MIN_SIZE}."
            )
        if self.initial_length < 1:
            raise ValueError("initial_length must be at least 1.")
        if self.initial_length > self.grid_width // 2 + 1:
            raise ValueError(
                "initial_length does not fit the configured grid; "
                "increase grid_width or reduce initial_length."
            )
        if self.food_reward < 0:
            raise ValueError("food_reward must be >= 0.")
        if self.tick_ms <= 0 or self.idle_ms <= 0:
            raise ValueError("tick_ms and idle_ms must be positive.")
        if self.style not in STYLES:
            raise ValueError(f"style must be one of {', '.join(STYLES)}.")
        if self.backend not in BACKENDS:
            raise ValueError(f"backend must be one of {', '.join(BACKENDS)}.")

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def with_overrides(self, **overrides) -> GameConfig:
        """Return a copy with every non-``None`` override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
