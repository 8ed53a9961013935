"""Persistence for the single best-score scalar."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_PATH = "highscore.txt"


class HighScoreStore:
    """Reads and writes the high score as a bare decimal integer file."""

    def __init__(self, path: str | Path = DEFAULT_PATH) -> None:
        self.path = Path(path)

    def load(self) -> int:
        """Return the stored high score, or 0 if none can be read."""
        try:
            raw = self.path.read_text().strip()
        except FileNotFoundError:
            return 0
        except OSError as exc:
            logger.warning("Could not read high score from %s: %s", self.path, exc)
            return 0

        try:
            value = int(raw)
        except ValueError:
            logger.warning("Ignoring malformed high score file %s.", self.path)
            return 0
        return max(value, 0)

    def save(self, score: int) -> None:
        """Write *score*, overwriting any previous value."""
        try:
            self.path.write_text(str(score))
        except OSError as exc:
            logger.warning("Could not write high score to %s: %s", self.path, exc)
            return
        logger.info("High score %d saved to %s", score, self.path)


class NullHighScoreStore(HighScoreStore):
    """A store that remembers nothing across runs."""

    def __init__(self) -> None:
        self.path = None

    def load(self) -> int:
        return 0

    def save(self, score: int) -> None:
        return None
