"""
storage.py — High-score persistence.

The only durable state in the game is one integer. It is kept as decimal
text in a single file. Anything that goes wrong while reading or writing it
degrades to "no best score yet" instead of interrupting play.

Classes:
    HighScoreStore        — file-backed store (the default)
    MemoryHighScoreStore  — in-process store for tests and --no-save runs
"""

import logging
from pathlib import Path

from .config import HIGHSCORE_FILE

logger = logging.getLogger(__name__)


class HighScoreStore:
    """Loads and stores the best score as decimal text under `path`."""

    def __init__(self, path: Path = HIGHSCORE_FILE):
        self.path = Path(path)

    def load(self) -> int:
        """Return the stored score, or 0 if it is missing or unusable."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No high score file at %s", self.path)
            return 0
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read high score from %s: %s", self.path, exc)
            return 0

        try:
            value = int(text.strip())
        except ValueError:
            logger.warning("Ignoring corrupt high score file %s", self.path)
            return 0
        if value < 0:
            logger.warning("Ignoring negative high score %d in %s", value, self.path)
            return 0
        return value

    def store(self, value: int) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(str(int(value)), encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not save high score to %s: %s", self.path, exc)


class MemoryHighScoreStore:
    """Keeps the best score for the lifetime of the process only."""

    def __init__(self, value: int = 0):
        self.value = value
        self.writes: int = 0

    def load(self) -> int:
        return self.value

    def store(self, value: int) -> None:
        self.value = value
        self.writes += 1
