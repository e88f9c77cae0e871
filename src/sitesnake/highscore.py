from __future__ import annotations

import json
import logging
from pathlib import Path

from . import config

logger = logging.getLogger(__name__)


class HighScoreStore:
    """One persisted integer, kept as decimal text under a fixed key.

    The slot lives in a small JSON object on disk. Every failure degrades to
    a default and a warning in the log; nothing here raises.
    """

    def __init__(self, path: Path = config.HIGHSCORE_FILE, key: str = config.HIGHSCORE_KEY):
        self.path = Path(path)
        self.key = key

    def load(self) -> int:
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.warning("No high score saved at %s, starting from 0", self.path)
            return 0
        except (OSError, ValueError) as e:
            logger.warning("Could not load high score from %s: %s", self.path, e)
            return 0

        raw = data.get(self.key) if isinstance(data, dict) else None
        try:
            if not isinstance(raw, str):
                raise ValueError(f"expected decimal text, got {type(raw).__name__}")
            score = int(raw)
        except ValueError as e:
            logger.warning("Ignoring unparsable high score %r in %s: %s", raw, self.path, e)
            return 0
        if score < 0:
            logger.warning("Ignoring negative high score %d in %s", score, self.path)
            return 0
        return score

    def save(self, score: int) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump({self.key: str(score)}, f)
        except OSError as e:
            logger.warning("Could not save high score to %s: %s", self.path, e)
