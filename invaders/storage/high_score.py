"""
High Score Persistence
======================

Stores a single named scalar in a small JSON file. Reads and writes are
best-effort: a missing or broken file reads as 0 and a failed write is
logged and dropped, never raised into the frame loop.
"""

import json
import os
from typing import Any, Dict

from ..utils.logger import get_logger


logger = get_logger(__name__)


class HighScoreStore:
    """JSON-file backed high score."""

    def __init__(self, path: str, key: str = 'spaceInvadersHighScore'):
        """
        Args:
            path: JSON file location (parent dirs are created on save)
            key: Name of the value inside the file
        """
        self.path = path
        self.key = key

    def _read(self) -> Dict[str, Any]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read high score file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring malformed high score file {self.path}")
            return {}
        return data

    def load(self) -> int:
        """Return the stored high score, or 0 if there is none."""
        value = self._read().get(self.key, 0)
        try:
            score = int(value)
        except (TypeError, ValueError, OverflowError):
            logger.warning(f"Ignoring non-numeric high score {value!r}")
            return 0
        return max(0, score)

    def save(self, score: int) -> bool:
        """
        Write the high score. Other keys already in the file are kept.

        Returns:
            True if the value was written
        """
        data = self._read()
        data[self.key] = int(score)
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            logger.warning(f"High score {score} not saved to {self.path}: {e}")
            return False
        logger.debug(f"High score {score} saved to {self.path}")
        return True
