"""Current score and the best score kept on disk between runs."""

from __future__ import annotations

import os
import re
from pathlib import Path

HIGH_SCORE_PATH = "highscore.dat"

_U32_MAX = 2**32 - 1
_NUMBER = re.compile(r"\+?[0-9]+")


def _read_high_score(path: Path) -> int:
    try:
        text = path.read_text()
    except (OSError, UnicodeDecodeError):
        return 0
    if not _NUMBER.fullmatch(text):
        return 0
    value = int(text)
    return value if value <= _U32_MAX else 0


class HighScore:
    """The running score of a game and the stored high score."""

    def __init__(self, path: str | os.PathLike[str] = HIGH_SCORE_PATH) -> None:
        self.path = Path(path)
        self._score = 0
        self._high_score = _read_high_score(self.path)
        self._toppled = False

    def save(self) -> None:
        """Store the high score if the current game set it; errors are ignored."""
        if self._score == self._high_score:
            try:
                self.path.write_text(str(self._high_score))
            except OSError:
                pass

    def add(self) -> None:
        """Count one more point, raising the high score when passed."""
        self._score += 1
        if self._high_score < self._score:
            self._toppled = True
            self._high_score = self._score

    def clear(self) -> None:
        """Reset the current score for a new game."""
        self._score = 0
        self._toppled = False

    @property
    def score(self) -> int:
        return self._score

    @property
    def high_score(self) -> int:
        return self._high_score

    @property
    def is_new_high(self) -> bool:
        return self._toppled