"""Persistent storage of the best score reached."""

from __future__ import annotations

import re
from pathlib import Path

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class HighScoreStore:
    """Reads and writes the high score as a plain integer in a text file."""

    def __init__(self, path: str | Path = "highscore.txt") -> None:
        self.path = Path(path)

    def load(self) -> int:
        """Return the stored high score, or 0 if none can be read."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            return 0
        match = _LEADING_INT.match(text)
        return int(match.group(1)) if match else 0

    def save(self, value: int) -> None:
        """Write the high score; a file that cannot be written is ignored."""
        try:
            self.path.write_text(str(int(value)), encoding="utf-8")
        except OSError:
            pass