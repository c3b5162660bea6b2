"""Text revealed one character at a time."""

from __future__ import annotations

import os
from pathlib import Path

INTERVAL_MS = 50
HOW_TO_PLAY_FILE = "text/how_to_play.txt"
HOW_TO_PLAY_LIMIT = 415
SYNOPSIS_FILE = "text/synopsis.txt"
SYNOPSIS_LIMIT = 421


class Typewriter:
    """Reveals the text of a file, one character per interval, up to a limit."""

    def __init__(
        self, path: str | os.PathLike[str], limit: int, interval_ms: int = INTERVAL_MS
    ) -> None:
        self.path = Path(path)
        self.limit = limit
        self.interval_ms = interval_ms
        self.text = ""
        self._source: str | None = None
        self._count = 0

    def update(self, elapsed_ms: int) -> bool:
        """Reveal the next character if the interval has passed.

        Returns True when a step was taken, so the caller restarts its timer.
        The file is read on the first call.
        """
        if self._source is None:
            self._source = self.path.read_text(encoding="utf-8")
        if elapsed_ms < self.interval_ms or self._count >= self.limit:
            return False
        if self._count < len(self._source):
            self.text += self._source[self._count]
        self._count += 1
        return True