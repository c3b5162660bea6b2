"""Best score kept in a small file."""

from __future__ import annotations

import os
from pathlib import Path

from .textutil import int_to_str, parse_int

BEST_SCORE_FILE = "score"
_READ_LIMIT = 9


def update_best(path: str | os.PathLike[str], score: int) -> str:
    """Record ``score`` if it beats the stored best; return the best to display.

    The file is created when missing. When the score is not better, the stored
    text is returned as it was read.
    """
    path = Path(path)
    path.touch(exist_ok=True)
    with path.open("r", encoding="utf-8", errors="replace", newline="") as handle:
        stored = handle.read(_READ_LIMIT)
    if parse_int(stored) < score:
        best = int_to_str(score)
        path.write_text(best, encoding="utf-8")
        return best
    return stored