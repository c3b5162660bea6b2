"""Small text helpers: number formatting, lenient number parsing, line reading."""

from __future__ import annotations

import re
from collections.abc import Iterator
from typing import IO, AnyStr

READ_SIZE = 5
_MAX_DIGITS = 10
_DIGITS = re.compile(r"[0-9]+")


def int_to_str(nb: int) -> str:
    """Return the decimal representation of ``nb`` (``"0"`` for zero)."""
    return str(int(nb))


def parse_int(text: str) -> int:
    """Extract the first run of digits from ``text`` as an integer.

    A ``-`` right before the digits makes the result negative. Runs longer
    than ten digits, or ten-digit runs starting with 2 or more, give 0, as
    does text holding no digit at all.
    """
    match = _DIGITS.search(text)
    if match is None:
        return 0
    digits = match.group()
    if len(digits) > _MAX_DIGITS or (len(digits) == _MAX_DIGITS and digits[0] >= "2"):
        return 0
    start = match.start()
    sign = -1 if start > 0 and text[start - 1] == "-" else 1
    return sign * int(digits)


def iter_lines(stream: IO[AnyStr], chunk_size: int = READ_SIZE) -> Iterator[AnyStr]:
    """Yield the lines of ``stream`` without their newline, reading in chunks.

    Works on text and binary streams alike. A trailing newline at the end of
    the stream does not produce an extra empty line.
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")
    pending = None
    newline = None
    while True:
        chunk = stream.read(chunk_size)
        if pending is None:
            pending = chunk[:0]
            newline = b"\n" if isinstance(chunk, bytes) else "\n"
        if not chunk:
            break
        pending += chunk
        *lines, pending = pending.split(newline)
        yield from lines
    if pending:
        yield pending