"""Conversion between seconds and the report's MM:SS.mmm timestamps."""

import re

_DIGITS = re.compile(r"\d+", re.ASCII)


def _parse_field(text: str) -> int | None:
    if not _DIGITS.fullmatch(text):
        return None
    try:
        return int(text)
    except ValueError:
        # past the interpreter's digit limit for int()
        return None


def parse_timestamp(text: str) -> float | None:
    """Parse a ``MM:SS.mmm`` timestamp into seconds.

    Minutes are unbounded. The millisecond field is read as an integer count
    of milliseconds, so ``"00:01.5"`` is 1.005 seconds.

    Returns:
        Seconds, or None when the string is not in the expected form
    """
    parts = text.split(":")
    if len(parts) != 2:
        return None

    minutes = _parse_field(parts[0])
    if minutes is None:
        return None

    second_parts = parts[1].split(".")
    if len(second_parts) != 2:
        return None

    seconds = _parse_field(second_parts[0])
    milliseconds = _parse_field(second_parts[1])
    if seconds is None or milliseconds is None:
        return None

    try:
        return float(minutes * 60 + seconds) + milliseconds / 1000.0
    except OverflowError:
        return None


def format_timestamp(seconds: float) -> str:
    """Format seconds as ``MM:SS.mmm`` (minutes grow past 99 when needed)."""
    total_ms = max(0, int(round(seconds * 1000)))
    minutes, remainder = divmod(total_ms, 60_000)
    secs, millis = divmod(remainder, 1000)
    return f"{minutes:02d}:{secs:02d}.{millis:03d}"
