"""Diarization report parsing and short-segment filtering."""

import re
from dataclasses import replace
from operator import attrgetter

from stt_diarize.alignment.timestamps import parse_timestamp
from stt_diarize.core import SpeakerSegment
from stt_diarize.utils import get_logger

logger = get_logger(__name__)

DEFAULT_MIN_DURATION = 1.5  # seconds
DEFAULT_MAX_GAP = 2.0  # seconds

# Tokens marking header and divider lines of the report
_HEADER_TOKENS = ("SPEAKER", "=")

_SPEAKER_NUMBER = re.compile(r"[+-]?\d+", re.ASCII)


def _is_candidate(line: str) -> bool:
    if ":" not in line or "-" not in line:
        return False
    return not any(token in line for token in _HEADER_TOKENS)


def parse_time_range(time_part: str) -> tuple[float, float] | None:
    """Parse ``"<start> - <end> (6.2s) [Quality: 47.5%]"`` into seconds.

    Anything after the end timestamp is ignored.
    """
    pieces = time_part.split(" - ")
    if len(pieces) != 2:
        return None

    start_text = pieces[0].strip()
    end_tokens = pieces[1].split()
    if not end_tokens:
        return None

    start = parse_timestamp(start_text)
    end = parse_timestamp(end_tokens[0])
    if start is None or end is None:
        return None
    return start, end


def parse_segment_line(line: str) -> SpeakerSegment | None:
    """Parse one report line such as ``"1: 00:00.000 - 00:06.243 (6.2s)"``.

    Returns:
        The segment, or None for header lines and malformed lines
    """
    if not _is_candidate(line):
        return None

    # Only the first colon separates the speaker; timestamps carry more
    speaker_part, _, time_part = line.partition(":")
    speaker_part = speaker_part.strip()
    time_part = time_part.strip()

    if not _SPEAKER_NUMBER.fullmatch(speaker_part):
        logger.debug(f"Skipping line, bad speaker number: '{speaker_part}'")
        return None
    try:
        speaker_id = f"Speaker {int(speaker_part)}"
    except ValueError:
        logger.debug(f"Skipping line, bad speaker number: '{speaker_part[:20]}...'")
        return None

    times = parse_time_range(time_part)
    if times is None:
        logger.debug(f"Skipping line, bad timestamps: '{time_part}'")
        return None

    start, end = times
    return SpeakerSegment(speaker_id=speaker_id, start_time=start, end_time=end)


def parse_speaker_segments(report: str) -> list[SpeakerSegment]:
    """Extract speaker segments from a diarization report.

    Parsing is best-effort: malformed lines are skipped. The result is sorted
    by start time, ties keeping report order.
    """
    lines = report.splitlines()
    logger.debug(f"Parsing diarization report with {len(lines)} lines")

    parsed = (parse_segment_line(line) for line in lines)
    segments = sorted(
        (seg for seg in parsed if seg is not None),
        key=attrgetter("start_time"),
    )

    logger.debug(f"Parsed {len(segments)} speaker segments")
    return segments


def filter_short_segments(
    segments: list[SpeakerSegment],
    min_duration: float = DEFAULT_MIN_DURATION,
    max_gap: float = DEFAULT_MAX_GAP,
) -> list[SpeakerSegment]:
    """Drop or absorb segments shorter than ``min_duration``.

    A short segment extends the most recently kept segment when both share a
    speaker and the gap between them is under ``max_gap``; otherwise it is
    dropped. Input must already be sorted by start time.

    Args:
        segments: Time-ordered segments
        min_duration: Segments at least this long are always kept
        max_gap: Largest gap a short segment may bridge to merge

    Returns:
        Filtered segments, still time-ordered
    """
    filtered: list[SpeakerSegment] = []

    for segment in segments:
        duration = segment.duration

        if duration >= min_duration:
            filtered.append(segment)
            continue

        last = filtered[-1] if filtered else None
        if (
            last is not None
            and last.speaker_id == segment.speaker_id
            and segment.start_time - last.end_time < max_gap
        ):
            filtered[-1] = replace(last, end_time=segment.end_time)
            logger.debug(f"Merged short segment ({duration:.1f}s) with previous segment")
        else:
            logger.debug(f"Skipping short segment ({duration:.1f}s) from {segment.speaker_id}")

    return filtered
