"""Transcript-diarization alignment.

The transcript carries no word timings, so words are spread over speaker
turns in proportion to each turn's spoken duration. Placement near turn
boundaries is an estimate.
"""

import math

from stt_diarize.alignment.segments import (
    DEFAULT_MAX_GAP,
    DEFAULT_MIN_DURATION,
    filter_short_segments,
    parse_speaker_segments,
)
from stt_diarize.alignment.turns import group_speaker_turns
from stt_diarize.config import AlignmentConfig
from stt_diarize.core import SpeakerLine, SpeakerTurn
from stt_diarize.utils import get_logger, timed

logger = get_logger(__name__)


def distribute_words(transcript: str, turns: list[SpeakerTurn]) -> list[SpeakerLine]:
    """Allocate transcript words to turns proportionally to turn duration.

    Every turn with segments claims at least one word while words remain.
    Words left over from rounding are appended to the last line.

    Args:
        transcript: Raw transcript text
        turns: Time-ordered speaker turns

    Returns:
        One line per turn that received words
    """
    words = transcript.split()
    total_duration = turns[-1].end_time if turns else 0.0
    words_per_second = len(words) / total_duration if total_duration > 0 else 1.0

    lines: list[SpeakerLine] = []
    cursor = 0

    for turn in turns:
        share = turn.duration * words_per_second
        # summed durations of huge timestamps can reach inf
        estimated = max(1, int(share)) if math.isfinite(share) else len(words)
        end = min(cursor + estimated, len(words))
        turn_words = words[cursor:end]
        cursor = end

        if turn_words:
            lines.append(SpeakerLine(label=turn.label, text=" ".join(turn_words)))

    remaining = words[cursor:]
    if remaining and lines:
        lines[-1].text += " " + " ".join(remaining)

    logger.debug(
        f"Distributed {len(words)} words over {len(turns)} turns "
        f"({words_per_second:.2f} words/s, {len(remaining)} left over)"
    )
    return lines


def format_combined_output(transcript: str, turns: list[SpeakerTurn]) -> str:
    """Render the combined transcript, or the raw transcript without turns."""
    if not turns:
        return transcript
    return "\n".join(str(line) for line in distribute_words(transcript, turns))


@timed
def combine_transcript_with_diarization(
    transcript: str,
    diarization: str,
    config: AlignmentConfig | None = None,
) -> str:
    """Combine a raw transcript with a diarization report.

    Args:
        transcript: Raw transcript text
        diarization: Diarization report text
        config: Filtering thresholds (defaults when None)

    Returns:
        ``"Speaker A: ..."`` lines, or the unchanged transcript when no
        usable speaker segments are found
    """
    min_duration = config.min_segment_duration if config else DEFAULT_MIN_DURATION
    max_gap = config.max_merge_gap if config else DEFAULT_MAX_GAP

    segments = parse_speaker_segments(diarization)
    segments = filter_short_segments(segments, min_duration=min_duration, max_gap=max_gap)
    logger.debug(f"After filtering short segments: {len(segments)} segments")

    if not segments:
        logger.warning("No speaker segments found, returning transcription only")
        return transcript

    turns = group_speaker_turns(segments)
    logger.info(f"Combining transcription with {len(segments)} segments in {len(turns)} turns")
    return format_combined_output(transcript, turns)
