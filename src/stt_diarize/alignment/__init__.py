"""Transcript-diarization alignment module."""

from stt_diarize.alignment.timestamps import parse_timestamp, format_timestamp
from stt_diarize.alignment.segments import (
    parse_segment_line,
    parse_speaker_segments,
    filter_short_segments,
)
from stt_diarize.alignment.turns import build_speaker_labels, group_speaker_turns
from stt_diarize.alignment.aligner import (
    distribute_words,
    format_combined_output,
    combine_transcript_with_diarization,
)

__all__ = [
    "parse_timestamp",
    "format_timestamp",
    "parse_segment_line",
    "parse_speaker_segments",
    "filter_short_segments",
    "build_speaker_labels",
    "group_speaker_turns",
    "distribute_words",
    "format_combined_output",
    "combine_transcript_with_diarization",
]
