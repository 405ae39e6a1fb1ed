"""Speaker diarization module."""

from stt_diarize.diarization.base import DiarizationRegistry
from stt_diarize.diarization.pyannote import PyAnnoteDiarizer
from stt_diarize.diarization.report import format_diarization_report, format_segment_line

__all__ = [
    "DiarizationRegistry",
    "PyAnnoteDiarizer",
    "format_diarization_report",
    "format_segment_line",
]
