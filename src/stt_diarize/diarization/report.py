"""Plain-text diarization report, the format the aligner parses."""

from stt_diarize.alignment.timestamps import format_timestamp
from stt_diarize.core import DiarizationResult, DiarizedSegment


def format_segment_line(segment: DiarizedSegment) -> str:
    """Render one segment, e.g. ``"1: 00:00.000 - 00:06.243 (6.2s) [Quality: 47.5%]"``."""
    duration = segment.end - segment.start
    line = (
        f"{segment.speaker_id}: {format_timestamp(segment.start)} - "
        f"{format_timestamp(segment.end)} ({duration:.1f}s)"
    )
    if segment.quality > 0:
        line += f" [Quality: {segment.quality * 100:.1f}%]"
    return line


def format_diarization_report(result: DiarizationResult) -> str:
    """Render a diarization result as a human-readable report."""
    audio_duration = result.audio_duration

    lines = [
        "SPEAKER DIARIZATION RESULTS",
        "==========================",
        "",
        f"Audio Duration: {audio_duration:.1f} seconds",
        f"Speaker Count: {result.speaker_count}",
        f"Segments: {len(result.segments)}",
    ]

    if result.processing_seconds is not None:
        lines.append(f"Processing Time: {result.processing_seconds:.2f} seconds")
        inference = result.inference_seconds or 0.0
        rtf = inference / audio_duration if audio_duration > 0 else 0.0
        lines.append(f"Real-time Factor: {rtf:.2f}x")

    lines += ["", "SPEAKER SEGMENTS:", "-----------------"]
    lines += [format_segment_line(seg) for seg in result.segments]

    return "\n".join(lines) + "\n"
