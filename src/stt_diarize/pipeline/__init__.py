"""Pipeline module - audio file processing."""

from stt_diarize.pipeline.processor import AudioProcessor, ProcessingResult

__all__ = [
    "AudioProcessor",
    "ProcessingResult",
]
