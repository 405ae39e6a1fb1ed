"""ASR (Automatic Speech Recognition) module."""

from stt_diarize.asr.base import ASRRegistry
from stt_diarize.asr.whisper import FasterWhisperASR

__all__ = [
    "ASRRegistry",
    "FasterWhisperASR",
]
