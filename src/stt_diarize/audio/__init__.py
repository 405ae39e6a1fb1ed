"""Audio loading."""

from stt_diarize.audio.loader import load_audio_samples, samples_duration, TARGET_SAMPLE_RATE

__all__ = [
    "load_audio_samples",
    "samples_duration",
    "TARGET_SAMPLE_RATE",
]
