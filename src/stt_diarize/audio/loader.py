"""Audio decoding to fixed-rate mono samples."""

from pathlib import Path

import numpy as np

from stt_diarize.core import AudioLoadError
from stt_diarize.utils import get_logger

logger = get_logger(__name__)

TARGET_SAMPLE_RATE = 16000


def samples_duration(samples: np.ndarray, sample_rate: int = TARGET_SAMPLE_RATE) -> float:
    """Duration in seconds of a mono sample buffer."""
    return len(samples) / float(sample_rate)


def load_audio_samples(path: Path | str, sample_rate: int = TARGET_SAMPLE_RATE) -> np.ndarray:
    """Decode an audio file into float32 mono samples.

    Any container PyAV can read is accepted; audio is downmixed and resampled.

    Raises:
        FileNotFoundError: If the file does not exist
        AudioLoadError: If the file cannot be decoded
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    from faster_whisper import decode_audio

    logger.info(f"Loading audio file: {path.name}")
    try:
        samples = decode_audio(str(path), sampling_rate=sample_rate)
    except Exception as e:
        raise AudioLoadError(f"Unsupported audio format: {path.name} ({e})") from e

    samples = np.asarray(samples, dtype=np.float32)
    if samples.size == 0:
        raise AudioLoadError(f"No audio samples decoded from {path.name}")

    logger.info(
        f"Loaded {len(samples)} samples ({samples_duration(samples, sample_rate):.1f} seconds)"
    )
    return samples
