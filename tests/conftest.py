"""Shared test fixtures."""

import numpy as np
import pytest

from stt_diarize.core import (
    BaseASR,
    BaseDiarizer,
    DiarizationResult,
    DiarizedSegment,
    TranscriptionResult,
)


class FakeASR(BaseASR):
    """In-memory ASR returning a fixed transcript."""

    def __init__(self, text: str = "hello there how are you today"):
        self.text = text
        self.loaded = False
        self.calls = 0

    def transcribe(self, samples):
        self.calls += 1
        return TranscriptionResult(text=self.text, confidence=0.9, processing_seconds=0.01)

    def load(self):
        self.loaded = True

    def unload(self):
        self.loaded = False

    @property
    def is_loaded(self):
        return self.loaded


class FakeDiarizer(BaseDiarizer):
    """In-memory diarizer returning fixed segments."""

    def __init__(self, segments: list[DiarizedSegment] | None = None):
        self.segments = segments if segments is not None else [
            DiarizedSegment(speaker_id="1", start=0.0, end=2.0, quality=0.9),
            DiarizedSegment(speaker_id="2", start=2.0, end=4.0, quality=0.9),
        ]
        self.loaded = False
        self.thresholds: list[float | None] = []

    def diarize(self, samples, threshold=None):
        self.thresholds.append(threshold)
        return DiarizationResult(segments=list(self.segments))

    def load(self):
        self.loaded = True

    def unload(self):
        self.loaded = False

    @property
    def is_loaded(self):
        return self.loaded


@pytest.fixture
def transcript():
    return "hello there how are you today"


@pytest.fixture
def two_speaker_report():
    """Report with two 2-second turns, as rendered by the diarization stage."""
    return (
        "SPEAKER DIARIZATION RESULTS\n"
        "==========================\n"
        "\n"
        "Audio Duration: 4.0 seconds\n"
        "Speaker Count: 2\n"
        "Segments: 2\n"
        "Processing Time: 0.50 seconds\n"
        "Real-time Factor: 0.10x\n"
        "\n"
        "SPEAKER SEGMENTS:\n"
        "-----------------\n"
        "1: 00:00.000 - 00:02.000 (2.0s) [Quality: 90.0%]\n"
        "2: 00:02.000 - 00:04.000 (2.0s) [Quality: 90.0%]\n"
    )


@pytest.fixture
def fake_asr():
    return FakeASR()


@pytest.fixture
def fake_diarizer():
    return FakeDiarizer()


@pytest.fixture
def fake_samples():
    """One second of silence at 16 kHz."""
    return np.zeros(16000, dtype=np.float32)


@pytest.fixture
def sample_audio_path(tmp_path):
    """Create a placeholder audio file for testing."""
    audio_file = tmp_path / "meeting.mp3"
    audio_file.write_bytes(b"ID3" + b"\x00" * 100)
    return audio_file
