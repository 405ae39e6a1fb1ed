"""Tests for the pyannote backend that need no model download."""

import numpy as np
import pytest

from stt_diarize.config import DiarizationConfig
from stt_diarize.core import DiarizationError
from stt_diarize.diarization import DiarizationRegistry, PyAnnoteDiarizer
from stt_diarize.diarization.pyannote import number_speakers


class TestNumberSpeakers:
    def test_first_appearance_order(self):
        labels = ["SPEAKER_01", "SPEAKER_00", "SPEAKER_01", "SPEAKER_02"]
        assert number_speakers(labels) == {
            "SPEAKER_01": "1",
            "SPEAKER_00": "2",
            "SPEAKER_02": "3",
        }

    def test_empty(self):
        assert number_speakers([]) == {}


class TestPyAnnoteDiarizer:
    def test_registered(self):
        assert "pyannote" in DiarizationRegistry
        assert DiarizationRegistry.get("pyannote") is PyAnnoteDiarizer

    def test_not_loaded_on_init(self):
        diarizer = PyAnnoteDiarizer(DiarizationConfig(device="cpu"))
        assert not diarizer.is_loaded

    def test_rejects_out_of_range_threshold(self):
        pytest.importorskip("torch")
        diarizer = PyAnnoteDiarizer(DiarizationConfig(device="cpu"))
        diarizer._pipeline = object()  # skip loading
        with pytest.raises(DiarizationError):
            diarizer.diarize(np.zeros(16000, dtype=np.float32), threshold=1.5)
