"""Shared data types and abstract backend interfaces."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

import numpy as np


@dataclass(frozen=True)
class SpeakerSegment:
    """A contiguous time interval attributed to one speaker."""
    speaker_id: str  # raw label, e.g. "Speaker 3"
    start_time: float  # seconds
    end_time: float  # seconds

    @property
    def duration(self) -> float:
        return self.end_time - self.start_time


@dataclass
class SpeakerTurn:
    """A run of consecutive segments sharing one display label."""
    label: str  # display label, e.g. "Speaker A"
    segments: list[SpeakerSegment] = field(default_factory=list)

    @property
    def duration(self) -> float:
        """Total spoken time, gaps between segments excluded."""
        return sum(seg.duration for seg in self.segments)

    @property
    def start_time(self) -> float:
        return self.segments[0].start_time if self.segments else 0.0

    @property
    def end_time(self) -> float:
        return self.segments[-1].end_time if self.segments else 0.0


@dataclass
class SpeakerLine:
    """One attributed line of the combined transcript."""
    label: str
    text: str

    def __str__(self) -> str:
        return f"{self.label}: {self.text}"


@dataclass
class DiarizedSegment:
    """A segment as reported by a diarization backend."""
    speaker_id: str  # backend id, e.g. "1"
    start: float
    end: float
    quality: float = 0.0  # 0.0-1.0, 0 when the backend has no score


@dataclass
class DiarizationResult:
    """Output of a diarization backend."""
    segments: list[DiarizedSegment] = field(default_factory=list)
    processing_seconds: float | None = None
    inference_seconds: float | None = None

    @property
    def audio_duration(self) -> float:
        return self.segments[-1].end if self.segments else 0.0

    @property
    def speaker_count(self) -> int:
        return len({seg.speaker_id for seg in self.segments})


@dataclass
class TranscriptionResult:
    """Output of an ASR backend."""
    text: str
    confidence: float | None = None
    processing_seconds: float | None = None
    language: str | None = None


class BaseASR(ABC):
    """Abstract base class for ASR (Automatic Speech Recognition) backends."""

    @abstractmethod
    def transcribe(self, samples: np.ndarray) -> TranscriptionResult:
        """Transcribe 16 kHz mono samples to text."""
        pass

    @abstractmethod
    def load(self) -> None:
        """Load model into memory."""
        pass

    @abstractmethod
    def unload(self) -> None:
        """Unload model from memory."""
        pass

    @property
    @abstractmethod
    def is_loaded(self) -> bool:
        """Check if model is loaded."""
        pass


class BaseDiarizer(ABC):
    """Abstract base class for speaker diarization backends."""

    @abstractmethod
    def diarize(self, samples: np.ndarray, threshold: float | None = None) -> DiarizationResult:
        """Identify speaker segments in 16 kHz mono samples."""
        pass

    @abstractmethod
    def load(self) -> None:
        """Load model into memory."""
        pass

    @abstractmethod
    def unload(self) -> None:
        """Unload model from memory."""
        pass

    @property
    @abstractmethod
    def is_loaded(self) -> bool:
        """Check if model is loaded."""
        pass
