"""Core components: data types, base classes, registry, exceptions."""

from stt_diarize.core.registry import Registry
from stt_diarize.core.base import (
    SpeakerSegment,
    SpeakerTurn,
    SpeakerLine,
    DiarizedSegment,
    DiarizationResult,
    TranscriptionResult,
    BaseASR,
    BaseDiarizer,
)
from stt_diarize.core.exceptions import (
    STTError,
    ConfigError,
    RegistryError,
    AudioLoadError,
    ASRError,
    DiarizationError,
    PipelineError,
)

__all__ = [
    # Registry
    "Registry",
    # Data classes
    "SpeakerSegment",
    "SpeakerTurn",
    "SpeakerLine",
    "DiarizedSegment",
    "DiarizationResult",
    "TranscriptionResult",
    # Base classes
    "BaseASR",
    "BaseDiarizer",
    # Exceptions
    "STTError",
    "ConfigError",
    "RegistryError",
    "AudioLoadError",
    "ASRError",
    "DiarizationError",
    "PipelineError",
]
