"""Pydantic configuration schemas with validation."""

from typing import Literal
from pydantic import BaseModel, Field, model_validator


class ASRConfig(BaseModel):
    """ASR (Automatic Speech Recognition) configuration."""
    backend: Literal["faster-whisper"] = "faster-whisper"
    model_size: Literal["tiny", "base", "small", "medium", "large-v2", "large-v3"] = "large-v3"
    device: Literal["cuda", "cpu", "auto"] = "auto"
    compute_type: Literal["float16", "int8", "float32"] = "float16"
    beam_size: int = Field(default=5, ge=1)
    vad_filter: bool = True
    language: str | None = None  # None = auto-detect


class DiarizationConfig(BaseModel):
    """Speaker diarization configuration."""
    backend: Literal["pyannote"] = "pyannote"
    model: str = "pyannote/speaker-diarization-3.1"
    device: Literal["cuda", "cpu", "auto"] = "auto"
    threshold: float = Field(default=0.8, ge=0.0, le=1.0)  # clustering threshold
    min_speakers: int | None = Field(default=None, ge=1)
    max_speakers: int | None = Field(default=None, ge=1)

    @model_validator(mode="after")
    def check_speaker_bounds(self) -> "DiarizationConfig":
        if (
            self.min_speakers is not None
            and self.max_speakers is not None
            and self.min_speakers > self.max_speakers
        ):
            raise ValueError("min_speakers must not exceed max_speakers")
        return self


class AlignmentConfig(BaseModel):
    """Transcript-diarization alignment configuration."""
    min_segment_duration: float = Field(default=1.5, ge=0.0)  # seconds
    max_merge_gap: float = Field(default=2.0, ge=0.0)  # seconds


class OutputConfig(BaseModel):
    """Result file naming."""
    output_dir: str | None = None  # None = next to the input file
    transcript_suffix: str = "_transcript.txt"
    diarization_suffix: str = "_diarization.txt"
    combined_suffix: str = "_combined.txt"
    encoding: str = "utf-8"


class STTConfig(BaseModel):
    """Root configuration for the stt-diarize tool."""
    asr: ASRConfig = Field(default_factory=ASRConfig)
    diarization: DiarizationConfig = Field(default_factory=DiarizationConfig)
    alignment: AlignmentConfig = Field(default_factory=AlignmentConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    # Global settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    log_format: Literal["simple", "detailed"] = "simple"
