"""Custom exceptions for the stt-diarize tool."""


class STTError(Exception):
    """Base exception for all stt-diarize errors."""
    pass


class ConfigError(STTError):
    """Configuration loading or validation error."""
    pass


class RegistryError(STTError):
    """Component registry error."""
    pass


class AudioLoadError(STTError):
    """Audio file could not be decoded or resampled."""
    pass


class ASRError(STTError):
    """Speech recognition error."""
    pass


class DiarizationError(STTError):
    """Speaker diarization error."""
    pass


class PipelineError(STTError):
    """File processing pipeline error."""
    pass
