"""Configuration management."""

from stt_diarize.config.schema import (
    STTConfig,
    ASRConfig,
    DiarizationConfig,
    AlignmentConfig,
    OutputConfig,
)
from stt_diarize.config.loader import load_config, load_yaml, deep_merge, apply_env_overrides

__all__ = [
    # Main config
    "STTConfig",
    "load_config",
    # Sub-configs
    "ASRConfig",
    "DiarizationConfig",
    "AlignmentConfig",
    "OutputConfig",
    # Utilities
    "load_yaml",
    "deep_merge",
    "apply_env_overrides",
]
