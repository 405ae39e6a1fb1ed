"""Resilience patterns for model loading."""

from stt_diarize.core.resilience.retry import (
    retry_with_backoff,
    retry_model_load,
    RetryError,
)

__all__ = [
    "retry_with_backoff",
    "retry_model_load",
    "RetryError",
]
