"""Utilities: logging, decorators."""

from stt_diarize.utils.logging import setup_logging, get_logger
from stt_diarize.utils.decorators import timed, logged, require_loaded

__all__ = [
    "setup_logging",
    "get_logger",
    "timed",
    "logged",
    "require_loaded",
]
