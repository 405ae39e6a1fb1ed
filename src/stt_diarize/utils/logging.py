"""Logging setup for the stt command and library use."""

import logging
import sys
from typing import Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Model stacks log download and device chatter at INFO
_NOISY_LOGGERS = (
    "faster_whisper",
    "pyannote",
    "lightning",
    "pytorch_lightning",
    "speechbrain",
    "huggingface_hub",
    "filelock",
    "urllib3",
)

_configured = False


def setup_logging(
    level: LogLevel = "WARNING",
    format_style: Literal["simple", "detailed"] = "simple",
    force: bool = False,
) -> None:
    """Configure root logging once.

    Logs go to stderr; stdout carries command output such as combined text.

    Args:
        level: Log level (``-v`` on the command line selects DEBUG)
        format_style: 'simple' for interactive use, 'detailed' adds time and call site
        force: Reconfigure even if logging was already set up
    """
    global _configured

    if _configured and not force:
        return

    if format_style == "simple":
        fmt = "%(levelname)s | %(name)s | %(message)s"
    else:
        fmt = "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"

    logging.basicConfig(
        level=getattr(logging, level),
        format=fmt,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=force,
    )

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Module logger; pass ``__name__``."""
    return logging.getLogger(name)
