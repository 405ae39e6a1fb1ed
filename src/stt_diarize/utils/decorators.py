"""Decorators shared by the pipeline stages and model backends."""

import functools
import time
import logging
from typing import Callable, TypeVar, ParamSpec

P = ParamSpec("P")
R = TypeVar("R")

logger = logging.getLogger(__name__)


def timed(func: Callable[P, R]) -> Callable[P, R]:
    """Log how long a stage (transcription, diarization, alignment) took."""
    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        start = time.perf_counter()
        result = func(*args, **kwargs)
        logger.info(f"{func.__qualname__} took {time.perf_counter() - start:.2f}s")
        return result
    return wrapper


def logged(func: Callable[P, R]) -> Callable[P, R]:
    """Log start and outcome; failures are logged and re-raised."""
    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        name = func.__qualname__
        logger.debug(f"{name} started")
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            logger.error(f"{name} failed: {e}")
            raise
        logger.debug(f"{name} finished")
        return result
    return wrapper


def require_loaded(func: Callable[P, R]) -> Callable[P, R]:
    """Load a backend's model on first use.

    Wraps BaseASR/BaseDiarizer methods; calls ``load()`` when ``is_loaded`` is False.
    """
    @functools.wraps(func)
    def wrapper(self, *args: P.args, **kwargs: P.kwargs) -> R:
        if not self.is_loaded:
            logger.info(f"{type(self).__name__}: loading model on first use")
            self.load()
        return func(self, *args, **kwargs)
    return wrapper
