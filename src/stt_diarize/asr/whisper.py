"""Faster Whisper ASR implementation."""

import gc
import math
import time

import numpy as np

from stt_diarize.asr.base import ASRRegistry
from stt_diarize.core import BaseASR, TranscriptionResult, ASRError
from stt_diarize.core.resilience import retry_model_load
from stt_diarize.config import ASRConfig
from stt_diarize.utils import get_logger, timed, require_loaded

logger = get_logger(__name__)

SAMPLE_RATE = 16000


@ASRRegistry.register("faster-whisper")
class FasterWhisperASR(BaseASR):
    """Faster Whisper ASR backend using CTranslate2."""

    def __init__(self, config: ASRConfig):
        self.config = config
        self._model = None
        self._device = self._resolve_device(config.device)
        logger.info(
            f"FasterWhisperASR initialized: model={config.model_size}, "
            f"device={self._device}, compute={config.compute_type}"
        )

    def _resolve_device(self, device: str) -> str:
        """Resolve 'auto' to actual device."""
        if device != "auto":
            return device

        try:
            import torch
            return "cuda" if torch.cuda.is_available() else "cpu"
        except ImportError:
            return "cpu"

    @retry_model_load
    def _create_model(self):
        from faster_whisper import WhisperModel

        return WhisperModel(
            self.config.model_size,
            device=self._device,
            compute_type=self.config.compute_type,
        )

    def load(self) -> None:
        """Load Whisper model into memory."""
        if self._model is not None:
            logger.debug("Model already loaded")
            return

        try:
            logger.info(f"Loading Whisper {self.config.model_size} on {self._device}...")
            self._model = self._create_model()
            logger.info("Whisper model loaded successfully")
        except Exception as e:
            raise ASRError(f"Failed to load Whisper model: {e}") from e

    def unload(self) -> None:
        """Unload model and free memory."""
        if self._model is None:
            return

        logger.info("Unloading Whisper model...")
        del self._model
        self._model = None
        gc.collect()

        try:
            import torch
            if torch.cuda.is_available():
                torch.cuda.empty_cache()
        except ImportError:
            pass

    @property
    def is_loaded(self) -> bool:
        """Check if model is loaded."""
        return self._model is not None

    @timed
    @require_loaded
    def transcribe(self, samples: np.ndarray) -> TranscriptionResult:
        """Transcribe 16 kHz mono samples.

        Returns:
            Joined text with mean segment confidence and processing time
        """
        logger.info(f"Transcribing {len(samples) / SAMPLE_RATE:.1f} seconds of audio...")
        started = time.perf_counter()

        try:
            segments_iter, info = self._model.transcribe(
                np.asarray(samples, dtype=np.float32),
                language=self.config.language,
                beam_size=self.config.beam_size,
                vad_filter=self.config.vad_filter,
            )
            segments = list(segments_iter)
        except Exception as e:
            raise ASRError(f"Transcription failed: {e}") from e

        text = " ".join(seg.text.strip() for seg in segments if seg.text.strip())
        confidence = (
            float(np.mean([math.exp(seg.avg_logprob) for seg in segments]))
            if segments else None
        )
        result = TranscriptionResult(
            text=text,
            confidence=confidence,
            processing_seconds=time.perf_counter() - started,
            language=info.language,
        )

        if confidence is not None:
            logger.info(f"Confidence: {confidence * 100:.1f}%")
        logger.info(f"Transcribed {len(segments)} segments, language={info.language}")
        return result
