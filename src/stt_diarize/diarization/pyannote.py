"""PyAnnote speaker diarization implementation."""

import gc
import os
import time

import numpy as np

from stt_diarize.diarization.base import DiarizationRegistry
from stt_diarize.core import BaseDiarizer, DiarizationResult, DiarizedSegment, DiarizationError
from stt_diarize.core.resilience import retry_model_load
from stt_diarize.config import DiarizationConfig
from stt_diarize.utils import get_logger, timed, require_loaded

logger = get_logger(__name__)

SAMPLE_RATE = 16000


def number_speakers(labels: list[str]) -> dict[str, str]:
    """Map backend labels ("SPEAKER_00", ...) to "1", "2", ... by first appearance."""
    mapping: dict[str, str] = {}
    for label in labels:
        if label not in mapping:
            mapping[label] = str(len(mapping) + 1)
    return mapping


@DiarizationRegistry.register("pyannote")
class PyAnnoteDiarizer(BaseDiarizer):
    """PyAnnote speaker diarization backend."""

    def __init__(self, config: DiarizationConfig):
        self.config = config
        self._pipeline = None
        self._device = self._resolve_device(config.device)
        logger.info(
            f"PyAnnoteDiarizer initialized: model={config.model}, device={self._device}"
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

    def _get_hf_token(self) -> str | None:
        """Get HuggingFace token from environment."""
        token = os.environ.get("HF_TOKEN") or os.environ.get("HUGGINGFACE_TOKEN")
        if not token:
            logger.warning(
                "No HuggingFace token found. Set HF_TOKEN environment variable. "
                "PyAnnote models require accepting license at huggingface.co"
            )
        return token

    @retry_model_load
    def _from_pretrained(self):
        from pyannote.audio import Pipeline

        return Pipeline.from_pretrained(self.config.model, token=self._get_hf_token())

    def load(self) -> None:
        """Load diarization pipeline into memory."""
        if self._pipeline is not None:
            logger.debug("Pipeline already loaded")
            return

        try:
            import torch

            logger.info(f"Loading PyAnnote pipeline: {self.config.model}...")
            pipeline = self._from_pretrained()
            if pipeline is None:
                raise DiarizationError(f"PyAnnote returned no pipeline for {self.config.model}")

            if self._device == "cuda" and torch.cuda.is_available():
                pipeline = pipeline.to(torch.device("cuda"))

            self._pipeline = pipeline
            logger.info("PyAnnote pipeline loaded successfully")

        except DiarizationError:
            raise
        except Exception as e:
            raise DiarizationError(f"Failed to load PyAnnote pipeline: {e}") from e

    def unload(self) -> None:
        """Unload pipeline and free memory."""
        if self._pipeline is None:
            return

        logger.info("Unloading PyAnnote pipeline...")
        del self._pipeline
        self._pipeline = None
        gc.collect()

        try:
            import torch
            if torch.cuda.is_available():
                torch.cuda.empty_cache()
        except ImportError:
            pass

    @property
    def is_loaded(self) -> bool:
        """Check if pipeline is loaded."""
        return self._pipeline is not None

    def _apply_threshold(self, threshold: float) -> None:
        params = self._pipeline.parameters(instantiated=True)
        clustering = params.get("clustering")
        if clustering is None or "threshold" not in clustering:
            logger.warning("Pipeline has no clustering threshold, ignoring threshold")
            return
        clustering["threshold"] = threshold
        self._pipeline.instantiate(params)
        logger.debug(f"Clustering threshold set to {threshold}")

    @timed
    @require_loaded
    def diarize(self, samples: np.ndarray, threshold: float | None = None) -> DiarizationResult:
        """Identify speaker segments in 16 kHz mono samples.

        Args:
            samples: Float32 mono samples at 16 kHz
            threshold: Clustering threshold, config value when None

        Returns:
            DiarizationResult with 1-based numeric speaker ids
        """
        import torch

        threshold = self.config.threshold if threshold is None else threshold
        if not 0.0 <= threshold <= 1.0:
            raise DiarizationError(f"Threshold must be within 0.0-1.0, got {threshold}")

        params = {}
        if self.config.min_speakers is not None:
            params["min_speakers"] = self.config.min_speakers
        if self.config.max_speakers is not None:
            params["max_speakers"] = self.config.max_speakers

        started = time.perf_counter()
        try:
            self._apply_threshold(threshold)

            waveform = torch.from_numpy(np.asarray(samples, dtype=np.float32)).unsqueeze(0)
            inference_started = time.perf_counter()
            output = self._pipeline({"waveform": waveform, "sample_rate": SAMPLE_RATE}, **params)
            inference_seconds = time.perf_counter() - inference_started

            # pyannote 4 wraps the annotation, 3.x returns it directly
            annotation = getattr(output, "speaker_diarization", output)
            tracks = [
                (turn.start, turn.end, label)
                for turn, _, label in annotation.itertracks(yield_label=True)
            ]
        except Exception as e:
            raise DiarizationError(f"Diarization failed: {e}") from e

        ids = number_speakers([label for _, _, label in tracks])
        segments = [
            DiarizedSegment(speaker_id=ids[label], start=float(start), end=float(end))
            for start, end, label in sorted(tracks, key=lambda t: t[0])
        ]

        result = DiarizationResult(
            segments=segments,
            processing_seconds=time.perf_counter() - started,
            inference_seconds=inference_seconds,
        )
        logger.info(
            f"Found {result.speaker_count} speakers in {len(segments)} segments"
        )
        return result
