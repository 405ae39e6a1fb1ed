"""Audio processing pipeline - Audio → Transcript → Diarization → Combined."""

from dataclasses import dataclass
from pathlib import Path

from stt_diarize.alignment import combine_transcript_with_diarization
from stt_diarize.asr import ASRRegistry
from stt_diarize.audio import load_audio_samples, TARGET_SAMPLE_RATE
from stt_diarize.config import STTConfig
from stt_diarize.core import BaseASR, BaseDiarizer, PipelineError
from stt_diarize.diarization import DiarizationRegistry, format_diarization_report
from stt_diarize.utils import get_logger, logged, timed

logger = get_logger(__name__)


@dataclass
class ProcessingResult:
    """Paths of the files written for one input."""
    transcript_file: str
    diarization_file: str | None = None
    combined_file: str | None = None


class AudioProcessor:
    """Pipeline turning one audio file into transcript, diarization and combined files.

    Flow: Audio → 16 kHz samples → ASR → Diarization → Alignment → Files
    """

    def __init__(self, config: STTConfig | None = None):
        self.config = config or STTConfig()

        # Lazy-loaded components
        self._asr: BaseASR | None = None
        self._diarizer: BaseDiarizer | None = None

        logger.debug("AudioProcessor initialized")

    @property
    def asr(self) -> BaseASR:
        """Lazy-load ASR."""
        if self._asr is None:
            self._asr = ASRRegistry.create(
                self.config.asr.backend,
                config=self.config.asr,
            )
        return self._asr

    @property
    def diarizer(self) -> BaseDiarizer:
        """Lazy-load diarizer."""
        if self._diarizer is None:
            self._diarizer = DiarizationRegistry.create(
                self.config.diarization.backend,
                config=self.config.diarization,
            )
        return self._diarizer

    def _write(self, path: Path, text: str) -> None:
        try:
            path.write_text(text, encoding=self.config.output.encoding)
        except OSError as e:
            raise PipelineError(f"Could not write {path}: {e}") from e

    def _read(self, path: Path) -> str:
        try:
            return path.read_text(encoding=self.config.output.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise PipelineError(f"Could not read {path}: {e}") from e

    @timed
    @logged
    def process_audio_file(
        self,
        input_path: Path | str,
        output_dir: Path | str | None = None,
        transcribe_only: bool = False,
        threshold: float | None = None,
    ) -> ProcessingResult:
        """Transcribe, diarize and combine one audio file.

        Args:
            input_path: Audio file to process
            output_dir: Where to write results (config value, then the input's directory)
            transcribe_only: Skip diarization and the combined output
            threshold: Diarization clustering threshold override

        Returns:
            ProcessingResult with the written file paths
        """
        input_path = Path(input_path)
        if not input_path.exists():
            raise FileNotFoundError(f"File not found: {input_path}")

        samples = load_audio_samples(input_path, sample_rate=TARGET_SAMPLE_RATE)

        out_dir = Path(output_dir or self.config.output.output_dir or input_path.parent)
        try:
            out_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise PipelineError(f"Could not create output directory {out_dir}: {e}") from e

        names = self.config.output
        base_name = input_path.stem

        logger.info("Starting transcription...")
        transcription = self.asr.transcribe(samples)
        transcript_path = out_dir / f"{base_name}{names.transcript_suffix}"
        self._write(transcript_path, transcription.text)
        logger.info(f"Saved transcript to: {transcript_path}")

        result = ProcessingResult(transcript_file=str(transcript_path))
        if transcribe_only:
            return result

        logger.info("Starting speaker diarization...")
        diarization = format_diarization_report(self.diarizer.diarize(samples, threshold=threshold))
        diarization_path = out_dir / f"{base_name}{names.diarization_suffix}"
        self._write(diarization_path, diarization)
        logger.info(f"Saved diarization to: {diarization_path}")

        logger.info("Combining transcription with speaker information...")
        combined = combine_transcript_with_diarization(
            transcription.text, diarization, config=self.config.alignment
        )
        combined_path = out_dir / f"{base_name}{names.combined_suffix}"
        self._write(combined_path, combined)
        logger.info(f"Saved combined result to: {combined_path}")

        result.diarization_file = str(diarization_path)
        result.combined_file = str(combined_path)
        return result

    def combine_files(
        self,
        transcript_path: Path | str,
        diarization_path: Path | str,
        output_path: Path | str | None = None,
    ) -> str:
        """Re-run alignment over previously written transcript and diarization files.

        Returns:
            The combined text (also written to output_path when given)

        Raises:
            PipelineError: If an input cannot be read or decoded
        """
        transcript = self._read(Path(transcript_path))
        diarization = self._read(Path(diarization_path))

        combined = combine_transcript_with_diarization(
            transcript, diarization, config=self.config.alignment
        )
        if output_path is not None:
            self._write(Path(output_path), combined)
            logger.info(f"Saved combined result to: {output_path}")
        return combined

    def unload_all(self) -> None:
        """Unload all models to free memory."""
        if self._asr and self._asr.is_loaded:
            self._asr.unload()
        if self._diarizer and self._diarizer.is_loaded:
            self._diarizer.unload()
        logger.debug("All pipeline models unloaded")
