"""stt-diarize - speech-to-text with speaker diarization.

Usage:
    from stt_diarize import AudioProcessor, combine_transcript_with_diarization

    # Full pipeline: writes *_transcript.txt, *_diarization.txt, *_combined.txt
    result = AudioProcessor(load_config()).process_audio_file("meeting.mp3")

    # Alignment only, over text produced elsewhere
    combined = combine_transcript_with_diarization(transcript, diarization_report)
"""

from stt_diarize.alignment import combine_transcript_with_diarization
from stt_diarize.config import STTConfig, load_config
from stt_diarize.pipeline import AudioProcessor, ProcessingResult

__version__ = "0.1.0"

__all__ = [
    "AudioProcessor",
    "ProcessingResult",
    "STTConfig",
    "combine_transcript_with_diarization",
    "load_config",
]
