"""CLI for the stt-diarize tool."""

import argparse
import sys

from stt_diarize.config import load_config
from stt_diarize.core import STTError
from stt_diarize.pipeline import AudioProcessor
from stt_diarize.utils import setup_logging


def _build_processor(args) -> AudioProcessor:
    config = load_config(config_path=args.config, env=args.env, config_dir=args.config_dir)

    level = "DEBUG" if getattr(args, "verbose", False) else config.log_level
    setup_logging(level=level, format_style=config.log_format)

    if args.cpu:
        config.asr.device = "cpu"
        config.asr.compute_type = "float32"
        config.diarization.device = "cpu"

    return AudioProcessor(config)


def cmd_process(args):
    """Transcribe and diarize an audio file."""
    processor = _build_processor(args)
    try:
        result = processor.process_audio_file(
            input_path=args.input_file,
            output_dir=args.output,
            transcribe_only=args.transcribe_only,
            threshold=args.threshold,
        )
    finally:
        processor.unload_all()

    print("✓ Processing complete!")
    print(f"  Transcript: {result.transcript_file}")
    if result.diarization_file:
        print(f"  Diarization: {result.diarization_file}")
    if result.combined_file:
        print(f"  Combined: {result.combined_file}")


def cmd_combine(args):
    """Combine an existing transcript and diarization report."""
    processor = _build_processor(args)
    combined = processor.combine_files(
        transcript_path=args.transcript,
        diarization_path=args.diarization,
        output_path=args.output,
    )

    if args.output:
        print(f"✓ Combined: {args.output}")
    else:
        print(combined)


def _threshold(value: str) -> float:
    threshold = float(value)
    if not 0.0 <= threshold <= 1.0:
        raise argparse.ArgumentTypeError(f"threshold must be within 0.0-1.0, got {value}")
    return threshold


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stt",
        description="Speech-to-text with speaker diarization",
    )
    parser.add_argument("--env", "-e", default=None, help="Environment config to layer on base.yaml")
    parser.add_argument("--config-dir", "-c", default="configs", help="Config directory")
    parser.add_argument("--config", default=None, help="Explicit config file")
    parser.add_argument("--cpu", action="store_true", help="Force CPU mode")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Process
    p = subparsers.add_parser("process", help="Transcribe and diarize an audio file")
    p.add_argument("input_file", help="Input audio file path")
    p.add_argument("--output", "-o", help="Output directory (default: same as input file)")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose output")
    p.add_argument("--transcribe-only", action="store_true", help="Skip diarization")
    p.add_argument(
        "--threshold", type=_threshold, default=None,
        help="Diarization clustering threshold (0.0-1.0, default: 0.8)",
    )
    p.set_defaults(func=cmd_process)

    # Combine
    p = subparsers.add_parser("combine", help="Combine existing transcript and diarization files")
    p.add_argument("transcript", help="Transcript text file")
    p.add_argument("diarization", help="Diarization report file")
    p.add_argument("--output", "-o", help="Combined output file (default: stdout)")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose output")
    p.set_defaults(func=cmd_combine)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        args.func(args)
    except (STTError, OSError) as e:
        print(f"✗ Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
