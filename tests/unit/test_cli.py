"""Tests for the stt command line."""

import pytest

from stt_diarize import cli
from stt_diarize.core import ASRError
from stt_diarize.pipeline import ProcessingResult


@pytest.fixture
def config_dir(tmp_path):
    path = tmp_path / "configs"
    path.mkdir()
    return path


class TestParser:
    def test_process_arguments(self):
        args = cli.build_parser().parse_args(
            ["process", "talk.mp3", "-o", "out", "-v", "--transcribe-only", "--threshold", "0.7"]
        )
        assert args.input_file == "talk.mp3"
        assert args.output == "out"
        assert args.verbose is True
        assert args.transcribe_only is True
        assert args.threshold == 0.7

    def test_threshold_defaults_to_config(self):
        args = cli.build_parser().parse_args(["process", "talk.mp3"])
        assert args.threshold is None

    def test_threshold_out_of_range(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args(["process", "talk.mp3", "--threshold", "1.2"])


class TestMain:
    def test_no_command_prints_help(self, capsys):
        assert cli.main([]) == 0
        assert "usage" in capsys.readouterr().out

    def test_combine_to_stdout(self, tmp_path, config_dir, capsys, transcript, two_speaker_report):
        transcript_path = tmp_path / "t.txt"
        diarization_path = tmp_path / "d.txt"
        transcript_path.write_text(transcript)
        diarization_path.write_text(two_speaker_report)

        code = cli.main([
            "-c", str(config_dir), "combine", str(transcript_path), str(diarization_path),
        ])

        assert code == 0
        assert "Speaker A: hello there how\nSpeaker B: are you today" in capsys.readouterr().out

    def test_combine_missing_file_reports_error(self, tmp_path, config_dir, capsys):
        code = cli.main(["-c", str(config_dir), "combine", str(tmp_path / "a"), str(tmp_path / "b")])
        assert code == 1
        assert "✗ Error" in capsys.readouterr().out

    def test_combine_undecodable_file_reports_error(self, tmp_path, config_dir, capsys, two_speaker_report):
        transcript_path = tmp_path / "t.txt"
        diarization_path = tmp_path / "d.txt"
        transcript_path.write_bytes(b"caf\xe9 ol\xe9")
        diarization_path.write_text(two_speaker_report)

        code = cli.main([
            "-c", str(config_dir), "combine", str(transcript_path), str(diarization_path),
        ])

        assert code == 1
        assert "✗ Error: Could not read" in capsys.readouterr().out

    def test_process_prints_paths(self, monkeypatch, config_dir, capsys):
        calls = {}

        def fake_process(self, input_path, output_dir, transcribe_only, threshold):
            calls.update(input_path=input_path, threshold=threshold)
            return ProcessingResult(
                transcript_file="out/talk_transcript.txt",
                diarization_file="out/talk_diarization.txt",
                combined_file="out/talk_combined.txt",
            )

        monkeypatch.setattr(cli.AudioProcessor, "process_audio_file", fake_process)
        code = cli.main(["-c", str(config_dir), "process", "talk.mp3", "--threshold", "0.5"])

        out = capsys.readouterr().out
        assert code == 0
        assert calls == {"input_path": "talk.mp3", "threshold": 0.5}
        assert "out/talk_combined.txt" in out

    def test_process_error_exit_status(self, monkeypatch, config_dir, capsys):
        def fail(self, **kwargs):
            raise ASRError("Transcription failed")

        monkeypatch.setattr(cli.AudioProcessor, "process_audio_file", fail)
        assert cli.main(["-c", str(config_dir), "process", "talk.mp3"]) == 1
        assert "Transcription failed" in capsys.readouterr().out
