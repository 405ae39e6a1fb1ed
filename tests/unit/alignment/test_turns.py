"""Tests for speaker relabeling and turn grouping."""

from stt_diarize.alignment import build_speaker_labels, group_speaker_turns
from stt_diarize.alignment.turns import speaker_letter
from stt_diarize.core import SpeakerSegment


def seg(speaker: int, start: float, end: float) -> SpeakerSegment:
    return SpeakerSegment(speaker_id=f"Speaker {speaker}", start_time=start, end_time=end)


class TestSpeakerLetter:
    def test_single_letters(self):
        assert speaker_letter(0) == "A"
        assert speaker_letter(1) == "B"
        assert speaker_letter(25) == "Z"

    def test_past_z(self):
        assert speaker_letter(26) == "AA"
        assert speaker_letter(27) == "AB"
        assert speaker_letter(52) == "BA"


class TestBuildSpeakerLabels:
    def test_empty(self):
        assert build_speaker_labels([]) == {}

    def test_independent_of_time_order(self):
        segments = [seg(3, 0.0, 2.0), seg(1, 2.0, 4.0), seg(2, 4.0, 6.0)]
        assert build_speaker_labels(segments) == {
            "Speaker 1": "Speaker A",
            "Speaker 2": "Speaker B",
            "Speaker 3": "Speaker C",
        }

    def test_ids_ordered_as_strings(self):
        # "Speaker 10" sorts before "Speaker 2" lexicographically
        labels = build_speaker_labels([seg(2, 0.0, 2.0), seg(10, 2.0, 4.0)])
        assert labels == {"Speaker 10": "Speaker A", "Speaker 2": "Speaker B"}

    def test_numeric_order_would_differ(self):
        labels = build_speaker_labels([seg(2, 0.0, 2.0), seg(10, 2.0, 4.0)])
        numeric = sorted(labels, key=lambda speaker_id: int(speaker_id.split()[-1]))
        assert [labels[s] for s in numeric] == ["Speaker B", "Speaker A"]


class TestGroupSpeakerTurns:
    def test_empty(self):
        assert group_speaker_turns([]) == []

    def test_consecutive_same_speaker_grouped(self):
        segments = [seg(1, 0.0, 2.0), seg(1, 5.0, 7.0), seg(2, 7.0, 9.0), seg(1, 9.0, 11.0)]
        turns = group_speaker_turns(segments)

        assert [t.label for t in turns] == ["Speaker A", "Speaker B", "Speaker A"]
        assert turns[0].segments == segments[:2]
        assert turns[1].segments == [segments[2]]
        assert turns[2].segments == [segments[3]]

    def test_gap_does_not_split_turn(self):
        turns = group_speaker_turns([seg(1, 0.0, 2.0), seg(1, 30.0, 32.0)])
        assert len(turns) == 1

    def test_turn_duration_excludes_gaps(self):
        turn = group_speaker_turns([seg(1, 0.0, 2.0), seg(1, 5.0, 6.5)])[0]
        assert turn.duration == 3.5
        assert turn.start_time == 0.0
        assert turn.end_time == 6.5
