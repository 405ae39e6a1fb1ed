"""Speaker relabeling and grouping of segments into turns."""

from string import ascii_uppercase

from stt_diarize.core import SpeakerSegment, SpeakerTurn


def speaker_letter(index: int) -> str:
    """0 -> "A", 25 -> "Z", 26 -> "AA", 27 -> "AB", ..."""
    letters = ""
    index += 1
    while index > 0:
        index, remainder = divmod(index - 1, 26)
        letters = ascii_uppercase[remainder] + letters
    return letters


def build_speaker_labels(segments: list[SpeakerSegment]) -> dict[str, str]:
    """Map raw speaker ids to display labels.

    Ids are ordered as strings, so "Speaker 10" is labeled before "Speaker 2".
    """
    unique_ids = sorted({seg.speaker_id for seg in segments})
    return {
        speaker_id: f"Speaker {speaker_letter(index)}"
        for index, speaker_id in enumerate(unique_ids)
    }


def group_speaker_turns(segments: list[SpeakerSegment]) -> list[SpeakerTurn]:
    """Collapse consecutive same-speaker segments into turns.

    Gaps between segments do not split a turn; only a label change does.
    """
    labels = build_speaker_labels(segments)
    turns: list[SpeakerTurn] = []

    for segment in segments:
        label = labels[segment.speaker_id]
        if turns and turns[-1].label == label:
            turns[-1].segments.append(segment)
        else:
            turns.append(SpeakerTurn(label=label, segments=[segment]))

    return turns
