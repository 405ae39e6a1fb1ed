"""Tests for MM:SS.mmm timestamp conversion."""

import pytest

from stt_diarize.alignment import parse_timestamp, format_timestamp


class TestParseTimestamp:
    @pytest.mark.parametrize(
        "text,minutes,seconds,millis",
        [
            ("00:00.000", 0, 0, 0),
            ("00:15.234", 0, 15, 234),
            ("01:02.500", 1, 2, 500),
            ("59:59.999", 59, 59, 999),
            ("125:07.042", 125, 7, 42),
        ],
    )
    def test_well_formed(self, text, minutes, seconds, millis):
        assert parse_timestamp(text) == float(minutes * 60 + seconds) + millis / 1000.0

    def test_millisecond_field_is_a_count(self):
        assert parse_timestamp("00:01.5") == pytest.approx(1.005)

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "00.000",  # missing colon
            "00:15",  # missing dot
            "00:00:15.000",  # too many colons
            "00:15.2.3",  # too many dots
            "aa:15.000",
            "00:bb.000",
            "00:15.ccc",
            ":15.000",
            "00:.000",
            "00:15.",
            " 00:15.000",
            "-1:15.000",
        ],
    )
    def test_malformed_returns_none(self, text):
        assert parse_timestamp(text) is None

    @pytest.mark.parametrize(
        "text",
        [
            "9" * 400 + ":00.000",  # overflows a float
            "00:00." + "9" * 400,
            "9" * 5000 + ":00.000",  # past the int() digit limit
        ],
        ids=["huge-minutes", "huge-millis", "too-many-digits"],
    )
    def test_oversized_fields_return_none(self, text):
        assert parse_timestamp(text) is None


class TestFormatTimestamp:
    def test_zero(self):
        assert format_timestamp(0.0) == "00:00.000"

    def test_minutes_and_millis(self):
        assert format_timestamp(75.25) == "01:15.250"

    def test_minutes_unbounded(self):
        assert format_timestamp(6000.5) == "100:00.500"

    def test_rounds_to_nearest_millisecond(self):
        assert format_timestamp(1.001) == "00:01.001"
        assert format_timestamp(59.9996) == "01:00.000"

    def test_parses_back(self):
        for seconds in (0.0, 1.5, 62.125, 3599.999):
            assert parse_timestamp(format_timestamp(seconds)) == pytest.approx(seconds)
