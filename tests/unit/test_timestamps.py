"""Unit tests for timestamp normalization helpers."""

from datetime import datetime, timedelta, timezone

import pytest

from smart_schedule.utils.timestamps import (
    format_compact_utc,
    format_iso_utc,
    from_compact_utc,
    is_valid_utc_timestamp,
    parse_utc_timestamp,
    to_compact_utc,
)


class TestParseUtcTimestamp:
    """Test suite for parse_utc_timestamp."""

    def test_parses_canonical_form(self) -> None:
        """Test that the canonical Z form parses to an aware UTC datetime."""
        dt = parse_utc_timestamp("2025-04-28T10:00:00Z")

        assert dt == datetime(2025, 4, 28, 10, 0, 0, tzinfo=timezone.utc)
        assert dt.utcoffset() == timedelta(0)

    def test_leap_day(self) -> None:
        """Test that Feb 29 parses in a leap year."""
        assert parse_utc_timestamp("2024-02-29T08:30:00Z") is not None

    @pytest.mark.parametrize(
        "value",
        [
            "2025-04-28T25:99:00Z",  # invalid clock values
            "2025-13-01T10:00:00Z",  # month 13
            "2025-02-30T10:00:00Z",  # Feb 30
            "2025-02-29T10:00:00Z",  # not a leap year
            "2025-04-28T10:00:60Z",  # leap seconds are not accepted
            "0000-01-01T00:00:00Z",  # year zero
            "2025-04-28T10:00:00+05:30",  # offsets are rejected
            "2025-04-28T10:00:00+00:00",
            "2025-04-28T10:00:00.000Z",  # fractional seconds are rejected
            "2025-04-28T10:00Z",  # missing seconds
            "2025-04-28 10:00:00Z",  # space separator
            "2025-04-28T10:00:00z",
            "2025-4-28T10:00:00Z",
            "2025-04-28T10:00:00Z\n",
            " 2025-04-28T10:00:00Z",
            "2025-04-28",
            "not-a-date",
            "",
        ],
    )
    def test_rejects_invalid_strings(self, value: str) -> None:
        """Test that anything but a real YYYY-MM-DDTHH:MM:SSZ instant is rejected."""
        assert parse_utc_timestamp(value) is None
        assert is_valid_utc_timestamp(value) is False

    @pytest.mark.parametrize("value", [None, 1714298400, 12.5, ["2025-04-28T10:00:00Z"], {}])
    def test_rejects_non_strings(self, value: object) -> None:
        """Test that non-string values are rejected rather than raising."""
        assert parse_utc_timestamp(value) is None

    def test_rejects_non_ascii_digits(self) -> None:
        """Test that Unicode digits outside ASCII are not accepted."""
        assert parse_utc_timestamp("２０２５-04-28T10:00:00Z") is None


class TestCompactUtc:
    """Test suite for the compact UTC transform."""

    @pytest.mark.parametrize(
        "value",
        [
            "2025-04-28T10:00:00Z",
            "1999-12-31T23:59:59Z",
            "0999-01-01T00:00:00Z",
            "2024-02-29T00:00:01Z",
        ],
    )
    def test_is_character_deletion(self, value: str) -> None:
        """Test that the transform only removes '-' and ':'."""
        compact = to_compact_utc(value)

        assert compact == value.replace("-", "").replace(":", "")

    def test_is_reversible(self) -> None:
        """Test that the compact form converts back to the original string."""
        value = "2025-04-28T10:00:00Z"

        assert from_compact_utc(to_compact_utc(value)) == value

    def test_invalid_input_returns_none(self) -> None:
        """Test that an unparseable timestamp has no compact form."""
        assert to_compact_utc("not-a-date") is None
        assert from_compact_utc("20251301T100000Z") is None
        assert from_compact_utc("2025-04-28T10:00:00Z") is None

    def test_format_helpers_convert_to_utc(self) -> None:
        """Test that formatting converts aware datetimes to UTC."""
        dt = datetime(2025, 4, 28, 15, 30, 0, tzinfo=timezone(timedelta(hours=5, minutes=30)))

        assert format_iso_utc(dt) == "2025-04-28T10:00:00Z"
        assert format_compact_utc(dt) == "20250428T100000Z"

    def test_format_treats_naive_as_utc(self) -> None:
        """Test that naive datetimes are taken to already be UTC."""
        assert format_compact_utc(datetime(2025, 1, 2, 3, 4, 5)) == "20250102T030405Z"
