"""Timestamp normalization shared by the validator and the exporters.

Only one wire form is accepted anywhere in the pipeline: ISO 8601 in UTC
with a ``Z`` suffix and second precision (``YYYY-MM-DDTHH:MM:SSZ``). Numeric
offsets and fractional seconds are rejected. Compact UTC
(``YYYYMMDDTHHMMSSZ``) is what iCalendar and Google Calendar links use.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone

ISO_UTC_FORMAT = "{:04d}-{:02d}-{:02d}T{:02d}:{:02d}:{:02d}Z"
COMPACT_UTC_FORMAT = "{:04d}{:02d}{:02d}T{:02d}{:02d}{:02d}Z"

_ISO_UTC_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})Z", re.ASCII)
_COMPACT_UTC_RE = re.compile(r"(\d{4})(\d{2})(\d{2})T(\d{2})(\d{2})(\d{2})Z", re.ASCII)


def _build_utc(match: re.Match[str] | None) -> datetime | None:
    if match is None:
        return None
    year, month, day, hour, minute, second = (int(part) for part in match.groups())
    try:
        return datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)
    except ValueError:
        # Lexically fine but not a real instant (month 13, 25:99, Feb 30, ...).
        return None


def parse_utc_timestamp(value: object) -> datetime | None:
    """Parse a ``YYYY-MM-DDTHH:MM:SSZ`` string into an aware UTC datetime.

    Args:
        value: Candidate value; anything that is not a string is rejected.

    Returns:
        The parsed instant, or None if the value is not a valid timestamp.
    """
    if not isinstance(value, str):
        return None
    return _build_utc(_ISO_UTC_RE.fullmatch(value))


def is_valid_utc_timestamp(value: object) -> bool:
    return parse_utc_timestamp(value) is not None


def format_iso_utc(dt: datetime) -> str:
    """Format an instant as ``YYYY-MM-DDTHH:MM:SSZ`` (converted to UTC)."""
    return ISO_UTC_FORMAT.format(*_fields(dt))


def format_compact_utc(dt: datetime) -> str:
    """Format an instant as ``YYYYMMDDTHHMMSSZ`` (converted to UTC)."""
    return COMPACT_UTC_FORMAT.format(*_fields(dt))


def to_compact_utc(value: object) -> str | None:
    """Convert a wire timestamp to compact UTC, or None if it does not parse.

    For every accepted input this is the input with ``-`` and ``:`` removed.
    """
    dt = parse_utc_timestamp(value)
    if dt is None:
        return None
    return format_compact_utc(dt)


def from_compact_utc(value: str) -> str | None:
    """Convert compact UTC back to the ``YYYY-MM-DDTHH:MM:SSZ`` wire form."""
    dt = _build_utc(_COMPACT_UTC_RE.fullmatch(value))
    if dt is None:
        return None
    return format_iso_utc(dt)


def _fields(dt: datetime) -> tuple[int, ...]:
    # strftime("%Y") does not zero-pad years below 1000 on every platform.
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    else:
        dt = dt.astimezone(timezone.utc)
    return dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second
