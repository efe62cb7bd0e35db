"""iCalendar (.ics) export.

Builds a single RFC 5545 VCALENDAR with one VEVENT per event. Timestamps are
re-checked here; an event that fails the check is skipped, not the whole
document.
"""

from __future__ import annotations

import time
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Any

import structlog

from smart_schedule.models import Event
from smart_schedule.utils.timestamps import format_compact_utc, to_compact_utc

DEFAULT_PRODID = "-//SmartSchedule//Event Exporter//EN"
ICS_FILENAME = "schedule.ics"
ICS_MEDIA_TYPE = "text/calendar"
UID_DOMAIN = "smart-schedule.local"

_CRLF = "\r\n"
_MAX_LINE_OCTETS = 75

# UIDs combine this with the event index: unique within a document and stable
# across repeated exports from the same process.
_PROCESS_STAMP_MS = int(time.time() * 1000)


def escape_ics_text(text: str) -> str:
    """Escape a TEXT property value (RFC 5545 section 3.3.11).

    Backslash first, so the escapes added afterwards are not doubled.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return (
        text.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\n", "\\n")
    )


def fold_line(line: str) -> str:
    """Fold a content line to at most 75 octets per physical line.

    Continuation lines start with a single space. UTF-8 sequences are never
    split across lines.
    """
    if len(line.encode("utf-8")) <= _MAX_LINE_OCTETS:
        return line

    parts: list[str] = []
    current = ""
    current_octets = 0
    limit = _MAX_LINE_OCTETS
    for char in line:
        char_octets = len(char.encode("utf-8"))
        if current_octets + char_octets > limit:
            parts.append(current)
            current = ""
            current_octets = 0
            # The leading space of a continuation line counts toward the limit.
            limit = _MAX_LINE_OCTETS - 1
        current += char
        current_octets += char_octets
    parts.append(current)
    return (_CRLF + " ").join(parts)


def _vevent_lines(event: Event, *, uid: str, dtstamp: str, dtstart: str, dtend: str) -> list[str]:
    return [
        "BEGIN:VEVENT",
        f"UID:{uid}",
        f"DTSTAMP:{dtstamp}",
        f"DTSTART:{dtstart}",
        f"DTEND:{dtend}",
        f"SUMMARY:{escape_ics_text(event.display_title)}",
        f"DESCRIPTION:{escape_ics_text(event.description or '')}",
        "END:VEVENT",
    ]


def generate_ics(
    events: Iterable[Event],
    *,
    now: datetime | None = None,
    prodid: str = DEFAULT_PRODID,
    logger: Any = None,
) -> str:
    """Render events into one iCalendar document.

    Args:
        events: Validated events, in display order.
        now: Generation time written as DTSTAMP. Defaults to the current
            UTC time.
        prodid: PRODID property of the calendar.
        logger: Optional structlog logger; defaults to structlog.get_logger().

    Returns:
        The document, CRLF line endings, folded at 75 octets.
    """
    log = logger if logger is not None else structlog.get_logger()

    generated_at = now or datetime.now(timezone.utc)
    dtstamp = format_compact_utc(generated_at)

    lines = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        f"PRODID:{prodid}",
        "CALSCALE:GREGORIAN",
    ]

    written = 0
    skipped = 0
    for index, event in enumerate(events):
        dtstart = to_compact_utc(event.start_time)
        dtend = to_compact_utc(event.end_time)
        if dtstart is None or dtend is None:
            skipped += 1
            log.warning(
                "ics_event_skipped",
                index=index,
                title=event.title,
                start=event.start_time,
                end=event.end_time,
                reason="invalid_timestamp",
            )
            continue

        uid = f"smartschedule-{_PROCESS_STAMP_MS}-{index}@{UID_DOMAIN}"
        lines.extend(_vevent_lines(event, uid=uid, dtstamp=dtstamp, dtstart=dtstart, dtend=dtend))
        written += 1

    lines.append("END:VCALENDAR")

    log.info("ics_generated", events_written=written, events_skipped=skipped)
    return _CRLF.join(fold_line(line) for line in lines) + _CRLF
