"""Google Calendar "add event" links.

See https://github.com/InteractionDesignFoundation/add-event-to-calendar-docs/blob/main/services/google.md
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any
from urllib.parse import quote

import structlog

from smart_schedule.models import Event
from smart_schedule.utils.timestamps import to_compact_utc

GOOGLE_CALENDAR_BASE_URL = "https://www.google.com/calendar/render?action=TEMPLATE"

# Characters encodeURIComponent leaves alone.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def build_google_calendar_link(event: Event, *, logger: Any = None) -> str | None:
    """Build a URL that pre-fills Google Calendar's event form.

    Args:
        event: The event to link.
        logger: Optional structlog logger; defaults to structlog.get_logger().

    Returns:
        The URL, or None if either timestamp does not parse. Callers should
        simply not offer the action for that event.
    """
    start = to_compact_utc(event.start_time)
    end = to_compact_utc(event.end_time)
    if start is None or end is None:
        log = logger if logger is not None else structlog.get_logger()
        log.warning(
            "calendar_link_skipped",
            title=event.title,
            start=event.start_time,
            end=event.end_time,
            reason="invalid_timestamp",
        )
        return None

    text = encode_uri_component(event.display_title)
    details = encode_uri_component(event.description or "")
    return f"{GOOGLE_CALENDAR_BASE_URL}&text={text}&dates={start}/{end}&details={details}"


def build_google_calendar_links(events: Iterable[Event], *, logger: Any = None) -> list[str | None]:
    """Build one link per event; entries are None where no link can be built."""
    return [build_google_calendar_link(event, logger=logger) for event in events]
