"""Validation of event-like records returned by the vision model.

The model output is untrusted: records may be missing fields, carry the
wrong types or contain timestamps that do not describe a real instant. Each
record is checked on its own; a bad record is logged and dropped without
affecting the rest of the batch.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import structlog

from smart_schedule.exceptions import InvalidEventError
from smart_schedule.models import Event
from smart_schedule.utils.timestamps import parse_utc_timestamp

_REQUIRED_FIELDS = ("title", "startTime", "endTime")


def parse_candidate(candidate: Any) -> Event:
    """Turn a single raw record into an Event.

    Args:
        candidate: One element of the model's JSON array.

    Returns:
        The normalized Event.

    Raises:
        InvalidEventError: If the record is not an object, a required field is
            missing or not a string, or a timestamp is not ``YYYY-MM-DDTHH:MM:SSZ``.
    """
    if not isinstance(candidate, Mapping):
        raise InvalidEventError("not_an_object", f"expected an object, got {type(candidate).__name__}")

    for field in _REQUIRED_FIELDS:
        value = candidate.get(field)
        if value is None:
            raise InvalidEventError("missing_field", f"{field} is missing")
        if not isinstance(value, str):
            raise InvalidEventError("wrong_type", f"{field} must be a string")

    for field in ("startTime", "endTime"):
        if parse_utc_timestamp(candidate[field]) is None:
            raise InvalidEventError("invalid_timestamp", f"{field}={candidate[field]!r} is not YYYY-MM-DDTHH:MM:SSZ")

    description = candidate.get("description")
    if not isinstance(description, str):
        description = ""

    return Event(
        title=candidate["title"],
        start_time=candidate["startTime"],
        end_time=candidate["endTime"],
        description=description,
    )


def validate_events(
    candidates: Iterable[Any],
    *,
    allow_non_positive_duration: bool = True,
    logger: Any = None,
) -> list[Event]:
    """Filter raw model records down to valid Events, preserving order.

    Never raises for a malformed record; each rejection is logged as a
    warning with a ``reason`` field.

    Args:
        candidates: Records from the model, in the order returned.
        allow_non_positive_duration: Keep events whose end is not after their
            start. They are logged either way.
        logger: Optional structlog logger; defaults to structlog.get_logger().

    Returns:
        The valid events. Never longer than the input.
    """
    log = logger if logger is not None else structlog.get_logger()

    events: list[Event] = []
    total = 0
    for index, candidate in enumerate(candidates):
        total += 1
        try:
            event = parse_candidate(candidate)
        except InvalidEventError as e:
            log.warning("event_skipped", index=index, reason=e.reason, detail=str(e))
            continue

        start = parse_utc_timestamp(event.start_time)
        end = parse_utc_timestamp(event.end_time)
        if start is not None and end is not None and end <= start:
            if not allow_non_positive_duration:
                log.warning(
                    "event_skipped",
                    index=index,
                    reason="non_positive_duration",
                    start=event.start_time,
                    end=event.end_time,
                )
                continue
            log.warning(
                "event_non_positive_duration",
                index=index,
                start=event.start_time,
                end=event.end_time,
            )

        events.append(event)

    log.info("events_validated", received=total, accepted=len(events), dropped=total - len(events))
    return events
