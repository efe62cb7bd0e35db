"""Prompt contract for extracting events from a timetable image."""

from __future__ import annotations

from datetime import date, timedelta

PROMPT_VERSION = "timetable-extract-v3"

_WEEKDAYS = ("MON", "TUE", "WED", "THU", "FRI", "SAT", "SUN")


def _week_hint(reference_date: date) -> str:
    monday = reference_date - timedelta(days=reference_date.weekday())
    mapping = ", ".join(
        f"{name}={(monday + timedelta(days=offset)).isoformat()}" for offset, name in enumerate(_WEEKDAYS)
    )
    return (
        f"The timetable describes the week containing {reference_date.isoformat()}. "
        f"Resolve weekday rows or columns with this mapping: {mapping}.\n"
    )


def build_timetable_extraction_prompt(*, reference_date: date | None = None) -> str:
    """Build a prompt that requests strict JSON holding an array of events.

    We keep the schema small (title/startTime/endTime/description) so that
    parsing stays reliable; everything returned is validated afterwards.

    Args:
        reference_date: Optional date inside the week shown, used to turn
            weekday labels into calendar dates.

    Returns:
        Prompt string. The image itself is sent alongside it.
    """

    week = _week_hint(reference_date) if reference_date else ""

    return (
        "You are an assistant that extracts structured events from images of timetables, "
        "schedules, class routines, or calendars.\n\n"
        "Return ONLY valid JSON. No markdown. No code fences. No commentary.\n"
        "Return a JSON object of the form {\"events\": [...]} holding an array of event objects. "
        "If the image contains no discernible events, return {\"events\": []}.\n\n"
        "Each event object has these fields:\n"
        "- title: string (the course code, subject name or main label of the cell, copied exactly, e.g. \"EH(IT-606)\")\n"
        "- startTime: string, ISO 8601 UTC with a trailing Z and second precision, e.g. \"2025-04-28T10:00:00Z\"\n"
        "- endTime: string, same format as startTime\n"
        "- description: string|null (location, instructor, topic or notes if printed; otherwise null)\n\n"
        "Rules:\n"
        "- Combine the row/column day label with the time-slot header to build startTime and endTime.\n"
        "- Map time-slot headers to 24h times precisely (e.g. \"2-3PM\" is 14:00 to 15:00).\n"
        "- Do not extract breaks or free periods (cells holding a single letter such as L, U, N, C, H, "
        "or labelled lunch/break).\n"
        "- Use only information shown in the image. Do not invent events, rooms or instructors.\n"
        "- Every timestamp MUST end with Z. Do not use offsets like +05:30 and do not use fractional seconds.\n\n"
        f"{week}"
        "Example output:\n"
        '{"events": [{"title": "EH(IT-606)", "startTime": "2025-04-28T10:00:00Z", '
        '"endTime": "2025-04-28T11:00:00Z", "description": null}]}\n'
    )
