"""Calendar exports: iCalendar documents and Google Calendar links."""

from smart_schedule.calendar.google_link import build_google_calendar_link, build_google_calendar_links
from smart_schedule.calendar.ics import ICS_FILENAME, ICS_MEDIA_TYPE, generate_ics

__all__ = [
    "ICS_FILENAME",
    "ICS_MEDIA_TYPE",
    "build_google_calendar_link",
    "build_google_calendar_links",
    "generate_ics",
]
