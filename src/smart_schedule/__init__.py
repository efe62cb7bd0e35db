"""Smart Schedule - timetable images to calendar events.

This package extracts events from timetable images with an Ollama vision
model, validates them and exports them as iCalendar documents and Google
Calendar links.
"""

__version__ = "0.1.0"
__author__ = "Trickl"

from smart_schedule.config import Settings, get_settings

__all__ = ["Settings", "get_settings", "__version__", "__author__"]
