"""Event extraction orchestration.

This module provides the agent that runs one timetable image through the
vision model and the validator.
"""

from __future__ import annotations

from typing import Any, Protocol

import structlog

from smart_schedule.config import Settings
from smart_schedule.exceptions import ExtractionError
from smart_schedule.models import Event
from smart_schedule.validation import validate_events


class EventSource(Protocol):
    """Anything that can turn an image data URI into raw event-like records."""

    async def extract_raw_events(self, image_data_uri: str) -> Any: ...


class EventExtractor:
    """Extract validated events from a timetable image.

    A successful call returns a (possibly empty) list. A failure of the
    event source raises ``ExtractionError`` so callers can tell
    "no events found" apart from "extraction failed".
    """

    def __init__(
        self,
        source: EventSource | None = None,
        settings: Settings | None = None,
        logger: Any = None,
    ) -> None:
        """Initialize the extractor.

        Args:
            source: Event source. If None, creates an OllamaClient.
            settings: Application settings. If None, uses default settings.
            logger: Optional structlog logger; defaults to structlog.get_logger().
        """
        from smart_schedule.config import get_settings

        self.settings = settings or get_settings()
        if source is None:
            from smart_schedule.ollama.client import OllamaClient

            source = OllamaClient(self.settings)
        self.source = source
        self.logger = logger if logger is not None else structlog.get_logger()
        self.logger.info("event_extractor_initialized", source=type(source).__name__)

    async def extract_events(self, image_data_uri: str) -> list[Event]:
        """Extract events from an image.

        Args:
            image_data_uri: ``data:<mimetype>;base64,<encoded_data>``.

        Returns:
            Validated events in the order the model returned them.

        Raises:
            ExtractionError: If the event source fails. Not retried.
        """
        self.logger.info("event_extraction_started", uri_length=len(image_data_uri))

        try:
            raw = await self.source.extract_raw_events(image_data_uri)
        except Exception as e:
            self.logger.error("event_extraction_failed", error=str(e), error_type=type(e).__name__)
            raise ExtractionError(f"Event extraction failed: {e}") from e

        if not isinstance(raw, list):
            self.logger.warning("event_source_returned_non_list", result_type=type(raw).__name__)
            raw = []

        events = validate_events(
            raw,
            allow_non_positive_duration=self.settings.allow_non_positive_duration,
            logger=self.logger,
        )
        self.logger.info("event_extraction_finished", extracted=len(raw), valid=len(events))
        return events
