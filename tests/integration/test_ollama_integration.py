"""Integration tests with Ollama.

These tests require a running Ollama instance with a vision model pulled.
Enable them with ``SMART_SCHEDULE_OLLAMA_INTEGRATION=1``.
"""

import os

import pytest

from smart_schedule.agent import EventExtractor
from smart_schedule.config import Settings
from smart_schedule.ollama.client import OllamaClient
from smart_schedule.utils.timestamps import is_valid_utc_timestamp

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        os.environ.get("SMART_SCHEDULE_OLLAMA_INTEGRATION") != "1",
        reason="set SMART_SCHEDULE_OLLAMA_INTEGRATION=1 to run against a live Ollama",
    ),
]


class TestOllamaIntegration:
    """Integration tests for Ollama LLM."""

    @pytest.mark.asyncio
    async def test_ollama_connection(self) -> None:
        """Test a plain completion against the configured model."""
        client = OllamaClient(Settings())

        response = await client.generate("Reply with the single word: ok")

        assert isinstance(response.get("response"), str)

    @pytest.mark.asyncio
    async def test_extract_events_from_image(self, image_data_uri) -> None:
        """Test that a real extraction completes and yields only valid events."""
        extractor = EventExtractor(settings=Settings())

        events = await extractor.extract_events(image_data_uri)

        assert isinstance(events, list)
        for event in events:
            assert is_valid_utc_timestamp(event.start_time)
            assert is_valid_utc_timestamp(event.end_time)
