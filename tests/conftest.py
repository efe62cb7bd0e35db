"""Pytest configuration and shared fixtures."""

import pytest
import structlog

# 1x1 transparent PNG.
TINY_PNG_BASE64 = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Keep cached settings from leaking between tests."""
    from smart_schedule.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Drop logging config bound to a per-test stream."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def mock_settings():
    """Provide mock settings for testing."""
    from smart_schedule.config import Settings

    return Settings(
        ollama_host="http://test:11434",
        ollama_model="test-model",
        log_level="DEBUG",
        debug=True,
    )


@pytest.fixture
def image_data_uri() -> str:
    """Provide a small, well-formed image data URI."""
    return f"data:image/png;base64,{TINY_PNG_BASE64}"


@pytest.fixture
def sample_raw_events() -> list:
    """Provide model output with a mix of valid and malformed records."""
    return [
        {
            "title": "EH(IT-606)",
            "startTime": "2025-04-28T10:00:00Z",
            "endTime": "2025-04-28T11:00:00Z",
        },
        {
            "title": "EC(EE-501)",
            "startTime": "2025-04-28T11:00:00Z",
        },
        {
            "title": "DBMS(IT-505)",
            "startTime": "2025-04-28T25:99:00Z",
            "endTime": "2025-04-28T13:00:00Z",
        },
        {
            "title": "CN(IT-503)",
            "startTime": "2025-04-29T14:00:00Z",
            "endTime": "2025-04-29T15:00:00Z",
            "description": "Room 204, Dr. Rao",
        },
    ]


@pytest.fixture
def sample_event():
    """Provide a single valid Event."""
    from smart_schedule.models import Event

    return Event(
        title="EH(IT-606)",
        start_time="2025-04-28T10:00:00Z",
        end_time="2025-04-28T11:00:00Z",
        description="",
    )
