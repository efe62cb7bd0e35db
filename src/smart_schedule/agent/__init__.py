"""Extraction orchestration."""

from smart_schedule.agent.extractor import EventExtractor, EventSource

__all__ = ["EventExtractor", "EventSource"]
