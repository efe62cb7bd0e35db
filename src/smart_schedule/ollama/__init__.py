"""Ollama vision model integration."""

from smart_schedule.ollama.client import OllamaClient
from smart_schedule.ollama.prompt import PROMPT_VERSION, build_timetable_extraction_prompt

__all__ = ["OllamaClient", "PROMPT_VERSION", "build_timetable_extraction_prompt"]
