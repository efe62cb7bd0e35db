"""Configuration management for Smart Schedule.

This module handles application configuration using Pydantic settings.
Configuration can be loaded from environment variables or .env files.
"""

from datetime import date
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support.

    All settings can be overridden via environment variables with
    the SMART_SCHEDULE_ prefix (e.g., SMART_SCHEDULE_OLLAMA_HOST).
    """

    model_config = SettingsConfigDict(
        env_prefix="SMART_SCHEDULE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Ollama Configuration
    ollama_host: str = Field(
        default="http://localhost:11434",
        description="Ollama API host URL",
    )
    ollama_model: str = Field(
        default="llava",
        description="Vision-capable Ollama model used to read timetable images",
    )
    ollama_timeout: int = Field(
        default=120,
        description="Timeout for Ollama API requests in seconds",
    )

    # Extraction Configuration
    reference_date: date | None = Field(
        default=None,
        description=(
            "Optional date inside the week the timetable describes. "
            "Passed to the model as a hint for resolving weekday rows."
        ),
    )
    allow_non_positive_duration: bool = Field(
        default=True,
        description="Keep events whose endTime is not after startTime (logged either way)",
    )

    # Export Configuration
    ics_prodid: str = Field(
        default="-//SmartSchedule//Event Exporter//EN",
        description="PRODID written into generated iCalendar documents",
    )

    # API Configuration
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"],
        description="Origins allowed to call the HTTP API from a browser",
    )

    # Application Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_json: bool = Field(
        default=False,
        description="Render log lines as JSON instead of the console format",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Returns:
        Settings: Application settings instance.
    """
    return Settings()
