"""Data models for Smart Schedule.

This module contains Pydantic models for data validation and serialization.
"""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

UNTITLED_EVENT = "Untitled Event"

# Lone UTF-16 surrogates; json.loads produces them from "\ud800" escapes.
_LONE_SURROGATE_RE = re.compile("[\ud800-\udfff]")


class RawEvent(BaseModel):
    """Event-like record as the vision model is asked to return it.

    Every field is optional because nothing the model returns is trusted.
    This model documents the contract (and provides its JSON schema); the
    validator works on the raw mappings rather than on instances of it.
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = Field(
        default=None,
        description="The title, subject name, or main label of the event (e.g. 'EH(IT-606)')",
    )
    start_time: str | None = Field(
        default=None,
        alias="startTime",
        description="Start as ISO 8601 UTC, e.g. '2025-04-28T10:00:00Z'",
    )
    end_time: str | None = Field(
        default=None,
        alias="endTime",
        description="End as ISO 8601 UTC, e.g. '2025-04-28T11:00:00Z'",
    )
    description: str | None = Field(
        default=None,
        description="Optional location, instructor, topic or notes",
    )


class Event(BaseModel):
    """A validated calendar event.

    Timestamps are kept as the canonical ``YYYY-MM-DDTHH:MM:SSZ`` strings they
    travel as. The model does not parse them; exporters re-check on use.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str = Field(description="Event title; blank titles export as 'Untitled Event'")
    start_time: str = Field(alias="startTime", description="Start instant, ISO 8601 UTC")
    end_time: str = Field(alias="endTime", description="End instant, ISO 8601 UTC")
    description: str = Field(default="", description="Free-form details, never None")

    @field_validator("title", "description", mode="before")
    @classmethod
    def _replace_lone_surrogates(cls, value):
        # Exported text is UTF-8; a lone surrogate becomes U+FFFD.
        if isinstance(value, str):
            return _LONE_SURROGATE_RE.sub("\ufffd", value)
        return value

    @property
    def display_title(self) -> str:
        """Title to show or export, falling back for blank titles."""
        return self.title if self.title.strip() else UNTITLED_EVENT

    def to_wire(self) -> dict[str, str]:
        """Return the camelCase wire shape used by the UI."""
        return self.model_dump(by_alias=True)


__all__ = ["Event", "RawEvent", "UNTITLED_EVENT"]
