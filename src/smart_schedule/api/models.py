"""API models for the Smart Schedule HTTP surface."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from smart_schedule.models import Event


class ExtractRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    timetable_image_data_uri: str = Field(
        alias="timetableImageDataUri",
        description="Timetable image as data:<mimetype>;base64,<encoded_data>",
    )


class EventsRequest(BaseModel):
    events: list[Event]


class ExtractResponse(BaseModel):
    events: list[Event]
    # Aligned with events; None where no Google Calendar link can be built.
    links: list[str | None]


class LinksResponse(BaseModel):
    links: list[str | None]
