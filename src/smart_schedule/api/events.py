"""Events API.

Provides the UI-facing surface: extract events from an uploaded timetable
image, then export them as an .ics download or Google Calendar links.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response

from smart_schedule.agent import EventExtractor
from smart_schedule.api.models import EventsRequest, ExtractRequest, ExtractResponse, LinksResponse
from smart_schedule.calendar import (
    ICS_FILENAME,
    ICS_MEDIA_TYPE,
    build_google_calendar_links,
    generate_ics,
)
from smart_schedule.config import get_settings
from smart_schedule.exceptions import ExtractionError, InvalidDataUriError
from smart_schedule.utils.data_uri import split_data_uri

router = APIRouter(prefix="/api/events", tags=["events"])


def get_extractor() -> EventExtractor:
    return EventExtractor(settings=get_settings())


@router.post("/extract", response_model=ExtractResponse)
async def extract_events(
    body: ExtractRequest,
    extractor: EventExtractor = Depends(get_extractor),
) -> ExtractResponse:
    try:
        split_data_uri(body.timetable_image_data_uri)
    except InvalidDataUriError as e:
        raise HTTPException(status_code=422, detail=f"Invalid image data URI: {e}") from e

    try:
        events = await extractor.extract_events(body.timetable_image_data_uri)
    except ExtractionError as e:
        # The cause is logged by the extractor; keep the client message generic.
        raise HTTPException(status_code=502, detail="Event extraction failed") from e

    return ExtractResponse(events=events, links=build_google_calendar_links(events))


@router.post("/ics")
def export_ics(body: EventsRequest) -> Response:
    content = generate_ics(body.events, prodid=get_settings().ics_prodid)
    return Response(
        content=content,
        media_type=ICS_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{ICS_FILENAME}"'},
    )


@router.post("/links", response_model=LinksResponse)
def export_links(body: EventsRequest) -> LinksResponse:
    return LinksResponse(links=build_google_calendar_links(body.events))
