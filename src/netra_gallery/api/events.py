"""Exhibition event endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from netra_gallery.api.errors import SERVER_ERROR, parse_id
from netra_gallery.api.gallery_models import EventCreate, EventOut
from netra_gallery.domain.exhibitions import Event  # noqa: TC001

if TYPE_CHECKING:
    from netra_gallery.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/events", tags=["events"])


@router.get("/exhibition/{exhibition_id}", response_model=list[EventOut])
async def list_events_by_exhibition(
    exhibition_id: str, request: Request
) -> list[Event]:
    """Return the schedule for one exhibition."""
    resolved_id = parse_id(exhibition_id)
    container: AppContainer = request.app.state.container
    return container.event_service.list_by_exhibition(resolved_id)


@router.get("/{event_id}", response_model=EventOut)
async def get_event(event_id: str, request: Request) -> Event:
    """Return one event."""
    resolved_id = parse_id(event_id)
    container: AppContainer = request.app.state.container
    event = container.event_service.get(resolved_id)
    if event is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Event not found"
        )
    return event


@router.post("", response_model=EventOut, status_code=status.HTTP_201_CREATED)
async def create_event(payload: EventCreate, request: Request) -> Event:
    """Schedule an event."""
    container: AppContainer = request.app.state.container
    try:
        return container.event_service.create(payload.to_domain())
    except Exception as exc:
        logger.exception("Failed to create event")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=SERVER_ERROR
        ) from exc
