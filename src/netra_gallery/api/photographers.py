"""Photographer endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from netra_gallery.api.errors import SERVER_ERROR, parse_id
from netra_gallery.api.gallery_models import PhotographerCreate, PhotographerOut
from netra_gallery.domain.photographers import Photographer  # noqa: TC001

if TYPE_CHECKING:
    from netra_gallery.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/photographers", tags=["photographers"])


@router.get("", response_model=list[PhotographerOut])
async def list_photographers(request: Request) -> list[Photographer]:
    """Return all photographers."""
    container: AppContainer = request.app.state.container
    return container.photographer_service.list_all()


@router.get("/featured", response_model=list[PhotographerOut])
async def list_featured_photographers(request: Request) -> list[Photographer]:
    """Return photographers featured on the homepage."""
    container: AppContainer = request.app.state.container
    return container.photographer_service.list_featured()


@router.get("/{photographer_id}", response_model=PhotographerOut)
async def get_photographer(photographer_id: str, request: Request) -> Photographer:
    """Return one photographer."""
    resolved_id = parse_id(photographer_id)
    container: AppContainer = request.app.state.container
    photographer = container.photographer_service.get(resolved_id)
    if photographer is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Photographer not found"
        )
    return photographer


@router.post(
    "", response_model=PhotographerOut, status_code=status.HTTP_201_CREATED
)
async def create_photographer(
    payload: PhotographerCreate, request: Request
) -> Photographer:
    """Create a photographer profile."""
    container: AppContainer = request.app.state.container
    try:
        return container.photographer_service.create(payload.to_domain())
    except Exception as exc:
        logger.exception("Failed to create photographer")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=SERVER_ERROR
        ) from exc
