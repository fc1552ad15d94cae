"""Exhibition endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from netra_gallery.api.errors import SERVER_ERROR, parse_id
from netra_gallery.api.gallery_models import ExhibitionCreate, ExhibitionOut
from netra_gallery.domain.exhibitions import Exhibition  # noqa: TC001

if TYPE_CHECKING:
    from netra_gallery.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/exhibitions", tags=["exhibitions"])


@router.get("", response_model=list[ExhibitionOut])
async def list_exhibitions(request: Request) -> list[Exhibition]:
    """Return all exhibitions."""
    container: AppContainer = request.app.state.container
    return container.exhibition_service.list_all()


@router.get("/current", response_model=ExhibitionOut)
async def get_current_exhibition(request: Request) -> Exhibition:
    """Return the exhibition running now."""
    container: AppContainer = request.app.state.container
    exhibition = container.exhibition_service.get_current()
    if exhibition is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No current exhibition found",
        )
    return exhibition


@router.get("/{exhibition_id}", response_model=ExhibitionOut)
async def get_exhibition(exhibition_id: str, request: Request) -> Exhibition:
    """Return one exhibition."""
    resolved_id = parse_id(exhibition_id)
    container: AppContainer = request.app.state.container
    exhibition = container.exhibition_service.get(resolved_id)
    if exhibition is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Exhibition not found"
        )
    return exhibition


@router.post(
    "", response_model=ExhibitionOut, status_code=status.HTTP_201_CREATED
)
async def create_exhibition(
    payload: ExhibitionCreate, request: Request
) -> Exhibition:
    """Create an exhibition."""
    container: AppContainer = request.app.state.container
    try:
        return container.exhibition_service.create(payload.to_domain())
    except Exception as exc:
        logger.exception("Failed to create exhibition")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=SERVER_ERROR
        ) from exc
