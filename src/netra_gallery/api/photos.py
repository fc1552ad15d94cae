"""Photo endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from netra_gallery.api.errors import SERVER_ERROR, parse_id
from netra_gallery.api.gallery_models import PhotoCreate, PhotoOut
from netra_gallery.domain.photos import Photo  # noqa: TC001

if TYPE_CHECKING:
    from netra_gallery.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/photos", tags=["photos"])


@router.get("", response_model=list[PhotoOut])
async def list_photos(request: Request) -> list[Photo]:
    """Return all photos."""
    container: AppContainer = request.app.state.container
    return container.photo_service.list_all()


@router.get("/featured", response_model=list[PhotoOut])
async def list_featured_photos(request: Request) -> list[Photo]:
    """Return photos featured on the homepage."""
    container: AppContainer = request.app.state.container
    return container.photo_service.list_featured()


@router.get("/photographer/{photographer_id}", response_model=list[PhotoOut])
async def list_photos_by_photographer(
    photographer_id: str, request: Request
) -> list[Photo]:
    """Return photos taken by one photographer."""
    resolved_id = parse_id(photographer_id)
    container: AppContainer = request.app.state.container
    return container.photo_service.list_by_photographer(resolved_id)


@router.get("/category/{category_id}", response_model=list[PhotoOut])
async def list_photos_by_category(category_id: str, request: Request) -> list[Photo]:
    """Return photos in one category."""
    resolved_id = parse_id(category_id)
    container: AppContainer = request.app.state.container
    return container.photo_service.list_by_category(resolved_id)


@router.get("/{photo_id}", response_model=PhotoOut)
async def get_photo(photo_id: str, request: Request) -> Photo:
    """Return one photo."""
    resolved_id = parse_id(photo_id)
    container: AppContainer = request.app.state.container
    photo = container.photo_service.get(resolved_id)
    if photo is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Photo not found"
        )
    return photo


@router.post("", response_model=PhotoOut, status_code=status.HTTP_201_CREATED)
async def create_photo(payload: PhotoCreate, request: Request) -> Photo:
    """Add a photo; the server sets ``dateAdded``."""
    container: AppContainer = request.app.state.container
    try:
        return container.photo_service.create(payload.to_domain())
    except Exception as exc:
        logger.exception("Failed to create photo")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=SERVER_ERROR
        ) from exc
