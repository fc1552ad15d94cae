"""Category endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from netra_gallery.api.errors import (
    SERVER_ERROR,
    InvalidDataError,
    field_error,
    parse_id,
)
from netra_gallery.api.gallery_models import CategoryCreate, CategoryOut
from netra_gallery.domain.photos import Category  # noqa: TC001
from netra_gallery.services.categories import DuplicateCategoryError

if TYPE_CHECKING:
    from netra_gallery.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("", response_model=list[CategoryOut])
async def list_categories(request: Request) -> list[Category]:
    """Return all categories."""
    container: AppContainer = request.app.state.container
    return container.category_service.list_all()


@router.get("/{category_id}", response_model=CategoryOut)
async def get_category(category_id: str, request: Request) -> Category:
    """Return one category."""
    resolved_id = parse_id(category_id)
    container: AppContainer = request.app.state.container
    category = container.category_service.get(resolved_id)
    if category is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Category not found"
        )
    return category


@router.post("", response_model=CategoryOut, status_code=status.HTTP_201_CREATED)
async def create_category(payload: CategoryCreate, request: Request) -> Category:
    """Create a category with a unique name."""
    container: AppContainer = request.app.state.container
    try:
        return container.category_service.create(payload.to_domain())
    except DuplicateCategoryError as exc:
        raise InvalidDataError(
            [field_error(["name"], str(exc), "duplicate_name")]
        ) from exc
    except Exception as exc:
        logger.exception("Failed to create category")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=SERVER_ERROR
        ) from exc
