"""Services for gallery photos."""

import logging
from dataclasses import dataclass
from typing import Protocol

from netra_gallery.domain.photos import NewPhoto, Photo

logger = logging.getLogger(__name__)


class PhotoRepository(Protocol):
    """Persistence interface for photos."""

    def get_photo(self, photo_id: int) -> Photo | None:
        """Return a photo by id, if present."""

    def list_photos(self) -> list[Photo]:
        """Return all photos in insertion order."""

    def list_photos_by_category(self, category_id: int) -> list[Photo]:
        """Return photos filed under a category."""

    def list_photos_by_photographer(self, photographer_id: int) -> list[Photo]:
        """Return photos taken by a photographer."""

    def list_featured_photos(self) -> list[Photo]:
        """Return featured photos."""

    def create_photo(self, new_photo: NewPhoto) -> Photo:
        """Create a photo, stamping its date added, and return it."""


@dataclass
class PhotoService:
    """Application service for photo queries and uploads."""

    repository: PhotoRepository

    def get(self, photo_id: int) -> Photo | None:
        """Return a photo by id."""
        return self.repository.get_photo(photo_id)

    def list_all(self) -> list[Photo]:
        """Return every photo."""
        return self.repository.list_photos()

    def list_by_category(self, category_id: int) -> list[Photo]:
        """Return photos for a category id; unknown ids give an empty list."""
        return self.repository.list_photos_by_category(category_id)

    def list_by_photographer(self, photographer_id: int) -> list[Photo]:
        """Return photos for a photographer id."""
        return self.repository.list_photos_by_photographer(photographer_id)

    def list_featured(self) -> list[Photo]:
        """Return photos flagged for the homepage grid."""
        return self.repository.list_featured_photos()

    def create(self, new_photo: NewPhoto) -> Photo:
        """Add a photo. Photographer and category ids are not checked."""
        photo = self.repository.create_photo(new_photo)
        logger.info(
            "Created photo %s for photographer %s",
            photo.id,
            photo.photographer_id,
        )
        return photo
