"""Services for photographer profiles."""

import logging
from dataclasses import dataclass
from typing import Protocol

from netra_gallery.domain.photographers import NewPhotographer, Photographer

logger = logging.getLogger(__name__)


class PhotographerRepository(Protocol):
    """Persistence interface for photographers."""

    def get_photographer(self, photographer_id: int) -> Photographer | None:
        """Return a photographer by id, if present."""

    def list_photographers(self) -> list[Photographer]:
        """Return all photographers in insertion order."""

    def list_featured_photographers(self) -> list[Photographer]:
        """Return featured photographers in insertion order."""

    def create_photographer(self, new_photographer: NewPhotographer) -> Photographer:
        """Create a photographer and return it."""


@dataclass
class PhotographerService:
    """Application service for photographer operations."""

    repository: PhotographerRepository

    def get(self, photographer_id: int) -> Photographer | None:
        """Return a photographer by id."""
        return self.repository.get_photographer(photographer_id)

    def list_all(self) -> list[Photographer]:
        """Return every photographer."""
        return self.repository.list_photographers()

    def list_featured(self) -> list[Photographer]:
        """Return photographers flagged for the homepage."""
        return self.repository.list_featured_photographers()

    def create(self, new_photographer: NewPhotographer) -> Photographer:
        """Create a photographer profile."""
        photographer = self.repository.create_photographer(new_photographer)
        logger.info("Created photographer %s", photographer.id)
        return photographer
