"""In-memory photographer repository."""

from dataclasses import dataclass

from netra_gallery.adapters.memory_store import InMemoryStore
from netra_gallery.domain.photographers import NewPhotographer, Photographer
from netra_gallery.services.photographers import PhotographerRepository


@dataclass
class InMemoryPhotographerRepository(PhotographerRepository):
    """Store-backed implementation for photographer persistence."""

    store: InMemoryStore

    def get_photographer(self, photographer_id: int) -> Photographer | None:
        """Return a photographer by id, if present."""
        return self.store.photographers.get(photographer_id)

    def list_photographers(self) -> list[Photographer]:
        """Return all photographers."""
        return self.store.photographers.all()

    def list_featured_photographers(self) -> list[Photographer]:
        """Return photographers with the featured flag set."""
        return self.store.photographers.filter(lambda item: item.featured)

    def create_photographer(self, new_photographer: NewPhotographer) -> Photographer:
        """Insert a photographer with the next id."""
        return self.store.photographers.insert(new_photographer.to_record)
