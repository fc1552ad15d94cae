"""In-memory photo repository."""

from dataclasses import dataclass

from netra_gallery.adapters.memory_store import InMemoryStore
from netra_gallery.domain.photos import NewPhoto, Photo
from netra_gallery.services.photos import PhotoRepository


@dataclass
class InMemoryPhotoRepository(PhotoRepository):
    """Store-backed implementation for photo persistence."""

    store: InMemoryStore

    def get_photo(self, photo_id: int) -> Photo | None:
        """Return a photo by id, if present."""
        return self.store.photos.get(photo_id)

    def list_photos(self) -> list[Photo]:
        """Return all photos."""
        return self.store.photos.all()

    def list_photos_by_category(self, category_id: int) -> list[Photo]:
        """Return photos whose category id matches exactly."""
        return self.store.photos.filter(lambda photo: photo.category_id == category_id)

    def list_photos_by_photographer(self, photographer_id: int) -> list[Photo]:
        """Return photos whose photographer id matches exactly."""
        return self.store.photos.filter(
            lambda photo: photo.photographer_id == photographer_id
        )

    def list_featured_photos(self) -> list[Photo]:
        """Return photos with the featured flag set."""
        return self.store.photos.filter(lambda photo: photo.featured)

    def create_photo(self, new_photo: NewPhoto) -> Photo:
        """Insert a photo stamped with the store clock."""
        date_added = self.store.now()
        return self.store.photos.insert(
            lambda photo_id: new_photo.to_record(photo_id, date_added)
        )
