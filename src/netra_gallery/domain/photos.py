"""Domain models for photos and the categories they are filed under."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class NewCategory:
    """Caller-supplied fields for a category."""

    name: str
    description: str | None = None

    def to_record(self, category_id: int) -> "Category":
        """Return the stored category for the assigned id."""
        return Category(id=category_id, name=self.name, description=self.description)


@dataclass(frozen=True)
class Category:
    """A photo category such as Portrait or Landscape."""

    id: int
    name: str
    description: str | None


@dataclass(frozen=True)
class NewPhoto:
    """Caller-supplied fields for a photo.

    ``date_added`` is assigned by the store.
    """

    title: str
    image_url: str
    thumbnail_url: str
    photographer_id: int
    category_id: int
    description: str | None = None
    featured: bool = False

    def to_record(self, photo_id: int, date_added: datetime) -> "Photo":
        """Return the stored photo for the assigned id and timestamp."""
        return Photo(
            id=photo_id,
            title=self.title,
            description=self.description,
            image_url=self.image_url,
            thumbnail_url=self.thumbnail_url,
            photographer_id=self.photographer_id,
            category_id=self.category_id,
            featured=self.featured,
            date_added=date_added,
        )


@dataclass(frozen=True)
class Photo:
    """A photo in the gallery."""

    id: int
    title: str
    description: str | None
    image_url: str
    thumbnail_url: str
    photographer_id: int
    category_id: int
    featured: bool
    date_added: datetime
