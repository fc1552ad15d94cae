"""Services for photo categories."""

import logging
from dataclasses import dataclass
from typing import Protocol

from netra_gallery.domain.photos import Category, NewCategory

logger = logging.getLogger(__name__)


class DuplicateCategoryError(ValueError):
    """Raised when a category name is already taken."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Category '{name}' already exists")
        self.name = name


class CategoryRepository(Protocol):
    """Persistence interface for categories."""

    def get_category(self, category_id: int) -> Category | None:
        """Return a category by id, if present."""

    def get_category_by_name(self, name: str) -> Category | None:
        """Return a category by exact name, if present."""

    def list_categories(self) -> list[Category]:
        """Return all categories in insertion order."""

    def create_category(self, new_category: NewCategory) -> Category:
        """Create a category and return it."""


@dataclass
class CategoryService:
    """Application service for category operations."""

    repository: CategoryRepository

    def get(self, category_id: int) -> Category | None:
        """Return a category by id."""
        return self.repository.get_category(category_id)

    def list_all(self) -> list[Category]:
        """Return every category."""
        return self.repository.list_categories()

    def create(self, new_category: NewCategory) -> Category:
        """Create a category, rejecting names that are already in use."""
        if self.repository.get_category_by_name(new_category.name) is not None:
            raise DuplicateCategoryError(new_category.name)
        category = self.repository.create_category(new_category)
        logger.info("Created category %s (%s)", category.id, category.name)
        return category
