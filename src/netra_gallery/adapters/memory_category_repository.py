"""In-memory category repository."""

from dataclasses import dataclass

from netra_gallery.adapters.memory_store import InMemoryStore
from netra_gallery.domain.photos import Category, NewCategory
from netra_gallery.services.categories import CategoryRepository


@dataclass
class InMemoryCategoryRepository(CategoryRepository):
    """Store-backed implementation for category persistence."""

    store: InMemoryStore

    def get_category(self, category_id: int) -> Category | None:
        return self.store.categories.get(category_id)

    def get_category_by_name(self, name: str) -> Category | None:
        return self.store.categories.first(lambda category: category.name == name)

    def list_categories(self) -> list[Category]:
        return self.store.categories.all()

    def create_category(self, new_category: NewCategory) -> Category:
        return self.store.categories.insert(new_category.to_record)
