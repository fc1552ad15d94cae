"""Dependency container wiring for the application."""

from dataclasses import dataclass

from netra_gallery.adapters.memory_category_repository import (
    InMemoryCategoryRepository,
)
from netra_gallery.adapters.memory_exhibition_repository import (
    InMemoryEventRepository,
    InMemoryExhibitionRepository,
)
from netra_gallery.adapters.memory_photo_repository import InMemoryPhotoRepository
from netra_gallery.adapters.memory_photographer_repository import (
    InMemoryPhotographerRepository,
)
from netra_gallery.adapters.memory_store import InMemoryStore
from netra_gallery.adapters.memory_user_repository import InMemoryUserRepository
from netra_gallery.config import Settings
from netra_gallery.services.categories import CategoryService
from netra_gallery.services.exhibitions import (
    Clock,
    EventService,
    ExhibitionService,
    utc_now,
)
from netra_gallery.services.photographers import PhotographerService
from netra_gallery.services.photos import PhotoService
from netra_gallery.services.seed import seed_sample_data
from netra_gallery.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    store: InMemoryStore
    user_service: UserService
    photographer_service: PhotographerService
    category_service: CategoryService
    photo_service: PhotoService
    exhibition_service: ExhibitionService
    event_service: EventService


def build_container(
    settings: Settings | None = None, clock: Clock = utc_now
) -> AppContainer:
    """Create the default dependency container around a fresh store."""
    resolved_settings = settings or Settings()
    store = InMemoryStore(clock=clock)
    container = AppContainer(
        settings=resolved_settings,
        store=store,
        user_service=UserService(InMemoryUserRepository(store)),
        photographer_service=PhotographerService(
            InMemoryPhotographerRepository(store)
        ),
        category_service=CategoryService(InMemoryCategoryRepository(store)),
        photo_service=PhotoService(InMemoryPhotoRepository(store)),
        exhibition_service=ExhibitionService(
            InMemoryExhibitionRepository(store), clock=clock
        ),
        event_service=EventService(InMemoryEventRepository(store)),
    )
    if resolved_settings.seed_sample_data:
        seed_sample_data(
            photographer_service=container.photographer_service,
            category_service=container.category_service,
            photo_service=container.photo_service,
            exhibition_service=container.exhibition_service,
            event_service=container.event_service,
        )
    return container
