"""In-memory exhibition and event repositories."""

from dataclasses import dataclass
from datetime import datetime

from netra_gallery.adapters.memory_store import InMemoryStore
from netra_gallery.domain.exhibitions import Event, Exhibition, NewEvent, NewExhibition
from netra_gallery.services.exhibitions import EventRepository, ExhibitionRepository


@dataclass
class InMemoryExhibitionRepository(ExhibitionRepository):
    """Store-backed implementation for exhibition persistence."""

    store: InMemoryStore

    def get_exhibition(self, exhibition_id: int) -> Exhibition | None:
        """Return an exhibition by id, if present."""
        return self.store.exhibitions.get(exhibition_id)

    def list_exhibitions(self) -> list[Exhibition]:
        """Return all exhibitions."""
        return self.store.exhibitions.all()

    def find_running_exhibition(self, now: datetime) -> Exhibition | None:
        """Return the first exhibition running at ``now``."""
        return self.store.exhibitions.first(
            lambda exhibition: exhibition.is_running(now)
        )

    def create_exhibition(self, new_exhibition: NewExhibition) -> Exhibition:
        """Insert an exhibition with the next id."""
        return self.store.exhibitions.insert(new_exhibition.to_record)


@dataclass
class InMemoryEventRepository(EventRepository):
    """Store-backed implementation for event persistence."""

    store: InMemoryStore

    def get_event(self, event_id: int) -> Event | None:
        """Return an event by id, if present."""
        return self.store.events.get(event_id)

    def list_events_by_exhibition(self, exhibition_id: int) -> list[Event]:
        """Return events whose exhibition id matches exactly."""
        return self.store.events.filter(
            lambda event: event.exhibition_id == exhibition_id
        )

    def create_event(self, new_event: NewEvent) -> Event:
        """Insert an event with the next id."""
        return self.store.events.insert(new_event.to_record)
