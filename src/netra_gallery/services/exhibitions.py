"""Services for exhibitions and their events."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol

from netra_gallery.domain.exhibitions import Event, Exhibition, NewEvent, NewExhibition

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Return the current time in UTC."""
    return datetime.now(tz=UTC)


class ExhibitionRepository(Protocol):
    """Persistence interface for exhibitions."""

    def get_exhibition(self, exhibition_id: int) -> Exhibition | None:
        """Return an exhibition by id, if present."""

    def list_exhibitions(self) -> list[Exhibition]:
        """Return all exhibitions in insertion order."""

    def find_running_exhibition(self, now: datetime) -> Exhibition | None:
        """Return the first exhibition whose dates contain ``now``."""

    def create_exhibition(self, new_exhibition: NewExhibition) -> Exhibition:
        """Create an exhibition and return it."""


class EventRepository(Protocol):
    """Persistence interface for exhibition events."""

    def get_event(self, event_id: int) -> Event | None:
        """Return an event by id, if present."""

    def list_events_by_exhibition(self, exhibition_id: int) -> list[Event]:
        """Return events belonging to an exhibition."""

    def create_event(self, new_event: NewEvent) -> Event:
        """Create an event and return it."""


@dataclass
class ExhibitionService:
    """Application service for exhibition operations."""

    repository: ExhibitionRepository
    clock: Clock = field(default=utc_now)

    def get(self, exhibition_id: int) -> Exhibition | None:
        """Return an exhibition by id."""
        return self.repository.get_exhibition(exhibition_id)

    def list_all(self) -> list[Exhibition]:
        """Return every exhibition."""
        return self.repository.list_exhibitions()

    def get_current(self) -> Exhibition | None:
        """Return the exhibition running right now, if any."""
        return self.repository.find_running_exhibition(self.clock())

    def create(self, new_exhibition: NewExhibition) -> Exhibition:
        """Create an exhibition."""
        exhibition = self.repository.create_exhibition(new_exhibition)
        logger.info("Created exhibition %s (%s)", exhibition.id, exhibition.name)
        return exhibition


@dataclass
class EventService:
    """Application service for exhibition events."""

    repository: EventRepository

    def get(self, event_id: int) -> Event | None:
        """Return an event by id."""
        return self.repository.get_event(event_id)

    def list_by_exhibition(self, exhibition_id: int) -> list[Event]:
        """Return the schedule for an exhibition."""
        return self.repository.list_events_by_exhibition(exhibition_id)

    def create(self, new_event: NewEvent) -> Event:
        """Create an event. The exhibition id is not checked."""
        event = self.repository.create_event(new_event)
        logger.info(
            "Created event %s for exhibition %s", event.id, event.exhibition_id
        )
        return event
