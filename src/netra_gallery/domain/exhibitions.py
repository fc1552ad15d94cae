"""Domain models for exhibitions and their events."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class NewExhibition:
    """Caller-supplied fields for an exhibition."""

    name: str
    description: str
    location: str
    start_date: datetime
    end_date: datetime
    cover_image: str
    map_url: str | None = None

    def to_record(self, exhibition_id: int) -> "Exhibition":
        """Return the stored exhibition for the assigned id."""
        return Exhibition(
            id=exhibition_id,
            name=self.name,
            description=self.description,
            location=self.location,
            start_date=self.start_date,
            end_date=self.end_date,
            cover_image=self.cover_image,
            map_url=self.map_url,
        )


@dataclass(frozen=True)
class Exhibition:
    """An exhibition run by the club."""

    id: int
    name: str
    description: str
    location: str
    start_date: datetime
    end_date: datetime
    cover_image: str
    map_url: str | None

    def is_running(self, now: datetime) -> bool:
        """Return whether ``now`` falls within the exhibition, ends inclusive."""
        return self.start_date <= now <= self.end_date


@dataclass(frozen=True)
class NewEvent:
    """Caller-supplied fields for an exhibition event."""

    exhibition_id: int
    name: str
    date: datetime
    time: str
    description: str | None = None

    def to_record(self, event_id: int) -> "Event":
        """Return the stored event for the assigned id."""
        return Event(
            id=event_id,
            exhibition_id=self.exhibition_id,
            name=self.name,
            description=self.description,
            date=self.date,
            time=self.time,
        )


@dataclass(frozen=True)
class Event:
    """A scheduled event within an exhibition."""

    id: int
    exhibition_id: int
    name: str
    description: str | None
    date: datetime
    time: str
