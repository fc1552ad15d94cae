"""In-memory entity store.

Every entity kind lives in its own :class:`Arena`: an insertion-ordered
collection with a monotonic id counter. Ids start at 1 and are never reused.
The store holds no module-level state; build one per container.
"""

import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Generic, TypeVar

from netra_gallery.domain.exhibitions import Event, Exhibition
from netra_gallery.domain.models import UserRecord
from netra_gallery.domain.photographers import Photographer
from netra_gallery.domain.photos import Category, Photo
from netra_gallery.services.exhibitions import Clock, utc_now

T = TypeVar("T")


class Arena(Generic[T]):
    """Ordered records of one entity kind keyed by auto-increment id."""

    def __init__(self) -> None:
        self._records: dict[int, T] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def insert(self, build: Callable[[int], T]) -> T:
        """Assign the next id, build the record with it and store it.

        The id is consumed even if ``build`` raises.
        """
        with self._lock:
            record_id = self._next_id
            self._next_id += 1
            record = build(record_id)
            self._records[record_id] = record
        return record

    def get(self, record_id: int) -> T | None:
        """Return the record for an id, or None."""
        return self._records.get(record_id)

    def all(self) -> list[T]:
        """Return a snapshot of every record in insertion order."""
        return list(self._records.values())

    def filter(self, predicate: Callable[[T], bool]) -> list[T]:
        """Return records matching ``predicate`` in insertion order."""
        return [record for record in self.all() if predicate(record)]

    def first(self, predicate: Callable[[T], bool]) -> T | None:
        """Return the earliest inserted record matching ``predicate``."""
        return next((record for record in self.all() if predicate(record)), None)

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        return len(self._records)


@dataclass
class InMemoryStore:
    """Holds the arenas for every entity kind."""

    clock: Clock = field(default=utc_now)
    users: Arena[UserRecord] = field(default_factory=Arena)
    photographers: Arena[Photographer] = field(default_factory=Arena)
    categories: Arena[Category] = field(default_factory=Arena)
    photos: Arena[Photo] = field(default_factory=Arena)
    exhibitions: Arena[Exhibition] = field(default_factory=Arena)
    events: Arena[Event] = field(default_factory=Arena)

    def now(self) -> datetime:
        """Return the store's notion of the current instant."""
        return self.clock()
