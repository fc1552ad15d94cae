"""Shared test fixtures."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import pytest

from netra_gallery.adapters.memory_store import InMemoryStore
from netra_gallery.config import Settings
from netra_gallery.containers import AppContainer, build_container

FIXED_NOW = datetime(2026, 10, 19, 12, tzinfo=UTC)


@dataclass
class FakeClock:
    """Settable clock for tests."""

    now: datetime = FIXED_NOW

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test")


@pytest.fixture
def empty_settings() -> Settings:
    return Settings(environment="test", seed_sample_data=False)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> InMemoryStore:
    return InMemoryStore(clock=clock)


@pytest.fixture
def container(settings: Settings, clock: FakeClock) -> AppContainer:
    return build_container(settings, clock=clock)


@pytest.fixture
def empty_container(empty_settings: Settings, clock: FakeClock) -> AppContainer:
    return build_container(empty_settings, clock=clock)
