"""Tests for sample data seeding."""

import pytest

from netra_gallery.containers import AppContainer
from netra_gallery.services.categories import DuplicateCategoryError
from netra_gallery.services.seed import sample_photos, seed_sample_data


def test_seeded_photos_reference_seeded_records(container: AppContainer) -> None:
    photographer_ids = {
        photographer.id for photographer in container.photographer_service.list_all()
    }
    category_ids = {category.id for category in container.category_service.list_all()}

    photos = container.photo_service.list_all()

    assert len(photos) == len(sample_photos())
    assert {photo.photographer_id for photo in photos} <= photographer_ids
    assert {photo.category_id for photo in photos} <= category_ids


def test_seeded_events_belong_to_seeded_exhibition(container: AppContainer) -> None:
    exhibition = container.exhibition_service.list_all()[0]

    events = container.event_service.list_by_exhibition(exhibition.id)

    assert len(events) == 4
    assert all(
        exhibition.start_date <= event.date <= exhibition.end_date for event in events
    )


def test_seeding_can_be_disabled(empty_container: AppContainer) -> None:
    assert empty_container.photo_service.list_all() == []
    assert empty_container.exhibition_service.list_all() == []


def test_seeding_goes_through_category_service(container: AppContainer) -> None:
    with pytest.raises(DuplicateCategoryError):
        seed_sample_data(
            photographer_service=container.photographer_service,
            category_service=container.category_service,
            photo_service=container.photo_service,
            exhibition_service=container.exhibition_service,
            event_service=container.event_service,
        )

    assert len(container.category_service.list_all()) == 4
