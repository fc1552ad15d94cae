"""Tests for the in-memory entity store."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from netra_gallery.adapters.memory_store import Arena, InMemoryStore
from netra_gallery.domain.photos import Category, NewCategory


def test_arena_assigns_increasing_ids_from_one() -> None:
    arena: Arena[Category] = Arena()

    first = arena.insert(NewCategory(name="Portrait").to_record)
    second = arena.insert(NewCategory(name="Street").to_record)

    assert first.id == 1
    assert second.id == 2
    assert arena.next_id == 3


def test_arena_get_returns_none_for_unknown_id() -> None:
    arena: Arena[Category] = Arena()

    assert arena.get(42) is None


def test_arena_consumes_id_when_build_fails() -> None:
    arena: Arena[Category] = Arena()

    def explode(_: int) -> Category:
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        arena.insert(explode)
    created = arena.insert(NewCategory(name="Macro").to_record)

    assert created.id == 2
    assert len(arena) == 1


def test_arena_filter_and_first_keep_insertion_order() -> None:
    arena: Arena[Category] = Arena()
    for name in ["Street", "Abstract", "Still life", "Astro"]:
        arena.insert(NewCategory(name=name).to_record)

    starts_with_a = arena.filter(lambda category: category.name.startswith("A"))

    assert [category.name for category in starts_with_a] == ["Abstract", "Astro"]
    assert arena.first(lambda category: category.name.startswith("A")) == (
        starts_with_a[0]
    )
    assert arena.first(lambda category: category.name == "Nope") is None


def test_arena_ids_stay_unique_under_concurrent_inserts() -> None:
    arena: Arena[Category] = Arena()

    def create(index: int) -> int:
        return arena.insert(NewCategory(name=f"c{index}").to_record).id

    with ThreadPoolExecutor(max_workers=8) as executor:
        ids = list(executor.map(create, range(200)))

    assert sorted(ids) == list(range(1, 201))
    assert [category.id for category in arena.all()] == sorted(ids)


def test_store_keeps_independent_counters_per_kind(store: InMemoryStore) -> None:
    store.categories.insert(NewCategory(name="Portrait").to_record)
    store.categories.insert(NewCategory(name="Street").to_record)

    assert store.categories.next_id == 3
    assert store.photographers.next_id == 1
    assert store.photos.next_id == 1


def test_arena_all_returns_a_snapshot() -> None:
    arena: Arena[Category] = Arena()
    arena.insert(NewCategory(name="Portrait").to_record)

    snapshot = arena.all()
    arena.insert(NewCategory(name="Street").to_record)

    assert len(snapshot) == 1
