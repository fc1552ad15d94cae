"""Tests for exhibition and event endpoints."""

from datetime import UTC, datetime

from fastapi.testclient import TestClient

from netra_gallery.api.app import create_app
from netra_gallery.containers import AppContainer
from tests.conftest import FakeClock

EXHIBITION_PAYLOAD = {
    "name": "Prakash",
    "description": "Light studies",
    "location": "Main Hall",
    "startDate": "2026-12-01T09:00:00Z",
    "endDate": "2026-12-05T18:00:00Z",
    "coverImage": "cover.jpg",
}


def test_current_exhibition_follows_the_clock(
    container: AppContainer, clock: FakeClock
) -> None:
    client = TestClient(create_app(container))
    clock.now = datetime(2025, 4, 11, 15, tzinfo=UTC)

    running = client.get("/api/exhibitions/current")

    assert running.status_code == 200
    assert running.json()["name"] == "Drishya"

    clock.now = datetime(2025, 4, 14, tzinfo=UTC)
    finished = client.get("/api/exhibitions/current")

    assert finished.status_code == 404
    assert finished.json() == {"message": "No current exhibition found"}


def test_list_and_get_exhibition(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    listed = client.get("/api/exhibitions").json()
    single = client.get("/api/exhibitions/1").json()

    assert listed == [single]
    assert single["location"] == "University Arts Gallery, Utkansh Building"
    assert single["mapUrl"].startswith("https://www.google.com/maps/embed")
    assert client.get("/api/exhibitions/2").json() == {
        "message": "Exhibition not found"
    }
    assert client.get("/api/exhibitions/first").status_code == 400


def test_create_exhibition_and_read_it_back(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    created = client.post("/api/exhibitions", json=EXHIBITION_PAYLOAD)

    assert created.status_code == 201
    body = created.json()
    assert body["id"] == 2
    assert body["mapUrl"] is None
    assert datetime.fromisoformat(body["startDate"]) == datetime(
        2026, 12, 1, 9, tzinfo=UTC
    )
    assert client.get("/api/exhibitions/2").json() == body


def test_create_exhibition_treats_naive_dates_as_utc(
    container: AppContainer, clock: FakeClock
) -> None:
    client = TestClient(create_app(container))
    payload = {
        **EXHIBITION_PAYLOAD,
        "startDate": "2026-12-01T00:00:00",
        "endDate": "2026-12-02T00:00:00",
    }
    client.post("/api/exhibitions", json=payload)
    clock.now = datetime(2026, 12, 1, 12, tzinfo=UTC)

    response = client.get("/api/exhibitions/current")

    assert response.json()["name"] == "Prakash"


def test_create_exhibition_requires_dates(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    payload = {
        key: value
        for key, value in EXHIBITION_PAYLOAD.items()
        if key not in {"startDate", "endDate"}
    }

    response = client.post("/api/exhibitions", json=payload)

    assert response.status_code == 400
    fields = {error["field"] for error in response.json()["errors"]}
    assert fields == {"startDate", "endDate"}


def test_events_for_exhibition(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    events = client.get("/api/events/exhibition/1").json()

    assert [event["name"] for event in events] == [
        "Opening Ceremony",
        "Photography Workshop",
        "Panel Discussion",
        "Award Ceremony",
    ]
    assert all(event["exhibitionId"] == 1 for event in events)
    assert client.get("/api/events/exhibition/2").json() == []
    assert client.get("/api/events/exhibition/x").status_code == 400


def test_create_and_get_event(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    created = client.post(
        "/api/events",
        json={
            "exhibitionId": 1,
            "name": "Photo Walk",
            "date": "2025-04-12T07:00:00Z",
            "time": "7:00 AM",
        },
    )

    assert created.status_code == 201
    body = created.json()
    assert body["id"] == 5
    assert body["description"] is None
    assert client.get("/api/events/5").json() == body
    assert client.get("/api/events/6").json() == {"message": "Event not found"}


def test_create_event_requires_time(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/events",
        json={"exhibitionId": 1, "name": "Walk", "date": "2025-04-12T07:00:00Z"},
    )

    assert response.status_code == 400
    assert response.json()["errors"][0]["path"] == ["time"]


def test_create_exhibition_rejects_end_before_start(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    payload = {
        **EXHIBITION_PAYLOAD,
        "startDate": "2026-12-05T18:00:00Z",
        "endDate": "2026-12-01T09:00:00Z",
    }

    response = client.post("/api/exhibitions", json=payload)

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Invalid data"
    assert [error["field"] for error in body["errors"]] == ["endDate"]
    assert len(container.exhibition_service.list_all()) == 1
