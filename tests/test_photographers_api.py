"""Tests for photographer endpoints."""

from fastapi.testclient import TestClient

from netra_gallery.api.app import create_app
from netra_gallery.containers import AppContainer


def test_list_photographers_returns_seeded_profiles(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/api/photographers")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    data = response.json()
    assert [item["name"] for item in data] == [
        "Aanya Sharma",
        "Vikram Nair",
        "Zara Patel",
    ]
    assert data[0]["profileImage"].startswith("https://images.unsplash.com/")
    assert data[0]["instagram"] == "@aanya.frames"


def test_featured_photographers(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    client.post(
        "/api/photographers",
        json={"name": "Dev", "bio": "Macro shooter", "profileImage": "dev.jpg"},
    )

    response = client.get("/api/photographers/featured")

    assert response.status_code == 200
    assert all(item["featured"] for item in response.json())
    assert len(response.json()) == 3


def test_get_photographer_by_id(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/api/photographers/2")

    assert response.status_code == 200
    assert response.json()["name"] == "Vikram Nair"


def test_get_photographer_rejects_non_integer_id(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    for raw in ["abc", "12abc", "1.5", "1_0"]:
        response = client.get(f"/api/photographers/{raw}")
        assert response.status_code == 400
        assert response.json() == {"message": "Invalid ID format"}


def test_get_unknown_photographer_returns_404(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/api/photographers/9999")

    assert response.status_code == 404
    assert response.json() == {"message": "Photographer not found"}


def test_create_photographer_defaults_optional_fields(
    empty_container: AppContainer,
) -> None:
    client = TestClient(create_app(empty_container))

    response = client.post(
        "/api/photographers",
        json={"name": "Dev", "bio": "Macro shooter", "profileImage": "dev.jpg"},
    )

    assert response.status_code == 201
    assert response.json() == {
        "id": 1,
        "name": "Dev",
        "bio": "Macro shooter",
        "profileImage": "dev.jpg",
        "instagram": None,
        "email": None,
        "featured": False,
    }


def test_create_photographer_reports_each_missing_field(
    container: AppContainer,
) -> None:
    client = TestClient(create_app(container))

    response = client.post("/api/photographers", json={"name": "Dev"})

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Invalid data"
    fields = {error["field"] for error in body["errors"]}
    assert fields == {"bio", "profileImage"}


def test_get_photographer_rejects_overlong_digit_id(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/api/photographers/" + "1" * 5000)

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid ID format"}
