"""Tests for the tribute API endpoints."""

import pytest
from fastapi.testclient import TestClient

from memorial_tributes.api.app import create_app
from memorial_tributes.containers import AppContainer


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_server_collection_starts_empty(client: TestClient) -> None:
    response = client.get("/api/tributes")

    assert response.status_code == 200
    assert response.json() == []


def test_create_assigns_id_timestamp_and_owner(client: TestClient) -> None:
    response = client.post(
        "/api/tributes",
        json={"id": "client-id", "name": "Jane Doe", "tags": ["mother"]},
        headers={"X-User-Id": "user-1"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == "1717243200000"
    assert body["id"] != "client-id"
    assert body["createdAt"] == "2024-06-01T12:00:01.000Z"
    assert body["createdBy"] == "user-1"
    assert client.get("/api/tributes").json() == [body]


def test_create_maps_legacy_fields(client: TestClient) -> None:
    response = client.post(
        "/api/tributes",
        json={
            "name": "Jane",
            "photoBase64": "iVBORw0KGgo=",
            "funeralLocation": "Chapel",
        },
    )

    body = response.json()
    assert body["photoUrl"] == "data:image/png;base64,iVBORw0KGgo="
    assert body["funeralDetails"]["location"] == "Chapel"
    assert "photoBase64" not in body
    assert "createdBy" not in body


def test_create_without_name_is_rejected(client: TestClient) -> None:
    response = client.post("/api/tributes", json={"name": "  "})

    assert response.status_code == 422
    assert response.json()["error"] == "Name is required."
    assert client.get("/api/tributes").json() == []


def test_create_with_invalid_field_type_is_rejected(client: TestClient) -> None:
    response = client.post("/api/tributes", json={"name": "Jane", "tags": "x"})

    assert response.status_code == 422
    assert response.json()["error"].startswith("Invalid payload")


def test_get_missing_tribute_returns_404(client: TestClient) -> None:
    response = client.get("/api/tributes/missing")

    assert response.status_code == 404
    assert response.json() == {"error": "Not found"}


def test_put_merges_and_keeps_owner(client: TestClient) -> None:
    created = client.post(
        "/api/tributes",
        json={"name": "Jane", "bio": "Nurse"},
        headers={"X-User-Id": "user-1"},
    ).json()

    response = client.put(
        f"/api/tributes/{created['id']}",
        json={"id": "other", "quote": "Always", "createdBy": None},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == created["id"]
    assert body["bio"] == "Nurse"
    assert body["quote"] == "Always"
    assert body["createdBy"] == "user-1"
    assert client.get(f"/api/tributes/{created['id']}").json() == body


def test_put_missing_tribute_returns_404(client: TestClient) -> None:
    response = client.put("/api/tributes/missing", json={"name": "X"})

    assert response.status_code == 404
    assert response.json() == {"error": "Not found"}


def test_delete_always_succeeds(client: TestClient) -> None:
    created = client.post("/api/tributes", json={"name": "Jane"}).json()

    first = client.delete(f"/api/tributes/{created['id']}")
    second = client.delete(f"/api/tributes/{created['id']}")

    assert first.json() == {"success": True}
    assert second.status_code == 200
    assert client.get("/api/tributes").json() == []


def test_rsvp_upserts_by_name(client: TestClient) -> None:
    created = client.post("/api/tributes", json={"name": "Jane"}).json()
    url = f"/api/tributes/{created['id']}/rsvp"

    client.post(url, json={"name": " Alice ", "attending": True})
    client.post(url, json={"name": "Bob", "attending": True})
    response = client.post(url, json={"name": "Alice", "attending": False})

    assert response.status_code == 200
    rsvps = response.json()["funeralDetails"]["rsvpList"]
    assert [(r["name"], r["attending"]) for r in rsvps] == [
        ("Alice", False),
        ("Bob", True),
    ]
    assert all(r["timestamp"].endswith("Z") for r in rsvps)


def test_rsvp_validation_and_not_found(client: TestClient) -> None:
    blank = client.post("/api/tributes/missing/rsvp", json={"name": ""})
    missing = client.post("/api/tributes/missing/rsvp", json={"name": "Alice"})

    assert blank.status_code == 422
    assert blank.json()["error"] == "Please enter your name before submitting."
    assert missing.status_code == 404


def test_put_with_legacy_fields_replaces_stored_values(client: TestClient) -> None:
    created = client.post(
        "/api/tributes",
        json={
            "name": "Jane",
            "photoUrl": "/old.jpg",
            "funeralDetails": {"dateTime": "2024-01-01T10:00", "location": "Chapel"},
        },
    ).json()

    response = client.put(
        f"/api/tributes/{created['id']}",
        json={"photoBase64": "iVBORw0KGgo=", "funeralDate": "2024-02-02T10:00"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["photoUrl"] == "data:image/png;base64,iVBORw0KGgo="
    assert body["funeralDetails"]["dateTime"] == "2024-02-02T10:00"
    assert body["funeralDetails"]["location"] == "Chapel"
    assert "photoBase64" not in body
    assert "funeralDate" not in body


def test_shutdown_closes_api_client(container: AppContainer) -> None:
    with TestClient(create_app(container)) as client:
        assert client.get("/health").status_code == 200

    assert container.tribute_api_client.http_client.is_closed
