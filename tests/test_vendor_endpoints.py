"""Tests for the vendor listing and dashboard endpoints."""

import pytest
from fastapi.testclient import TestClient

from memorial_tributes.api.app import create_app
from memorial_tributes.containers import AppContainer

LISTING = {"title": "Rose Florist", "category": "Florist", "location": "Springfield"}


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


def test_categories(client: TestClient) -> None:
    response = client.get("/api/vendor/categories")

    assert response.status_code == 200
    assert "Funeral Home" in response.json()["categories"]
    assert len(response.json()["categories"]) == 9


def test_listing_lifecycle(client: TestClient) -> None:
    created = client.post(
        "/api/vendor/listings", json=LISTING, headers={"X-User-Id": "vendor-1"}
    ).json()

    assert created["createdBy"] == "vendor-1"
    assert created["active"] is True

    updated = client.put(
        f"/api/vendor/listings/{created['id']}", json={"active": False}
    ).json()
    assert updated["active"] is False
    assert client.get("/api/vendor/listings", params={"active_only": True}).json() == []
    assert client.get(f"/api/vendor/listings/{created['id']}").json() == updated

    assert client.delete(f"/api/vendor/listings/{created['id']}").json() == {
        "success": True
    }
    missing = client.get(f"/api/vendor/listings/{created['id']}")
    assert missing.status_code == 404
    assert missing.json() == {"error": "Not found"}


def test_invalid_listing_is_rejected(client: TestClient) -> None:
    response = client.post("/api/vendor/listings", json={"title": "X"})

    assert response.status_code == 422
    assert response.json()["errors"] == [
        "Location is required.",
        "Category is required.",
    ]


def test_delete_missing_listing_returns_404(client: TestClient) -> None:
    response = client.delete("/api/vendor/listings/missing")

    assert response.status_code == 404
    assert response.json() == {"error": "Not found"}


def test_update_missing_listing_returns_404(client: TestClient) -> None:
    response = client.put("/api/vendor/listings/missing", json={"title": "X"})

    assert response.status_code == 404


def test_dashboard_requires_user(client: TestClient) -> None:
    assert client.get("/api/dashboard").status_code == 401
    assert client.get("/api/dashboard", headers={"X-User-Id": ""}).status_code == 401


def test_dashboard_for_user(client: TestClient) -> None:
    client.post("/api/tributes", json={"name": "Jane"}, headers={"X-User-Id": "u-1"})
    client.post("/api/vendor/listings", json=LISTING, headers={"X-User-Id": "u-1"})

    response = client.get("/api/dashboard", headers={"X-User-Id": "u-1"})

    assert response.status_code == 200
    body = response.json()
    assert body["user_id"] == "u-1"
    assert [tribute["name"] for tribute in body["tributes"]] == ["Jane"]
    assert [listing["title"] for listing in body["vendor_listings"]] == [
        "Rose Florist"
    ]
