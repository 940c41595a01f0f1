"""
Tests for the book item API endpoints.

Uses FastAPI's TestClient against the real application; no state is kept
between requests.
"""

import pytest
from fastapi.testclient import TestClient

from bookstore.main import app
from bookstore.api.v1.dependencies import reset_dependencies

VALID_ISNI = "0000000121032683"


@pytest.fixture
def client():
    reset_dependencies()
    yield TestClient(app)
    reset_dependencies()


def item_payload(**overrides) -> dict:
    payload = {
        "author_name": "Bill Wagner",
        "title": "Effective C#",
        "publisher": "Addison-Wesley",
        "isbn": "0321245660",
        "price": "15.50",
        "currency": "USD",
        "amount": 3,
    }
    payload.update(overrides)
    return payload


class TestPreviewBookItem:
    """Tests for POST /api/v1/book-items/preview."""

    def test_preview_without_isni(self, client):
        """An item without ISNI has no isni.org link."""
        response = client.post("/api/v1/book-items/preview", json={"item": item_payload()})

        assert response.status_code == 200
        body = response.json()
        assert body["has_isni"] is False
        assert body["isni"] is None
        assert body["isni_uri"] is None
        assert body["isbn_search_uri"] == "https://isbnsearch.org/isbn/0321245660"
        assert body["display"] == "Effective C#, Bill Wagner, ISNI IS NOT SET, 15.50 USD, 3"
        assert body["book_binding"] == ""

    def test_preview_with_isni(self, client):
        """An item with ISNI gets its isni.org link and shows the ISNI."""
        response = client.post(
            "/api/v1/book-items/preview",
            json={"item": item_payload(isni=VALID_ISNI)},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["has_isni"] is True
        assert body["isni_uri"] == f"https://isni.org/isni/{VALID_ISNI}"
        assert body["display"].startswith(f"Effective C#, Bill Wagner, {VALID_ISNI}, ")

    def test_preview_with_update(self, client):
        """The update is applied before the item is rendered."""
        response = client.post(
            "/api/v1/book-items/preview",
            json={"item": item_payload(), "update": {"price": "1500.00"}},
        )

        assert response.status_code == 200
        assert response.json()["display"] == (
            'Effective C#, Bill Wagner, ISNI IS NOT SET, "1,500.00" USD, 3'
        )

    def test_invalid_isbn_returns_400(self, client):
        """A bad ISBN checksum is reported as a 400 naming the field."""
        response = client.post(
            "/api/v1/book-items/preview",
            json={"item": item_payload(isbn="0321245661")},
        )

        assert response.status_code == 400
        assert response.json()["detail"]["field"] == "isbn"

    def test_negative_amount_returns_400(self, client):
        """A negative amount in the update is reported as a 400."""
        response = client.post(
            "/api/v1/book-items/preview",
            json={"item": item_payload(), "update": {"amount": -1}},
        )

        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["field"] == "amount"
        assert detail["reason"] == "cannot be negative"

    def test_very_large_price_renders(self, client):
        """Prices beyond the default decimal precision do not fail the request."""
        response = client.post(
            "/api/v1/book-items/preview",
            json={"item": item_payload(price="1e26")},
        )

        assert response.status_code == 200
        expected_price = "100" + ",000" * 8 + ".00"
        assert response.json()["display"] == (
            f'Effective C#, Bill Wagner, ISNI IS NOT SET, "{expected_price}" USD, 3'
        )

    def test_null_published_in_update_clears_date(self, client):
        """An explicit null clears the date, an omitted field keeps it."""
        item = item_payload(published="2016-12-01T00:00:00")

        kept = client.post(
            "/api/v1/book-items/preview",
            json={"item": item, "update": {"amount": 1}},
        )
        cleared = client.post(
            "/api/v1/book-items/preview",
            json={"item": item, "update": {"published": None}},
        )

        assert kept.status_code == 200
        assert kept.json()["published"] == "2016-12-01T00:00:00"
        assert cleared.status_code == 200
        assert cleared.json()["published"] is None

    def test_null_price_in_update_returns_400(self, client):
        """An explicit null price is rejected by the domain."""
        response = client.post(
            "/api/v1/book-items/preview",
            json={"item": item_payload(), "update": {"price": None}},
        )

        assert response.status_code == 400
        assert response.json()["detail"]["field"] == "price"

    def test_missing_required_field_returns_422(self, client):
        """Request bodies missing required fields fail schema validation."""
        payload = item_payload()
        del payload["isbn"]

        response = client.post("/api/v1/book-items/preview", json={"item": payload})

        assert response.status_code == 422


class TestCheckIsbn:
    """Tests for GET /api/v1/isbn/{isbn}."""

    def test_valid_isbn(self, client):
        """A valid ISBN comes back with its search link."""
        response = client.get("/api/v1/isbn/0306406152")

        assert response.status_code == 200
        assert response.json() == {
            "isbn": "0306406152",
            "valid": True,
            "search_uri": "https://isbnsearch.org/isbn/0306406152",
        }

    def test_invalid_isbn(self, client):
        """An invalid ISBN has no search link."""
        response = client.get("/api/v1/isbn/0306406153")

        assert response.status_code == 200
        assert response.json()["valid"] is False
        assert response.json()["search_uri"] is None


def test_health(client):
    """The health endpoint always reports ok."""
    response = client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
