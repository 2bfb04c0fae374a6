"""Tests for health check, request middleware and app wiring."""

import inspect

from fastapi.routing import APIRoute
from fastapi.testclient import TestClient

from menu_manager.application.catalog_store import CatalogStore
from menu_manager.main import app


class TestHealth:
    """Test health endpoint."""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "menu-manager"
        assert data["catalog_state"] == "clean"
        assert data["product_count"] == 12

    def test_health_reports_dirty(self, client):
        client.post("/products/1", json={"inventory": 1})
        data = client.get("/health").json()
        assert data["catalog_state"] == "dirty"
        assert data["pending_change_count"] == 1


class TestRequestId:
    """Test request ID correlation."""

    def test_generated(self, client):
        response = client.get("/health")
        assert response.headers["X-Request-ID"]

    def test_echoed(self, client):
        response = client.get("/health", headers={"X-Request-ID": "req-123"})
        assert response.headers["X-Request-ID"] == "req-123"

    def test_in_error_body(self, client):
        response = client.get("/products/ghost", headers={"X-Request-ID": "req-456"})
        assert response.json()["request_id"] == "req-456"


class TestUnhandledErrors:
    """Test uncaught exceptions become a standard 500 body."""

    def test_internal_error(self, monkeypatch):
        def boom(self):
            raise RuntimeError("store exploded")

        monkeypatch.setattr(CatalogStore, "get_low_stock_products", boom)

        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/products/low-stock")

        assert response.status_code == 500
        data = response.json()
        assert data["error_code"] == "INTERNAL_ERROR"
        assert data["message"] == "An internal error occurred"
        assert "store exploded" not in response.text


class TestRouteHandlers:
    """Test endpoints run in the threadpool."""

    def test_handlers_are_sync(self):
        """Test no handler blocks the event loop on the locked store."""
        routes = [r for r in app.routes if isinstance(r, APIRoute)]

        assert routes
        assert [r.path for r in routes if inspect.iscoroutinefunction(r.endpoint)] == []
