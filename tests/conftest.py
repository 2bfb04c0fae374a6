"""Pytest fixtures for Menu Manager tests."""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from menu_manager.application.catalog_store import (
    CatalogStore,
    get_catalog_store,
    reset_catalog_store,
)
from menu_manager.domain.models import Product
from menu_manager.infrastructure.config import settings
from menu_manager.infrastructure.state_repository import CatalogStateRepository
from menu_manager.main import app


@pytest.fixture(autouse=True)
def reset_store(monkeypatch):
    """Reset the global store before each test and keep it memory-only."""
    monkeypatch.setattr(settings, "persistence_enabled", False)
    reset_catalog_store()
    yield
    reset_catalog_store()


@pytest.fixture
def client():
    """Create test client."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def store() -> CatalogStore:
    """Get the global catalog store instance."""
    return get_catalog_store()


@pytest.fixture
def repository(tmp_path) -> CatalogStateRepository:
    """Repository backed by a temporary SQLite file."""
    return CatalogStateRepository.from_url(
        f"sqlite:///{tmp_path / 'menu.db'}",
        namespace="test-menu-manager",
    )


@pytest.fixture
def make_product():
    """Factory for standalone products."""

    def _make_product(**overrides) -> Product:
        fields = {
            "id": "p1",
            "name": "Blue Dream",
            "price": Decimal("10.00"),
            "category": "Flowers",
            "inventory": 5,
            "sku": "HP-FLO-001",
        }
        fields.update(overrides)
        return Product(**fields)

    return _make_product
