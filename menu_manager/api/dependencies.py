"""Shared FastAPI dependencies."""

from menu_manager.application.catalog_store import CatalogStore, get_catalog_store


def get_store() -> CatalogStore:
    """Get catalog store dependency."""
    return get_catalog_store()
