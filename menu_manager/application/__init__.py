"""Application layer module.

Contains the catalog store, which orchestrates domain logic and
persistence.
"""

from menu_manager.application.catalog_store import (
    BulkItemResult,
    CatalogStore,
    ProductUpdateResult,
    get_catalog_store,
    reset_catalog_store,
)

__all__ = [
    "BulkItemResult",
    "CatalogStore",
    "ProductUpdateResult",
    "get_catalog_store",
    "reset_catalog_store",
]
