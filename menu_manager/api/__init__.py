"""API layer module.

Contains FastAPI routers and request/response schemas.
"""

from menu_manager.api.bulk import router as bulk_router
from menu_manager.api.categories import router as categories_router
from menu_manager.api.health import router as health_router
from menu_manager.api.products import router as products_router
from menu_manager.api.publishing import router as publishing_router
from menu_manager.api.selection import router as selection_router

__all__ = [
    "bulk_router",
    "categories_router",
    "health_router",
    "products_router",
    "publishing_router",
    "selection_router",
]
