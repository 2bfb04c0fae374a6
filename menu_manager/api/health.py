"""Health check endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from menu_manager.api.dependencies import get_store
from menu_manager.application.catalog_store import CatalogStore
from menu_manager.domain.models import CatalogState

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    service: str
    version: str
    catalog_state: CatalogState
    product_count: int
    pending_change_count: int


@router.get("/health", response_model=HealthResponse)
def health_check(
    store: Annotated[CatalogStore, Depends(get_store)],
) -> HealthResponse:
    """Check service health.

    Returns:
        Health status with service name, version and draft state.
    """
    from menu_manager.infrastructure.config import settings

    return HealthResponse(
        status="healthy",
        service=settings.service_name,
        version=settings.api_version,
        catalog_state=store.state,
        product_count=len(store.products),
        pending_change_count=store.pending_change_count,
    )
