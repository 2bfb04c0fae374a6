"""Bulk operation endpoints.

Each operation runs over the current selection. Items are independent:
the response carries one result per selected product, and products that
succeeded stay changed when others fail.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from menu_manager.api.dependencies import get_store
from menu_manager.api.schemas import (
    BulkActiveRequest,
    BulkItemResultSchema,
    BulkOperationResponse,
    BulkPriceRequest,
    BulkStockRequest,
    ErrorResponse,
)
from menu_manager.application.catalog_store import BulkItemResult, CatalogStore

router = APIRouter(prefix="/bulk", tags=["Bulk Operations"])


# ============================================================================
# Converters
# ============================================================================


def results_to_response(operation: str, results: list[BulkItemResult]) -> BulkOperationResponse:
    """Convert per-product results to a response schema."""
    items = [
        BulkItemResultSchema(
            product_id=r.product_id,
            ok=r.ok,
            error_code=r.error_code,
            message=r.message,
        )
        for r in results
    ]
    succeeded = sum(1 for r in results if r.ok)
    return BulkOperationResponse(
        operation=operation,
        results=items,
        succeeded=succeeded,
        failed=len(results) - succeeded,
    )


# ============================================================================
# Endpoints
# ============================================================================


@router.post(
    "/stock",
    response_model=BulkOperationResponse,
    responses={422: {"model": ErrorResponse}},
)
def bulk_update_stock(
    request: BulkStockRequest,
    store: Annotated[CatalogStore, Depends(get_store)],
) -> BulkOperationResponse:
    """Adjust stock of every selected product."""
    results = store.bulk_update_stock(request.amount, request.mode)
    return results_to_response(f"stock_{request.mode.value}", results)


@router.post(
    "/price",
    response_model=BulkOperationResponse,
    responses={422: {"model": ErrorResponse}},
)
def bulk_update_price(
    request: BulkPriceRequest,
    store: Annotated[CatalogStore, Depends(get_store)],
) -> BulkOperationResponse:
    """Change the price of every selected product.

    Percentage modes treat ``amount`` as a percent; amount modes as
    dollars. ``amount_decrease`` floors at zero and results round to the cent.
    """
    results = store.bulk_update_price(request.amount, request.mode)
    return results_to_response(f"price_{request.mode.value}", results)


@router.post("/active", response_model=BulkOperationResponse)
def bulk_set_active(
    request: BulkActiveRequest,
    store: Annotated[CatalogStore, Depends(get_store)],
) -> BulkOperationResponse:
    results = store.bulk_set_active(request.active)
    return results_to_response("activate" if request.active else "deactivate", results)


@router.post("/delete", response_model=BulkOperationResponse)
def bulk_delete(
    store: Annotated[CatalogStore, Depends(get_store)],
) -> BulkOperationResponse:
    """Delete every selected product and clear the selection."""
    results = store.bulk_delete()
    return results_to_response("delete", results)
