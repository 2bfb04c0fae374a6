"""Product API endpoints.

Provides endpoints for editing the catalog:
- GET /products - list products
- POST /products - add a product
- POST /products/{id} - partial update, returns the diffs it produced
- POST /products/{id}/duplicate - copy a product
- POST /products/{id}/stock - adjust stock
- DELETE /products/{id} - delete a product

Domain errors raised by the store are rendered by the application's
exception handlers.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from menu_manager.api.dependencies import get_store
from menu_manager.api.schemas import (
    ErrorResponse,
    ProductCreateRequest,
    ProductListResponse,
    ProductUpdateRequest,
    ProductUpdateResponse,
    StockAdjustRequest,
)
from menu_manager.application.catalog_store import CatalogStore
from menu_manager.domain.models import Product

router = APIRouter(prefix="/products", tags=["Products"])


# ============================================================================
# Queries
# ============================================================================


@router.get("", response_model=ProductListResponse)
def list_products(
    store: Annotated[CatalogStore, Depends(get_store)],
    category_id: Annotated[str | None, Query()] = None,
    include_inactive: Annotated[bool | None, Query()] = None,
) -> ProductListResponse:
    """List products in catalog order.

    Args:
        category_id: Only products of this category.
        include_inactive: Override the ``show_inactive`` view flag.

    Returns:
        Product list.
    """
    if category_id is not None and include_inactive is None:
        items = store.get_products_by_category(category_id)
    else:
        items = store.list_products(include_inactive=include_inactive)
        if category_id is not None:
            category = store.get_category(category_id)
            items = [p for p in items if p.category == category.name]
    return ProductListResponse(items=items, total=len(items))


@router.get("/low-stock", response_model=ProductListResponse)
def list_low_stock_products(
    store: Annotated[CatalogStore, Depends(get_store)],
) -> ProductListResponse:
    """Products at or below their low-stock threshold but not sold out."""
    items = store.get_low_stock_products()
    return ProductListResponse(items=items, total=len(items))


@router.get("/out-of-stock", response_model=ProductListResponse)
def list_out_of_stock_products(
    store: Annotated[CatalogStore, Depends(get_store)],
) -> ProductListResponse:
    items = store.get_out_of_stock_products()
    return ProductListResponse(items=items, total=len(items))


@router.get(
    "/{product_id}",
    response_model=Product,
    responses={404: {"model": ErrorResponse}},
)
def get_product(
    product_id: str,
    store: Annotated[CatalogStore, Depends(get_store)],
) -> Product:
    """Get product details by ID.

    Raises:
        ProductNotFoundError: If the product does not exist.
    """
    return store.get_product(product_id)


# ============================================================================
# Mutations
# ============================================================================


@router.post(
    "",
    response_model=Product,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ErrorResponse}},
)
def add_product(
    request: ProductCreateRequest,
    store: Annotated[CatalogStore, Depends(get_store)],
) -> Product:
    """Add a product. A ``new`` pending change is recorded."""
    return store.add_product(**request.model_dump())


@router.post(
    "/{product_id}",
    response_model=ProductUpdateResponse,
    responses={
        404: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
)
def update_product(
    product_id: str,
    request: ProductUpdateRequest,
    store: Annotated[CatalogStore, Depends(get_store)],
) -> ProductUpdateResponse:
    """Apply a partial update.

    Only fields present in the request body are applied. The response
    lists the pending changes this update produced; fields set to their
    current value produce none.

    Args:
        product_id: Product to update.
        request: Fields to change.

    Returns:
        Updated product and produced changes.
    """
    result = store.update_product(product_id, request.model_dump(exclude_unset=True))
    return ProductUpdateResponse(product=result.product, changes=result.changes)


@router.delete(
    "/{product_id}",
    response_model=Product,
    responses={404: {"model": ErrorResponse}},
)
def delete_product(
    product_id: str,
    store: Annotated[CatalogStore, Depends(get_store)],
) -> Product:
    """Delete a product.

    Returns:
        The deleted product.
    """
    return store.delete_product(product_id)


@router.post(
    "/{product_id}/duplicate",
    response_model=Product,
    status_code=status.HTTP_201_CREATED,
    responses={404: {"model": ErrorResponse}},
)
def duplicate_product(
    product_id: str,
    store: Annotated[CatalogStore, Depends(get_store)],
) -> Product:
    """Copy a product under a new id and SKU."""
    return store.duplicate_product(product_id)


@router.post(
    "/{product_id}/stock",
    response_model=ProductUpdateResponse,
    responses={
        404: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
)
def adjust_stock(
    product_id: str,
    request: StockAdjustRequest,
    store: Annotated[CatalogStore, Depends(get_store)],
) -> ProductUpdateResponse:
    """Add, remove or set inventory. Results are floored at zero."""
    result = store.adjust_stock(product_id, request.amount, request.mode)
    return ProductUpdateResponse(product=result.product, changes=result.changes)
