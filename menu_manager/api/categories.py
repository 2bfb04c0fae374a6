"""Category API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from menu_manager.api.dependencies import get_store
from menu_manager.api.schemas import (
    CategoryCreateRequest,
    CategoryListResponse,
    CategoryReorderRequest,
    CategoryUpdateRequest,
    ErrorResponse,
    ProductListResponse,
    ProductReorderRequest,
)
from menu_manager.application.catalog_store import CatalogStore
from menu_manager.domain.models import Category

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get("", response_model=CategoryListResponse)
def list_categories(
    store: Annotated[CatalogStore, Depends(get_store)],
) -> CategoryListResponse:
    """List categories in display order."""
    items = store.categories
    return CategoryListResponse(items=items, total=len(items))


@router.post(
    "",
    response_model=Category,
    status_code=status.HTTP_201_CREATED,
    responses={
        404: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
)
def add_category(
    request: CategoryCreateRequest,
    store: Annotated[CatalogStore, Depends(get_store)],
) -> Category:
    """Add a category at the end of the display order."""
    return store.add_category(**request.model_dump())


# Registered before /{category_id} so "reorder" is not taken as an id
@router.post(
    "/reorder",
    response_model=CategoryListResponse,
    responses={404: {"model": ErrorResponse}},
)
def reorder_categories(
    request: CategoryReorderRequest,
    store: Annotated[CatalogStore, Depends(get_store)],
) -> CategoryListResponse:
    """Set the display order of the listed categories."""
    items = store.reorder_categories(request.category_ids)
    return CategoryListResponse(items=items, total=len(items))


@router.post(
    "/{category_id}",
    response_model=Category,
    responses={
        404: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
)
def update_category(
    category_id: str,
    request: CategoryUpdateRequest,
    store: Annotated[CatalogStore, Depends(get_store)],
) -> Category:
    """Update a category.

    Renaming a category does not move its products; they keep
    referencing the old name.
    """
    return store.update_category(category_id, request.model_dump(exclude_unset=True))


@router.delete(
    "/{category_id}",
    response_model=Category,
    responses={404: {"model": ErrorResponse}},
)
def delete_category(
    category_id: str,
    store: Annotated[CatalogStore, Depends(get_store)],
) -> Category:
    return store.delete_category(category_id)


@router.post(
    "/{category_id}/reorder-products",
    response_model=ProductListResponse,
    responses={
        404: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
)
def reorder_products(
    category_id: str,
    request: ProductReorderRequest,
    store: Annotated[CatalogStore, Depends(get_store)],
) -> ProductListResponse:
    """Reorder the products of one category.

    Args:
        category_id: Category whose products are reordered.
        request: Product ids in their new order.

    Returns:
        The category's products in catalog order.
    """
    items = store.reorder_products(category_id, request.product_ids)
    return ProductListResponse(items=items, total=len(items))
