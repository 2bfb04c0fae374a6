"""Selection and view-state endpoints.

The selection is transient: it is never persisted and only feeds the
bulk operations.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from menu_manager.api.dependencies import get_store
from menu_manager.api.schemas import (
    BulkEditModeRequest,
    ErrorResponse,
    SelectionResponse,
    ShowInactiveRequest,
)
from menu_manager.application.catalog_store import CatalogStore

router = APIRouter(prefix="/selection", tags=["Selection"])


def selection_to_response(store: CatalogStore) -> SelectionResponse:
    """Convert the store's view state to a response schema."""
    return SelectionResponse(
        selected_products=store.selected_products,
        bulk_edit_mode=store.bulk_edit_mode,
        show_inactive=store.show_inactive,
    )


@router.get("", response_model=SelectionResponse)
def get_selection(
    store: Annotated[CatalogStore, Depends(get_store)],
) -> SelectionResponse:
    return selection_to_response(store)


@router.post(
    "/toggle/{product_id}",
    response_model=SelectionResponse,
    responses={404: {"model": ErrorResponse}},
)
def toggle_product_selection(
    product_id: str,
    store: Annotated[CatalogStore, Depends(get_store)],
) -> SelectionResponse:
    """Select or deselect one product."""
    store.toggle_product_selection(product_id)
    return selection_to_response(store)


@router.post("/all", response_model=SelectionResponse)
def select_all_products(
    store: Annotated[CatalogStore, Depends(get_store)],
) -> SelectionResponse:
    """Select every product visible under the current filter."""
    store.select_all_products()
    return selection_to_response(store)


@router.post("/clear", response_model=SelectionResponse)
def clear_selection(
    store: Annotated[CatalogStore, Depends(get_store)],
) -> SelectionResponse:
    store.clear_selection()
    return selection_to_response(store)


@router.post("/bulk-edit-mode", response_model=SelectionResponse)
def set_bulk_edit_mode(
    request: BulkEditModeRequest,
    store: Annotated[CatalogStore, Depends(get_store)],
) -> SelectionResponse:
    """Turn bulk edit mode on or off. The selection is cleared either way."""
    store.set_bulk_edit_mode(request.enabled)
    return selection_to_response(store)


@router.post("/show-inactive", response_model=SelectionResponse)
def set_show_inactive(
    request: ShowInactiveRequest,
    store: Annotated[CatalogStore, Depends(get_store)],
) -> SelectionResponse:
    store.set_show_inactive(request.show)
    return selection_to_response(store)
