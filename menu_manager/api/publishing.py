"""Draft and publish endpoints.

- GET /pending-changes - current draft with state and count
- POST /publish - commit the draft to the publish history
- POST /discard - reset products to the seed catalog
- POST /discard/last-publish - reset products to the last publish
- GET /publish-log - publish history, newest first
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from menu_manager.api.dependencies import get_store
from menu_manager.api.schemas import (
    DiscardResponse,
    PendingChangesResponse,
    PublishLogResponse,
    PublishRequest,
    PublishResponse,
)
from menu_manager.application.catalog_store import CatalogStore
from menu_manager.infrastructure.config import settings

router = APIRouter(tags=["Publishing"])


@router.get("/pending-changes", response_model=PendingChangesResponse)
def get_pending_changes(
    store: Annotated[CatalogStore, Depends(get_store)],
) -> PendingChangesResponse:
    """Get the current draft."""
    changes = store.pending_changes
    return PendingChangesResponse(
        state=store.state,
        count=len(changes),
        changes=changes,
    )


@router.post("/publish", response_model=PublishResponse)
def publish(
    store: Annotated[CatalogStore, Depends(get_store)],
    request: PublishRequest | None = None,
) -> PublishResponse:
    """Publish pending changes.

    Publishing a clean catalog is a no-op and returns
    ``published: false``.

    Args:
        request: Optional body naming the publisher.

    Returns:
        The new publish log, if any.
    """
    published_by = (request.published_by if request else None) or settings.default_publisher
    log = store.publish(published_by)
    return PublishResponse(published=log is not None, log=log)


@router.post("/discard", response_model=DiscardResponse)
def discard(
    store: Annotated[CatalogStore, Depends(get_store)],
) -> DiscardResponse:
    """Drop pending changes and reset products to the seed catalog.

    This also reverts anything published since start-up.
    """
    discarded = store.discard()
    return DiscardResponse(
        discarded=discarded,
        target="seed",
        product_count=len(store.products),
    )


@router.post("/discard/last-publish", response_model=DiscardResponse)
def discard_to_last_publish(
    store: Annotated[CatalogStore, Depends(get_store)],
) -> DiscardResponse:
    """Drop pending changes and reset products to the last publish."""
    discarded = store.discard_to_last_publish()
    return DiscardResponse(
        discarded=discarded,
        target="last_publish",
        product_count=len(store.products),
    )


@router.get("/publish-log", response_model=PublishLogResponse)
def get_publish_log(
    store: Annotated[CatalogStore, Depends(get_store)],
    limit: Annotated[int, Query(ge=1, le=100)] = 50,
) -> PublishLogResponse:
    """Get publish history, newest first.

    Args:
        limit: Maximum logs to return.
    """
    logs = store.publish_logs
    return PublishLogResponse(logs=logs[:limit], total=len(logs))
