"""Diff engine for product updates.

Turns a partial product update into typed pending changes and merges
them into the draft log. Rules, in output order:

- ``inventory`` changed -> ``inventory`` change
- ``price`` changed -> ``price`` change
- ``active`` changed -> ``status`` change
- ``name``, ``description`` or ``category`` present in the update, even
  with an unchanged value -> ``details`` change with fixed text

Merging drops every earlier change for the same product whose type is
among the new change types, then appends the new changes.
"""

from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any
from uuid import uuid4

from menu_manager.domain.models import ChangeType, PendingChange, Product, utc_now

DETAILS_FIELDS = frozenset({"name", "description", "category"})
DETAILS_BEFORE = "Details"
DETAILS_AFTER = "Updated"


def _change(
    product_id: str,
    product_name: str,
    change_type: ChangeType,
    before: Any,
    after: Any,
    timestamp: datetime,
) -> PendingChange:
    return PendingChange(
        id=str(uuid4()),
        product_id=product_id,
        product_name=product_name,
        type=change_type,
        before_value=before,
        after_value=after,
        timestamp=timestamp,
    )


def compute_changes(
    product: Product,
    updates: Mapping[str, Any],
    timestamp: datetime | None = None,
) -> list[PendingChange]:
    """Compute the pending changes an update would produce.

    Args:
        product: Snapshot of the product before the update.
        updates: Field updates, already normalized to the field types.
        timestamp: Change timestamp, defaults to now.

    Returns:
        Zero or more changes, at most one per type.
    """
    timestamp = timestamp or utc_now()
    changes: list[PendingChange] = []

    if "inventory" in updates and updates["inventory"] != product.inventory:
        changes.append(
            _change(
                product.id,
                product.name,
                ChangeType.INVENTORY,
                product.inventory,
                updates["inventory"],
                timestamp,
            )
        )

    if "price" in updates and updates["price"] != product.price:
        changes.append(
            _change(
                product.id,
                product.name,
                ChangeType.PRICE,
                product.price,
                updates["price"],
                timestamp,
            )
        )

    if "active" in updates and updates["active"] != product.active:
        changes.append(
            _change(
                product.id,
                product.name,
                ChangeType.STATUS,
                product.active,
                updates["active"],
                timestamp,
            )
        )

    if DETAILS_FIELDS & updates.keys():
        changes.append(
            _change(
                product.id,
                product.name,
                ChangeType.DETAILS,
                DETAILS_BEFORE,
                DETAILS_AFTER,
                timestamp,
            )
        )

    return changes


def merge_changes(
    pending: Iterable[PendingChange], new_changes: Iterable[PendingChange]
) -> list[PendingChange]:
    """Merge new changes into the pending log, superseding same-type entries.

    Args:
        pending: Current pending changes in draft order.
        new_changes: Changes produced by one operation.

    Returns:
        New pending-change list.
    """
    new_changes = list(new_changes)
    superseded = {(c.product_id, c.type) for c in new_changes}
    kept = [c for c in pending if (c.product_id, c.type) not in superseded]
    return kept + new_changes


def new_product_change(product: Product, timestamp: datetime | None = None) -> PendingChange:
    """Change recorded when a product is added."""
    return _change(
        product.id, product.name, ChangeType.NEW, None, "New product", timestamp or utc_now()
    )


def duplicated_product_change(
    duplicate: Product, source: Product, timestamp: datetime | None = None
) -> PendingChange:
    """Change recorded when a product is duplicated."""
    return _change(
        duplicate.id,
        duplicate.name,
        ChangeType.NEW,
        None,
        f"Duplicated from {source.name}",
        timestamp or utc_now(),
    )


def deleted_product_change(product: Product, timestamp: datetime | None = None) -> PendingChange:
    """Change recorded when a product is deleted."""
    return _change(
        product.id, product.name, ChangeType.DELETE, product.name, "Deleted", timestamp or utc_now()
    )
