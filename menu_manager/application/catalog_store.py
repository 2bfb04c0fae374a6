"""Catalog store for the menu manager.

The store owns the product catalog, categories, the pending-change log
(the draft), the publish history and the transient selection state.
Every mutation goes through one of its methods.

Edits are applied to products immediately and recorded as typed,
deduplicated pending changes. ``publish`` commits the pending changes to
the audit trail; ``discard`` resets products to the seed catalog.

All public methods hold one re-entrant lock so that a read-compare-write
in the diff engine always sees a consistent snapshot, and bulk
operations do not interleave with other writers.
"""

import threading
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, TypeVar
from uuid import uuid4

import structlog
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError

from menu_manager.domain.diff import (
    compute_changes,
    deleted_product_change,
    duplicated_product_change,
    merge_changes,
    new_product_change,
)
from menu_manager.domain.exceptions import (
    CategoryNotFoundError,
    DomainError,
    ProductNotFoundError,
    ValidationError,
)
from menu_manager.domain.models import (
    CatalogState,
    Category,
    PendingChange,
    PriceMode,
    Product,
    PublishLog,
    StockMode,
    utc_now,
)
from menu_manager.domain.money import to_price
from menu_manager.domain.pricing import apply_price_change, apply_stock_change
from menu_manager.domain.seed import DEFAULT_LOW_STOCK_THRESHOLD, seed_categories, seed_products
from menu_manager.domain.sku import allocate_sku
from menu_manager.infrastructure.config import settings
from menu_manager.infrastructure.state_repository import (
    CatalogStateRepository,
    PersistedCatalog,
)

logger = structlog.get_logger()

ModeT = TypeVar("ModeT", bound=Enum)


# ============================================================================
# Constants
# ============================================================================

UPDATABLE_PRODUCT_FIELDS = frozenset(
    {
        "name",
        "price",
        "description",
        "image",
        "category",
        "subcategory",
        "inventory",
        "low_stock_threshold",
        "tags",
        "active",
        "featured",
    }
)
IMMUTABLE_PRODUCT_FIELDS = frozenset({"id", "sku", "created_at", "updated_at"})

UPDATABLE_CATEGORY_FIELDS = frozenset({"name", "icon", "parent_id", "order", "active"})

DUPLICATE_SUFFIX = " (Copy)"


# ============================================================================
# Results
# ============================================================================


@dataclass
class ProductUpdateResult:
    """Result of a single-product update."""

    product: Product
    changes: list[PendingChange]


@dataclass
class BulkItemResult:
    """Outcome of a bulk primitive for one selected product."""

    product_id: str
    ok: bool
    error_code: str | None = None
    message: str | None = None


# ============================================================================
# Catalog Store
# ============================================================================


class CatalogStore:
    """In-memory catalog with a staged draft and publish history.

    Example usage:
        store = CatalogStore()
        store.update_product("1", {"price": Decimal("12.00")})
        store.adjust_stock("1", 5, StockMode.REMOVE)
        log = store.publish("alice")
    """

    def __init__(
        self,
        repository: CatalogStateRepository | None = None,
        publish_log_limit: int = 50,
        persist_pending_changes: bool = False,
        seed_factory: Callable[[], list[Product]] = seed_products,
        category_factory: Callable[[], list[Category]] = seed_categories,
    ) -> None:
        """Initialize the store and load persisted state if there is any.

        Args:
            repository: Durable blob storage, or None for a memory-only store.
            publish_log_limit: Number of publish logs kept.
            persist_pending_changes: Also persist the draft.
            seed_factory: Builds the seed products that ``discard`` restores.
            category_factory: Builds the initial categories.
        """
        self._lock = threading.RLock()
        self._repository = repository
        self.publish_log_limit = publish_log_limit
        self.persist_pending_changes = persist_pending_changes
        self._persist_suspended = 0

        self._baseline: list[Product] = seed_factory()
        self._products: list[Product] = list(self._baseline)
        self._categories: list[Category] = category_factory()
        self._pending: list[PendingChange] = []
        self._publish_logs: list[PublishLog] = []

        # Transient view state, never persisted
        self._selected: list[str] = []
        self.bulk_edit_mode = False
        self.show_inactive = False

        self._load()
        self._published_products: list[Product] = list(self._products)

    # ========================================================================
    # Persistence
    # ========================================================================

    def _load(self) -> None:
        if self._repository is None:
            return
        try:
            state = self._repository.load()
        except (SQLAlchemyError, OSError, PydanticValidationError) as e:
            logger.warning(
                "Failed to load catalog state, starting from seed",
                namespace=self._repository.namespace,
                error=str(e),
            )
            return

        if state is None:
            logger.info("No persisted catalog state, starting from seed")
            return

        self._products = list(state.products)
        self._categories = list(state.categories)
        self._publish_logs = list(state.publish_logs)[: self.publish_log_limit]
        if self.persist_pending_changes and state.pending_changes:
            self._pending = list(state.pending_changes)

        logger.info(
            "Catalog state restored",
            product_count=len(self._products),
            category_count=len(self._categories),
            publish_log_count=len(self._publish_logs),
            pending_change_count=len(self._pending),
        )

    def snapshot(self) -> PersistedCatalog:
        """Build the persisted subset of the current state."""
        with self._lock:
            return PersistedCatalog(
                products=list(self._products),
                categories=list(self._categories),
                publish_logs=list(self._publish_logs),
                pending_changes=list(self._pending) if self.persist_pending_changes else None,
            )

    def _persist(self) -> None:
        if self._repository is None or self._persist_suspended:
            return
        try:
            self._repository.save(self.snapshot())
        except (SQLAlchemyError, OSError) as e:
            logger.warning(
                "Failed to persist catalog state",
                namespace=self._repository.namespace,
                error=str(e),
            )

    @contextmanager
    def _deferred_persist(self) -> Iterator[None]:
        """Hold persistence until the outermost block exits."""
        self._persist_suspended += 1
        try:
            yield
        finally:
            self._persist_suspended -= 1
        self._persist()

    # ========================================================================
    # Lookups
    # ========================================================================

    def _index_of(self, product_id: str) -> int:
        for index, product in enumerate(self._products):
            if product.id == product_id:
                return index
        raise ProductNotFoundError(product_id)

    def _require_product(self, product_id: str) -> Product:
        return self._products[self._index_of(product_id)]

    def _require_category(self, category_id: str) -> Category:
        for category in self._categories:
            if category.id == category_id:
                return category
        raise CategoryNotFoundError(category_id)

    def _category_names(self) -> set[str]:
        return {c.name for c in self._categories}

    # ========================================================================
    # Validation
    # ========================================================================

    def _validate_product_fields(self, fields: Mapping[str, Any]) -> dict[str, Any]:
        """Check caller-supplied product fields and normalize their types."""
        normalized: dict[str, Any] = {}

        for field_name, value in fields.items():
            if field_name in IMMUTABLE_PRODUCT_FIELDS:
                raise ValidationError(field_name, "cannot be changed", value)
            if field_name not in UPDATABLE_PRODUCT_FIELDS:
                raise ValidationError(field_name, "unknown product field", value)

            if field_name == "name":
                if not isinstance(value, str) or not value.strip():
                    raise ValidationError("name", "must not be empty", value)
                value = value.strip()
            elif field_name == "price":
                try:
                    value = to_price(value)
                except ValueError:
                    raise ValidationError("price", "must be a number", value) from None
                if value <= 0:
                    raise ValidationError("price", "must be positive", value)
            elif field_name == "category":
                if value not in self._category_names():
                    raise ValidationError("category", "unknown category", value)
            elif field_name in ("inventory", "low_stock_threshold"):
                if isinstance(value, bool) or not isinstance(value, int):
                    raise ValidationError(field_name, "must be an integer", value)
                if value < 0:
                    raise ValidationError(field_name, "must not be negative", value)
            elif field_name in ("description", "image"):
                if not isinstance(value, str):
                    raise ValidationError(field_name, "must be a string", value)
            elif field_name == "subcategory":
                if value is not None and not isinstance(value, str):
                    raise ValidationError("subcategory", "must be a string", value)
            elif field_name == "tags":
                if value is None:
                    value = []
                if not isinstance(value, (list, tuple)) or not all(
                    isinstance(tag, str) for tag in value
                ):
                    raise ValidationError("tags", "must be a list of strings", value)
                value = list(dict.fromkeys(value))
            elif field_name in ("active", "featured"):
                if not isinstance(value, bool):
                    raise ValidationError(field_name, "must be a boolean", value)

            normalized[field_name] = value

        return normalized

    @staticmethod
    def _validate_amount(amount: Decimal | int) -> None:
        if amount < 0:
            raise ValidationError("amount", "must not be negative", amount)

    @staticmethod
    def _validate_stock_amount(amount: int) -> None:
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise ValidationError("amount", "must be an integer", amount)
        CatalogStore._validate_amount(amount)

    @staticmethod
    def _parse_price_amount(amount: Decimal | int | float | str) -> Decimal:
        if isinstance(amount, bool):
            raise ValidationError("amount", "must be a number", amount)
        try:
            value = Decimal(str(amount))
        except ArithmeticError:
            raise ValidationError("amount", "must be a number", amount) from None
        if not value.is_finite():
            raise ValidationError("amount", "must be a number", amount)
        return value

    @staticmethod
    def _parse_mode(mode_type: type[ModeT], value: ModeT | str) -> ModeT:
        try:
            return mode_type(value)
        except ValueError:
            allowed = ", ".join(m.value for m in mode_type)
            raise ValidationError("mode", f"must be one of: {allowed}", value) from None

    # ========================================================================
    # Diff engine entry point
    # ========================================================================

    def _apply_update(self, product_id: str, updates: Mapping[str, Any]) -> ProductUpdateResult:
        """Diff, write and record one update. Caller holds the lock."""
        index = self._index_of(product_id)
        current = self._products[index]
        now = utc_now()

        changes = compute_changes(current, updates, now)
        updated = current.model_copy(update={**updates, "updated_at": now})

        self._products[index] = updated
        self._pending = merge_changes(self._pending, changes)

        logger.info(
            "Product updated",
            product_id=product_id,
            fields=sorted(updates),
            change_types=[c.type.value for c in changes],
            pending_change_count=len(self._pending),
        )
        self._persist()
        return ProductUpdateResult(product=updated, changes=changes)

    # ========================================================================
    # Product Operations
    # ========================================================================

    def update_product(self, product_id: str, updates: Mapping[str, Any]) -> ProductUpdateResult:
        """Apply a partial update and record the resulting pending changes.

        Args:
            product_id: Product to update.
            updates: Field name to new value.

        Returns:
            Updated product and the changes this call produced.

        Raises:
            ProductNotFoundError: If the product does not exist.
            ValidationError: If a field value is invalid or immutable.
        """
        with self._lock:
            self._require_product(product_id)
            normalized = self._validate_product_fields(updates)
            return self._apply_update(product_id, normalized)

    def add_product(
        self,
        name: str,
        price: Decimal | int | float | str,
        category: str,
        description: str = "",
        image: str = "",
        subcategory: str | None = None,
        inventory: int = 0,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
        tags: list[str] | None = None,
        active: bool = True,
        featured: bool = False,
    ) -> Product:
        """Create a product with a new id and SKU.

        Raises:
            ValidationError: If a field value is invalid.
        """
        with self._lock:
            fields = self._validate_product_fields(
                {
                    "name": name,
                    "price": price,
                    "category": category,
                    "description": description,
                    "image": image,
                    "subcategory": subcategory,
                    "inventory": inventory,
                    "low_stock_threshold": low_stock_threshold,
                    "tags": tags,
                    "active": active,
                    "featured": featured,
                }
            )
            now = utc_now()
            product = Product(
                id=str(uuid4()),
                sku=allocate_sku(fields["category"], self._products),
                created_at=now,
                updated_at=now,
                **fields,
            )

            self._products.append(product)
            self._pending = merge_changes(self._pending, [new_product_change(product, now)])

            logger.info("Product added", product_id=product.id, sku=product.sku)
            self._persist()
            return product

    def delete_product(self, product_id: str) -> Product:
        """Remove a product and drop it from the selection.

        Returns:
            The deleted product.

        Raises:
            ProductNotFoundError: If the product does not exist.
        """
        with self._lock:
            product = self._products.pop(self._index_of(product_id))
            self._selected = [pid for pid in self._selected if pid != product_id]
            self._pending = merge_changes(self._pending, [deleted_product_change(product)])

            logger.info("Product deleted", product_id=product_id, sku=product.sku)
            self._persist()
            return product

    def duplicate_product(self, product_id: str) -> Product:
        """Copy a product under a new id, name and SKU.

        Raises:
            ProductNotFoundError: If the product does not exist.
        """
        with self._lock:
            source = self._require_product(product_id)
            now = utc_now()
            duplicate = source.model_copy(
                update={
                    "id": str(uuid4()),
                    "name": f"{source.name}{DUPLICATE_SUFFIX}",
                    "sku": allocate_sku(source.category, self._products),
                    "tags": list(source.tags),
                    "created_at": now,
                    "updated_at": now,
                }
            )

            self._products.append(duplicate)
            self._pending = merge_changes(
                self._pending, [duplicated_product_change(duplicate, source, now)]
            )

            logger.info(
                "Product duplicated",
                source_id=product_id,
                product_id=duplicate.id,
                sku=duplicate.sku,
            )
            self._persist()
            return duplicate

    def reorder_products(self, category_id: str, product_ids: list[str]) -> list[Product]:
        """Reorder products of one category into the given sequence.

        The listed products take the catalog positions the category's
        listed products occupied before. No pending change is recorded.

        Returns:
            The category's products in their new order.

        Raises:
            CategoryNotFoundError: If the category does not exist.
            ProductNotFoundError: If a listed product does not exist.
            ValidationError: If a listed product is in another category.
        """
        with self._lock:
            category = self._require_category(category_id)
            listed = set(product_ids)
            for product_id in product_ids:
                product = self._require_product(product_id)
                if product.category != category.name:
                    raise ValidationError(
                        "product_ids",
                        f"product {product_id} is not in category {category.name}",
                        product_id,
                    )

            now = utc_now()
            positions = [i for i, p in enumerate(self._products) if p.id in listed]
            by_id = {p.id: p for p in self._products if p.id in listed}
            ordered = list(dict.fromkeys(product_ids))
            for position, product_id in zip(positions, ordered):
                self._products[position] = by_id[product_id].model_copy(
                    update={"updated_at": now}
                )

            logger.info("Products reordered", category_id=category_id, count=len(ordered))
            self._persist()
            return [p for p in self._products if p.category == category.name]

    def adjust_stock(
        self, product_id: str, amount: int, mode: StockMode | str
    ) -> ProductUpdateResult:
        """Add, remove or set inventory.

        ``remove`` and ``set`` floor at zero. Goes through the update
        entry point so an ``inventory`` change is recorded.

        Raises:
            ProductNotFoundError: If the product does not exist.
            ValidationError: If the amount is negative.
        """
        mode = self._parse_mode(StockMode, mode)
        self._validate_stock_amount(amount)
        with self._lock:
            product = self._require_product(product_id)
            new_inventory = apply_stock_change(product.inventory, amount, mode)
            return self._apply_update(product_id, {"inventory": new_inventory})

    # ========================================================================
    # Category Operations
    # ========================================================================

    def _validate_category_fields(
        self, fields: Mapping[str, Any], category_id: str | None = None
    ) -> dict[str, Any]:
        normalized: dict[str, Any] = {}
        for field_name, value in fields.items():
            if field_name not in UPDATABLE_CATEGORY_FIELDS:
                raise ValidationError(field_name, "unknown category field", value)
            if field_name == "name":
                if not isinstance(value, str) or not value.strip():
                    raise ValidationError("name", "must not be empty", value)
                value = value.strip()
                clash = any(
                    c.name == value and c.id != category_id for c in self._categories
                )
                if clash:
                    raise ValidationError("name", "category already exists", value)
            elif field_name == "parent_id" and value is not None:
                if value == category_id:
                    raise ValidationError("parent_id", "category cannot be its own parent", value)
                self._require_category(value)
            normalized[field_name] = value
        return normalized

    def add_category(
        self,
        name: str,
        icon: str | None = None,
        parent_id: str | None = None,
        active: bool = True,
    ) -> Category:
        """Create a category at the end of the display order.

        Raises:
            ValidationError: If the name is empty or taken.
            CategoryNotFoundError: If the parent does not exist.
        """
        with self._lock:
            fields = self._validate_category_fields(
                {"name": name, "icon": icon, "parent_id": parent_id, "active": active}
            )
            category = Category(id=str(uuid4()), order=len(self._categories), **fields)
            self._categories.append(category)

            logger.info("Category added", category_id=category.id, name=category.name)
            self._persist()
            return category

    def update_category(self, category_id: str, updates: Mapping[str, Any]) -> Category:
        """Update category fields.

        Products reference categories by name; renaming a category does
        not rename the category of its products.

        Raises:
            CategoryNotFoundError: If the category does not exist.
            ValidationError: If a field value is invalid.
        """
        with self._lock:
            category = self._require_category(category_id)
            fields = self._validate_category_fields(updates, category_id=category_id)
            updated = category.model_copy(update=fields)
            self._categories = [updated if c.id == category_id else c for c in self._categories]

            logger.info("Category updated", category_id=category_id, fields=sorted(fields))
            self._persist()
            return updated

    def delete_category(self, category_id: str) -> Category:
        """Delete a category. Products in it are left untouched.

        Raises:
            CategoryNotFoundError: If the category does not exist.
        """
        with self._lock:
            category = self._require_category(category_id)
            self._categories = [c for c in self._categories if c.id != category_id]

            logger.info("Category deleted", category_id=category_id, name=category.name)
            self._persist()
            return category

    def reorder_categories(self, category_ids: list[str]) -> list[Category]:
        """Set each listed category's order to its index in the list.

        Unlisted categories keep their current order.

        Raises:
            CategoryNotFoundError: If a listed category does not exist.
        """
        with self._lock:
            for category_id in category_ids:
                self._require_category(category_id)
            positions = {cid: index for index, cid in enumerate(category_ids)}
            self._categories = [
                c.model_copy(update={"order": positions[c.id]}) if c.id in positions else c
                for c in self._categories
            ]

            logger.info("Categories reordered", count=len(positions))
            self._persist()
            return self.categories

    # ========================================================================
    # Selection
    # ========================================================================

    @property
    def selected_products(self) -> list[str]:
        """Ids of the selected products, in selection order."""
        with self._lock:
            return list(self._selected)

    def set_bulk_edit_mode(self, enabled: bool) -> None:
        """Turn bulk edit mode on or off. Either way the selection is cleared."""
        with self._lock:
            self.bulk_edit_mode = enabled
            self._selected = []

    def set_show_inactive(self, show: bool) -> None:
        with self._lock:
            self.show_inactive = show

    def toggle_product_selection(self, product_id: str) -> bool:
        """Flip selection membership of one product.

        Returns:
            True if the product is now selected.

        Raises:
            ProductNotFoundError: If selecting a product that does not exist.
        """
        with self._lock:
            if product_id in self._selected:
                self._selected = [pid for pid in self._selected if pid != product_id]
                return False
            self._require_product(product_id)
            self._selected.append(product_id)
            return True

    def select_all_products(self) -> list[str]:
        """Select every product visible under the ``show_inactive`` filter."""
        with self._lock:
            self._selected = [p.id for p in self._visible_products()]
            return list(self._selected)

    def clear_selection(self) -> None:
        with self._lock:
            self._selected = []

    def _prune_selection(self) -> None:
        existing = {p.id for p in self._products}
        self._selected = [pid for pid in self._selected if pid in existing]

    # ========================================================================
    # Bulk Operations
    # ========================================================================

    def _run_bulk(
        self, operation: str, action: Callable[[str], Any]
    ) -> list[BulkItemResult]:
        """Apply an action to each selected id.

        Items are independent: a failure is recorded for that id and
        earlier successes are kept.
        """
        results: list[BulkItemResult] = []
        with self._lock, self._deferred_persist():
            for product_id in list(self._selected):
                try:
                    action(product_id)
                except DomainError as e:
                    results.append(
                        BulkItemResult(
                            product_id=product_id,
                            ok=False,
                            error_code=e.error_code,
                            message=e.message,
                        )
                    )
                else:
                    results.append(BulkItemResult(product_id=product_id, ok=True))

        failed = [r.product_id for r in results if not r.ok]
        log = logger.warning if failed else logger.info
        log(
            "Bulk operation applied",
            operation=operation,
            selected=len(results),
            failed=failed,
        )
        return results

    def bulk_update_stock(self, amount: int, mode: StockMode | str) -> list[BulkItemResult]:
        """Adjust stock of every selected product.

        Raises:
            ValidationError: If the amount is negative.
        """
        mode = self._parse_mode(StockMode, mode)
        self._validate_stock_amount(amount)
        return self._run_bulk(
            f"stock_{mode.value}",
            lambda product_id: self.adjust_stock(product_id, amount, mode),
        )

    def bulk_update_price(
        self, amount: Decimal | int | float | str, mode: PriceMode | str
    ) -> list[BulkItemResult]:
        """Change the price of every selected product.

        ``amount_decrease`` floors at zero; results are rounded to the cent.

        Raises:
            ValidationError: If the amount is negative or not a number.
        """
        mode = self._parse_mode(PriceMode, mode)
        amount = self._parse_price_amount(amount)
        self._validate_amount(amount)

        def change_price(product_id: str) -> None:
            product = self._require_product(product_id)
            new_price = apply_price_change(product.price, amount, mode)
            self._apply_update(product_id, {"price": new_price})

        return self._run_bulk(f"price_{mode.value}", change_price)

    def bulk_set_active(self, active: bool) -> list[BulkItemResult]:
        """Set the active flag on every selected product."""
        return self._run_bulk(
            "activate" if active else "deactivate",
            lambda product_id: self._apply_update(product_id, {"active": active}),
        )

    def bulk_delete(self) -> list[BulkItemResult]:
        """Delete every selected product, then clear the selection."""
        with self._lock:
            results = self._run_bulk("delete", self.delete_product)
            self._selected = []
            return results

    # ========================================================================
    # Publish / Discard
    # ========================================================================

    @property
    def state(self) -> CatalogState:
        with self._lock:
            return CatalogState.from_pending_count(len(self._pending))

    @property
    def is_dirty(self) -> bool:
        return self.state == CatalogState.DIRTY

    def publish(self, published_by: str) -> PublishLog | None:
        """Commit pending changes to the publish history.

        Products are not touched; their values were applied at edit time.

        Args:
            published_by: Who is publishing.

        Returns:
            The new publish log, or None when there was nothing to publish.
        """
        with self._lock:
            if not self._pending:
                logger.info("Publish skipped, no pending changes")
                return None

            log = PublishLog(
                id=str(uuid4()),
                changes=list(self._pending),
                published_at=utc_now(),
                published_by=published_by,
            )
            self._publish_logs = [log, *self._publish_logs][: self.publish_log_limit]
            self._pending = []
            self._published_products = list(self._products)

            logger.info(
                "Catalog published",
                publish_log_id=log.id,
                published_by=published_by,
                change_count=len(log.changes),
            )
            self._persist()
            return log

    def discard(self) -> int:
        """Reset products to the seed catalog and clear pending changes.

        This reverts past the last publish: products added, duplicated or
        deleted since start-up are reverted too. Categories and the
        publish history are kept.

        Returns:
            Number of pending changes discarded.
        """
        with self._lock:
            return self._reset_products(list(self._baseline), "seed")

    def discard_to_last_publish(self) -> int:
        """Reset products to their state at the most recent publish.

        Falls back to the state at store start-up when nothing has been
        published since.

        Returns:
            Number of pending changes discarded.
        """
        with self._lock:
            return self._reset_products(list(self._published_products), "last_publish")

    def _reset_products(self, products: list[Product], target: str) -> int:
        discarded = len(self._pending)
        self._products = products
        self._pending = []
        self._prune_selection()

        logger.info("Pending changes discarded", target=target, discarded=discarded)
        self._persist()
        return discarded

    # ========================================================================
    # Queries
    # ========================================================================

    def _visible_products(self) -> list[Product]:
        return [p for p in self._products if self.show_inactive or p.active]

    @property
    def products(self) -> list[Product]:
        with self._lock:
            return list(self._products)

    @property
    def categories(self) -> list[Category]:
        """Categories in display order."""
        with self._lock:
            return sorted(self._categories, key=lambda c: c.order)

    @property
    def pending_changes(self) -> list[PendingChange]:
        with self._lock:
            return list(self._pending)

    @property
    def pending_change_count(self) -> int:
        with self._lock:
            return len(self._pending)

    @property
    def publish_logs(self) -> list[PublishLog]:
        """Publish history, newest first."""
        with self._lock:
            return list(self._publish_logs)

    def get_product(self, product_id: str) -> Product:
        """Get a product by id.

        Raises:
            ProductNotFoundError: If the product does not exist.
        """
        with self._lock:
            return self._require_product(product_id)

    def get_category(self, category_id: str) -> Category:
        with self._lock:
            return self._require_category(category_id)

    def list_products(self, include_inactive: bool | None = None) -> list[Product]:
        """List products, hiding inactive ones unless asked.

        Args:
            include_inactive: Override for the ``show_inactive`` view flag.
        """
        with self._lock:
            show = self.show_inactive if include_inactive is None else include_inactive
            return [p for p in self._products if show or p.active]

    def get_products_by_category(self, category_id: str) -> list[Product]:
        """Visible products whose category is the given category's name.

        Raises:
            CategoryNotFoundError: If the category does not exist.
        """
        with self._lock:
            category = self._require_category(category_id)
            return [p for p in self._visible_products() if p.category == category.name]

    def get_low_stock_products(self) -> list[Product]:
        with self._lock:
            return [p for p in self._products if p.is_low_stock]

    def get_out_of_stock_products(self) -> list[Product]:
        with self._lock:
            return [p for p in self._products if p.is_out_of_stock]


# ============================================================================
# Global Store
# ============================================================================


_catalog_store: CatalogStore | None = None


def get_catalog_store() -> CatalogStore:
    """Get or create the catalog store instance.

    Returns:
        CatalogStore configured from settings.
    """
    global _catalog_store
    if _catalog_store is None:
        repository = None
        if settings.persistence_enabled:
            repository = CatalogStateRepository.from_url(
                settings.database_url,
                namespace=settings.storage_namespace,
                echo=settings.debug,
            )
        _catalog_store = CatalogStore(
            repository=repository,
            publish_log_limit=settings.publish_log_limit,
            persist_pending_changes=settings.persist_pending_changes,
        )
    return _catalog_store


def reset_catalog_store() -> None:
    """Reset catalog store instance (for testing)."""
    global _catalog_store
    _catalog_store = None
