"""Catalog entities and enums.

Products, categories, pending changes and publish logs are pydantic
models so the same classes serve the in-memory store, the persisted
blob and the API responses.
"""

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field

from menu_manager.domain.money import format_price


def utc_now() -> datetime:
    """Current UTC time."""
    return datetime.now(timezone.utc)


# ============================================================================
# Enums
# ============================================================================


class ChangeType(str, Enum):
    """Kind of mutation captured by a pending change."""

    INVENTORY = "inventory"
    PRICE = "price"
    DETAILS = "details"
    NEW = "new"
    DELETE = "delete"
    STATUS = "status"


class StockMode(str, Enum):
    """How a stock amount is applied to current inventory."""

    ADD = "add"
    REMOVE = "remove"
    SET = "set"


class PriceMode(str, Enum):
    """How a bulk price amount is applied to current price."""

    PERCENT_INCREASE = "percent_increase"
    PERCENT_DECREASE = "percent_decrease"
    AMOUNT_INCREASE = "amount_increase"
    AMOUNT_DECREASE = "amount_decrease"
    SET = "set"


class CatalogState(str, Enum):
    """Draft lifecycle of the catalog.

    State diagram:
        CLEAN ── any mutation ──► DIRTY ──┐
          ▲                        │      │ further mutations
          │ publish / discard      │◄─────┘
          └────────────────────────┘

    The state is derived from the pending-change log and never stored.
    """

    CLEAN = "clean"
    DIRTY = "dirty"

    @classmethod
    def from_pending_count(cls, count: int) -> "CatalogState":
        """Derive the state from the number of pending changes."""
        return cls.DIRTY if count > 0 else cls.CLEAN


# ============================================================================
# Entities
# ============================================================================


class Product(BaseModel):
    """A catalog entry.

    Products are immutable; the store replaces them on every update.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Opaque product identifier")
    name: str = Field(..., description="Display name")
    price: Decimal = Field(..., description="Price in dollars")
    description: str = Field(default="", description="Product description")
    image: str = Field(default="", description="Image URI or empty")
    category: str = Field(..., description="Category name")
    subcategory: str | None = Field(None, description="Optional subcategory")
    inventory: int = Field(default=0, ge=0, description="Units on hand")
    low_stock_threshold: int = Field(default=10, ge=0, description="Low stock level")
    sku: str = Field(..., description="Stock Keeping Unit, immutable")
    tags: list[str] = Field(default_factory=list, description="Tags")
    active: bool = Field(default=True, description="Visible in the storefront")
    featured: bool = Field(default=False, description="Featured product")
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @property
    def is_low_stock(self) -> bool:
        """In stock but at or below the low stock threshold."""
        return 0 < self.inventory <= self.low_stock_threshold

    @property
    def is_out_of_stock(self) -> bool:
        return self.inventory == 0


class Category(BaseModel):
    """A product category."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Category identifier")
    name: str = Field(..., description="Category name, referenced by products")
    icon: str | None = Field(None, description="Optional icon name")
    parent_id: str | None = Field(None, description="Parent category id")
    order: int = Field(default=0, description="Display sequence")
    active: bool = Field(default=True)


def render_change_value(change_type: ChangeType, value: Any) -> str:
    """Render a raw diff value as display text.

    Args:
        change_type: Type of the change the value belongs to.
        value: Raw typed value (Decimal, int, bool, str or None).

    Returns:
        Display string, e.g. ``$12.50`` for prices or ``Active`` for status.
    """
    if value is None:
        return ""
    if change_type == ChangeType.PRICE:
        return format_price(value)
    if change_type == ChangeType.STATUS:
        return "Active" if value is True or value == "true" else "Inactive"
    return str(value)


class PendingChange(BaseModel):
    """An unpublished, typed diff against one product.

    ``before_value`` / ``after_value`` hold the raw values; ``before`` and
    ``after`` are the rendered display strings.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Change ID")
    product_id: str = Field(..., description="Affected product")
    product_name: str = Field(..., description="Product name when the diff was taken")
    type: ChangeType = Field(..., description="Kind of change")
    before_value: bool | int | Decimal | str | None = Field(None)
    after_value: bool | int | Decimal | str | None = Field(None)
    timestamp: datetime = Field(default_factory=utc_now)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def before(self) -> str:
        return render_change_value(self.type, self.before_value)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def after(self) -> str:
        return render_change_value(self.type, self.after_value)


class PublishLog(BaseModel):
    """One committed batch of pending changes."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Publish log ID")
    changes: list[PendingChange] = Field(..., description="Changes in draft order")
    published_at: datetime = Field(default_factory=utc_now)
    published_by: str = Field(..., description="Who published")


__all__ = [
    "CatalogState",
    "Category",
    "ChangeType",
    "PendingChange",
    "PriceMode",
    "Product",
    "PublishLog",
    "StockMode",
    "render_change_value",
    "utc_now",
]
