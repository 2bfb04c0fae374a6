"""Pydantic schemas for the Menu Manager API.

Defines request/response models for products, categories, selection,
bulk operations and the publish pipeline. Domain entities (Product,
Category, PendingChange, PublishLog) are returned as-is.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from menu_manager.domain.models import (
    CatalogState,
    Category,
    PendingChange,
    PriceMode,
    Product,
    PublishLog,
    StockMode,
)


# ============================================================================
# Product Schemas
# ============================================================================


class ProductCreateRequest(BaseModel):
    """Request to add a product. SKU and id are assigned by the store."""

    name: str = Field(..., description="Display name")
    price: Decimal = Field(..., description="Price in dollars")
    category: str = Field(..., description="Category name")
    description: str = Field(default="", description="Product description")
    image: str = Field(default="", description="Image URI")
    subcategory: str | None = Field(None, description="Optional subcategory")
    inventory: int = Field(default=0, description="Units on hand")
    low_stock_threshold: int = Field(default=10, description="Low stock level")
    tags: list[str] = Field(default_factory=list, description="Tags")
    active: bool = Field(default=True, description="Visible in the storefront")
    featured: bool = Field(default=False, description="Featured product")


class ProductUpdateRequest(BaseModel):
    """Partial product update. Only fields present in the body are applied."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    price: Decimal | None = None
    category: str | None = None
    description: str | None = None
    image: str | None = None
    subcategory: str | None = None
    inventory: int | None = None
    low_stock_threshold: int | None = None
    tags: list[str] | None = None
    active: bool | None = None
    featured: bool | None = None


class ProductUpdateResponse(BaseModel):
    """Updated product with the pending changes the update produced."""

    product: Product = Field(..., description="Product after the update")
    changes: list[PendingChange] = Field(..., description="Changes produced by this call")


class ProductListResponse(BaseModel):
    """Product list response."""

    items: list[Product] = Field(..., description="Products")
    total: int = Field(..., description="Number of products returned")


class StockAdjustRequest(BaseModel):
    """Request to adjust one product's stock."""

    amount: int = Field(..., description="Units to add, remove or set")
    mode: StockMode = Field(..., description="add, remove or set")


class ProductReorderRequest(BaseModel):
    """New order for products within one category."""

    product_ids: list[str] = Field(..., min_length=1, description="Product ids in order")


# ============================================================================
# Category Schemas
# ============================================================================


class CategoryCreateRequest(BaseModel):
    """Request to add a category."""

    name: str = Field(..., description="Category name")
    icon: str | None = Field(None, description="Icon name")
    parent_id: str | None = Field(None, description="Parent category id")
    active: bool = Field(default=True)


class CategoryUpdateRequest(BaseModel):
    """Partial category update."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    icon: str | None = None
    parent_id: str | None = None
    order: int | None = None
    active: bool | None = None


class CategoryReorderRequest(BaseModel):
    """New display order for categories."""

    category_ids: list[str] = Field(..., min_length=1, description="Category ids in order")


class CategoryListResponse(BaseModel):
    """Categories in display order."""

    items: list[Category] = Field(..., description="Categories")
    total: int = Field(..., description="Number of categories")


# ============================================================================
# Selection Schemas
# ============================================================================


class SelectionResponse(BaseModel):
    """Current selection and view flags."""

    selected_products: list[str] = Field(..., description="Selected product ids")
    bulk_edit_mode: bool = Field(..., description="Bulk edit mode flag")
    show_inactive: bool = Field(..., description="Inactive products are visible")


class BulkEditModeRequest(BaseModel):
    enabled: bool = Field(..., description="Turn bulk edit mode on or off")


class ShowInactiveRequest(BaseModel):
    show: bool = Field(..., description="Show inactive products")


# ============================================================================
# Bulk Operation Schemas
# ============================================================================


class BulkStockRequest(BaseModel):
    """Stock change applied to every selected product."""

    amount: int = Field(..., description="Units to add, remove or set")
    mode: StockMode = Field(..., description="add, remove or set")


class BulkPriceRequest(BaseModel):
    """Price change applied to every selected product."""

    amount: Decimal = Field(..., description="Percentage or dollar amount")
    mode: PriceMode = Field(..., description="How the amount is applied")


class BulkActiveRequest(BaseModel):
    active: bool = Field(..., description="New active flag")


class BulkItemResultSchema(BaseModel):
    """Outcome for one selected product."""

    product_id: str = Field(..., description="Product ID")
    ok: bool = Field(..., description="Whether the operation succeeded")
    error_code: str | None = Field(None, description="Error code on failure")
    message: str | None = Field(None, description="Error message on failure")


class BulkOperationResponse(BaseModel):
    """Per-product results of a bulk operation."""

    operation: str = Field(..., description="Operation name")
    results: list[BulkItemResultSchema] = Field(..., description="Per-product results")
    succeeded: int = Field(..., description="Number of products changed")
    failed: int = Field(..., description="Number of products that failed")


# ============================================================================
# Publish Schemas
# ============================================================================


class PendingChangesResponse(BaseModel):
    """The current draft."""

    state: CatalogState = Field(..., description="clean or dirty")
    count: int = Field(..., description="Number of pending changes")
    changes: list[PendingChange] = Field(..., description="Pending changes in draft order")


class PublishRequest(BaseModel):
    published_by: str | None = Field(None, description="Who is publishing")


class PublishResponse(BaseModel):
    """Result of a publish call."""

    published: bool = Field(..., description="False when there was nothing to publish")
    log: PublishLog | None = Field(None, description="The new publish log")


class DiscardResponse(BaseModel):
    """Result of a discard call."""

    discarded: int = Field(..., description="Number of pending changes dropped")
    target: str = Field(..., description="seed or last_publish")
    product_count: int = Field(..., description="Products after the reset")


class PublishLogResponse(BaseModel):
    """Publish history, newest first."""

    logs: list[PublishLog] = Field(..., description="Publish logs")
    total: int = Field(..., description="Total logs kept")


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error_code: str = Field(..., description="Error code")
    message: str = Field(..., description="Error message")
    details: dict | list = Field(default_factory=list, description="Error context")
    request_id: str | None = Field(None, description="Request ID for tracing")
