"""Domain layer - catalog entities, diff engine, SKU allocation, pricing.

This module exports the core building blocks of the menu manager:

- **Entities**: Product, Category, PendingChange, PublishLog
- **Enums**: ChangeType, StockMode, PriceMode, CatalogState
- **Diff engine**: compute_changes, merge_changes
- **SKU allocator**: allocate_sku
- **Exceptions**: DomainError and its NotFound / Validation kinds

Example usage:
    from menu_manager.domain import compute_changes, merge_changes

    changes = compute_changes(product, {"price": Decimal("12.00")})
    pending = merge_changes(pending, changes)
"""

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
    NotFoundError,
    ProductNotFoundError,
    ValidationError,
)
from menu_manager.domain.models import (
    CatalogState,
    Category,
    ChangeType,
    PendingChange,
    PriceMode,
    Product,
    PublishLog,
    StockMode,
    render_change_value,
    utc_now,
)
from menu_manager.domain.money import format_price, to_price
from menu_manager.domain.pricing import apply_price_change, apply_stock_change
from menu_manager.domain.sku import allocate_sku, format_sku, sku_prefix

__all__ = [
    # Entities
    "Category",
    "PendingChange",
    "Product",
    "PublishLog",
    # Enums
    "CatalogState",
    "ChangeType",
    "PriceMode",
    "StockMode",
    # Diff engine
    "compute_changes",
    "deleted_product_change",
    "duplicated_product_change",
    "merge_changes",
    "new_product_change",
    "render_change_value",
    # SKU / pricing
    "allocate_sku",
    "apply_price_change",
    "apply_stock_change",
    "format_price",
    "format_sku",
    "sku_prefix",
    "to_price",
    "utc_now",
    # Exceptions
    "CategoryNotFoundError",
    "DomainError",
    "NotFoundError",
    "ProductNotFoundError",
    "ValidationError",
]
