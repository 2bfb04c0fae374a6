"""SKU allocation.

SKUs look like ``HP-FLO-004``: a fixed house prefix, the first three
letters of the category name, and a per-prefix sequence number.
"""

from collections.abc import Iterable

from menu_manager.domain.models import Product

SKU_HOUSE_PREFIX = "HP"
SKU_SEQUENCE_WIDTH = 3


def sku_prefix(category: str) -> str:
    """Build the SKU prefix for a category name.

    Names shorter than three characters produce a shorter prefix.
    """
    return f"{SKU_HOUSE_PREFIX}-{category[:3].upper()}"


def format_sku(category: str, number: int) -> str:
    """Format a SKU from a category name and sequence number."""
    return f"{sku_prefix(category)}-{number:0{SKU_SEQUENCE_WIDTH}d}"


def _sequence_number(sku: str) -> int:
    parts = sku.split("-")
    if len(parts) < 3:
        return 0
    try:
        return int(parts[2])
    except ValueError:
        return 0


def allocate_sku(category: str, existing_products: Iterable[Product]) -> str:
    """Allocate the next SKU for a category.

    Scans the SKUs that start with the category prefix, takes the highest
    sequence number (0 when there are none) and returns the next one.

    Args:
        category: Category name of the new product.
        existing_products: Products currently in the catalog.

    Returns:
        Newly allocated SKU.
    """
    prefix = sku_prefix(category)
    numbers = [
        _sequence_number(p.sku) for p in existing_products if p.sku.startswith(prefix)
    ]
    return format_sku(category, max(numbers, default=0) + 1)
