"""Stock and price arithmetic used by single-item and bulk operations."""

from decimal import Decimal

from menu_manager.domain.models import PriceMode, StockMode
from menu_manager.domain.money import to_price

HUNDRED = Decimal(100)


def apply_stock_change(inventory: int, amount: int, mode: StockMode) -> int:
    """Compute new inventory for a stock adjustment.

    ``remove`` and ``set`` floor at zero; ``add`` does not.

    Args:
        inventory: Current inventory.
        amount: Units to add, remove or set.
        mode: How to apply the amount.

    Returns:
        New inventory.
    """
    if mode == StockMode.ADD:
        return inventory + amount
    if mode == StockMode.REMOVE:
        return max(0, inventory - amount)
    if mode == StockMode.SET:
        return max(0, amount)
    raise ValueError(f"Unknown stock mode: {mode}")


def apply_price_change(
    price: Decimal, amount: Decimal | int | float | str, mode: PriceMode
) -> Decimal:
    """Compute new price for a bulk price change.

    ``amount_decrease`` floors at zero; a percentage decrease above 100
    goes negative. The result is rounded to the cent with ROUND_HALF_UP.

    Args:
        price: Current price.
        amount: Percentage or dollar amount, depending on mode.
        mode: How to apply the amount.

    Returns:
        New price.
    """
    amount = Decimal(str(amount)) if isinstance(amount, float) else Decimal(amount)

    if mode == PriceMode.PERCENT_INCREASE:
        new_price = price * (1 + amount / HUNDRED)
    elif mode == PriceMode.PERCENT_DECREASE:
        new_price = price * (1 - amount / HUNDRED)
    elif mode == PriceMode.AMOUNT_INCREASE:
        new_price = price + amount
    elif mode == PriceMode.AMOUNT_DECREASE:
        new_price = max(Decimal(0), price - amount)
    elif mode == PriceMode.SET:
        new_price = amount
    else:
        raise ValueError(f"Unknown price mode: {mode}")

    return to_price(new_price)
