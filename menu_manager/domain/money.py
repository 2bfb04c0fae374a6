"""Currency helpers for catalog prices.

Prices are kept as ``Decimal`` in major units (dollars) with two decimal
places. All rounding goes through :func:`to_price`.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENT = Decimal("0.01")


def to_price(value: Decimal | int | float | str) -> Decimal:
    """Convert a numeric value to a price rounded to the cent.

    Floats are converted through ``str`` so that ``19.99`` stays
    ``Decimal("19.99")`` rather than its binary approximation.

    Args:
        value: Amount in major units.

    Returns:
        Decimal quantized to two places, ROUND_HALF_UP.

    Raises:
        ValueError: If the value is not numeric.
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a price: {value!r}")
    if isinstance(value, float):
        value = str(value)
    try:
        amount = Decimal(value)
    except (InvalidOperation, TypeError) as e:
        raise ValueError(f"Not a price: {value!r}") from e
    if not amount.is_finite():
        raise ValueError(f"Not a price: {value!r}")
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def format_price(amount: Decimal | int | float | str) -> str:
    """Render a price for display, e.g. ``$12.50``."""
    return f"${to_price(amount):.2f}"
