"""Tests for stock and price arithmetic."""

from decimal import Decimal

import pytest

from menu_manager.domain.models import PriceMode, StockMode
from menu_manager.domain.money import format_price, to_price
from menu_manager.domain.pricing import apply_price_change, apply_stock_change


class TestStockChange:
    """Test stock adjustment modes."""

    def test_add(self):
        assert apply_stock_change(5, 3, StockMode.ADD) == 8

    def test_remove(self):
        assert apply_stock_change(5, 3, StockMode.REMOVE) == 2

    def test_remove_floors_at_zero(self):
        assert apply_stock_change(5, 10, StockMode.REMOVE) == 0

    def test_set(self):
        assert apply_stock_change(5, 40, StockMode.SET) == 40

    def test_set_floors_at_zero(self):
        assert apply_stock_change(5, -3, StockMode.SET) == 0


class TestPriceChange:
    """Test bulk price modes."""

    def test_percent_increase_rounds_to_cent(self):
        """Test 19.99 + 5% is 20.99."""
        result = apply_price_change(Decimal("19.99"), 5, PriceMode.PERCENT_INCREASE)
        assert result == Decimal("20.99")

    def test_percent_decrease(self):
        result = apply_price_change(Decimal("40.00"), 25, PriceMode.PERCENT_DECREASE)
        assert result == Decimal("30.00")

    def test_percent_decrease_is_not_floored(self):
        """Test a decrease above 100% goes negative."""
        result = apply_price_change(Decimal("40.00"), 150, PriceMode.PERCENT_DECREASE)
        assert result == Decimal("-20.00")

    def test_amount_increase_with_float(self):
        """Test float amounts do not pick up binary noise."""
        result = apply_price_change(Decimal("0.20"), 0.1, PriceMode.AMOUNT_INCREASE)
        assert result == Decimal("0.30")

    def test_amount_decrease_floors_at_zero(self):
        result = apply_price_change(Decimal("5.00"), 7, PriceMode.AMOUNT_DECREASE)
        assert result == Decimal("0.00")

    def test_set_rounds_half_up(self):
        """Test 2.345 rounds up, not to even."""
        result = apply_price_change(Decimal("5.00"), "2.345", PriceMode.SET)
        assert result == Decimal("2.35")


class TestMoney:
    """Test price conversion and display."""

    def test_float_goes_through_str(self):
        assert to_price(19.99) == Decimal("19.99")

    def test_quantized(self):
        assert to_price(45) == Decimal("45.00")
        assert str(to_price("12.5")) == "12.50"

    def test_format_price(self):
        assert format_price(Decimal("12.5")) == "$12.50"

    @pytest.mark.parametrize("value", [True, "abc", "nan", "Infinity", None])
    def test_rejects_non_numbers(self, value):
        with pytest.raises(ValueError):
            to_price(value)
