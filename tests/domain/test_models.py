"""Tests for catalog entities."""

from decimal import Decimal

from menu_manager.domain.models import (
    CatalogState,
    ChangeType,
    PendingChange,
    render_change_value,
)
from menu_manager.domain.seed import seed_categories, seed_products


class TestProduct:
    """Test product stock flags."""

    def test_low_stock(self, make_product):
        assert make_product(inventory=10, low_stock_threshold=10).is_low_stock
        assert not make_product(inventory=11, low_stock_threshold=10).is_low_stock

    def test_out_of_stock_is_not_low_stock(self, make_product):
        product = make_product(inventory=0)
        assert product.is_out_of_stock
        assert not product.is_low_stock


class TestPendingChange:
    """Test rendering of typed change values."""

    def test_rendered_fields_serialized(self):
        change = PendingChange(
            id="c1",
            product_id="1",
            product_name="OG Kush",
            type=ChangeType.PRICE,
            before_value=Decimal("50.00"),
            after_value=Decimal("55.5"),
        )
        data = change.model_dump(mode="json")
        assert data["before"] == "$50.00"
        assert data["after"] == "$55.50"

    def test_status_accepts_string_true(self):
        assert render_change_value(ChangeType.STATUS, "true") == "Active"
        assert render_change_value(ChangeType.STATUS, False) == "Inactive"

    def test_none_renders_empty(self):
        assert render_change_value(ChangeType.NEW, None) == ""


class TestCatalogState:
    """Test derived draft state."""

    def test_from_pending_count(self):
        assert CatalogState.from_pending_count(0) == CatalogState.CLEAN
        assert CatalogState.from_pending_count(3) == CatalogState.DIRTY


class TestSeed:
    """Test the seed catalog."""

    def test_seed_products(self):
        products = seed_products()
        assert len(products) == 12
        assert products[0].sku == "HP-FLO-001"
        assert products[4].sku == "HP-PRE-005"
        assert products[0].price == Decimal("45.00")
        assert products[0].tags == ["featured"]
        assert all(p.active for p in products)

    def test_seed_categories(self):
        categories = seed_categories()
        assert [c.id for c in categories] == ["flowers", "pre-rolls", "edibles", "vapes"]
        assert [c.order for c in categories] == [0, 1, 2, 3]
