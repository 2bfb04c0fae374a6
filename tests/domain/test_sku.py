"""Tests for SKU allocation."""

from menu_manager.domain.seed import seed_products
from menu_manager.domain.sku import allocate_sku, format_sku, sku_prefix


class TestSkuFormat:
    """Test SKU formatting."""

    def test_format_sku(self):
        assert format_sku("Flowers", 4) == "HP-FLO-004"

    def test_prefix_is_upper_case(self):
        assert sku_prefix("edibles") == "HP-EDI"

    def test_short_category_name(self):
        """Test names under three characters give a shorter prefix."""
        assert format_sku("CB", 1) == "HP-CB-001"

    def test_wide_sequence_number(self):
        assert format_sku("Vapes", 1234) == "HP-VAP-1234"


class TestAllocateSku:
    """Test SKU sequence allocation."""

    def test_next_after_highest_in_category(self):
        """Test allocation continues from the highest Flowers SKU."""
        assert allocate_sku("Flowers", seed_products()) == "HP-FLO-005"

    def test_seed_numbers_are_global(self):
        """Test seed SKUs are numbered across the whole seed list."""
        assert allocate_sku("Edibles", seed_products()) == "HP-EDI-010"
        assert allocate_sku("Vapes", seed_products()) == "HP-VAP-013"

    def test_first_in_new_category(self):
        assert allocate_sku("Tinctures", seed_products()) == "HP-TIN-001"

    def test_empty_catalog(self):
        assert allocate_sku("Flowers", []) == "HP-FLO-001"

    def test_malformed_sequence_counts_as_zero(self, make_product):
        """Test a non-numeric sequence token is ignored."""
        products = [
            make_product(id="a", sku="HP-FLO-abc"),
            make_product(id="b", sku="HP-FLO"),
        ]
        assert allocate_sku("Flowers", products) == "HP-FLO-001"

    def test_gaps_are_not_reused(self, make_product):
        """Test allocation uses max + 1, not the first gap."""
        products = [
            make_product(id="a", sku="HP-FLO-001"),
            make_product(id="b", sku="HP-FLO-007"),
        ]
        assert allocate_sku("Flowers", products) == "HP-FLO-008"

    def test_seed_skus_unique(self):
        skus = [p.sku for p in seed_products()]
        assert len(skus) == len(set(skus))
