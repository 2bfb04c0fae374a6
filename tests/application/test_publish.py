"""Tests for publish and discard."""

from decimal import Decimal

from menu_manager.application.catalog_store import CatalogStore
from menu_manager.domain.models import CatalogState
from menu_manager.domain.seed import seed_products


class TestPublish:
    """Test committing the draft."""

    def test_publish_clean_is_noop(self, store):
        assert store.publish("alice") is None
        assert store.publish_logs == []

    def test_publish_snapshot(self, store):
        """Test a publish captures the draft and clears it."""
        store.update_product("1", {"price": Decimal("50.00")})
        store.adjust_stock("2", 5, "remove")
        pending = store.pending_changes

        log = store.publish("alice")

        assert log is not None
        assert log.published_by == "alice"
        assert log.changes == pending
        assert store.pending_changes == []
        assert store.state == CatalogState.CLEAN
        assert store.publish_logs == [log]
        assert store.get_product("1").price == Decimal("50.00")

    def test_history_newest_first_and_bounded(self, store):
        """Test 51 publishes keep the newest 50."""
        for i in range(51):
            store.update_product("1", {"inventory": 100 + i})
            store.publish(f"user-{i}")

        logs = store.publish_logs
        assert len(logs) == 50
        assert logs[0].published_by == "user-50"
        assert logs[-1].published_by == "user-1"

    def test_custom_history_limit(self):
        store = CatalogStore(publish_log_limit=2)
        for i in range(3):
            store.update_product("1", {"inventory": i})
            store.publish("bob")
        assert len(store.publish_logs) == 2


class TestDiscard:
    """Test reverting the draft."""

    def test_discard_restores_seed(self, store):
        """Test discard reverts past the last publish to the seed catalog."""
        store.update_product("1", {"price": Decimal("99.00")})
        store.publish("alice")
        store.add_product(name="Gelato", price=48, category="Flowers")
        store.delete_product("2")

        discarded = store.discard()

        seed = seed_products()
        assert discarded == 2
        assert [(p.id, p.price, p.inventory) for p in store.products] == [
            (p.id, p.price, p.inventory) for p in seed
        ]
        assert store.pending_changes == []
        assert len(store.publish_logs) == 1

    def test_discard_prunes_selection(self, store):
        product = store.add_product(name="Gelato", price=48, category="Flowers")
        store.toggle_product_selection(product.id)
        store.toggle_product_selection("1")

        store.discard()

        assert store.selected_products == ["1"]

    def test_discard_keeps_categories(self, store):
        store.add_category("Tinctures")
        store.discard()
        assert "Tinctures" in [c.name for c in store.categories]

    def test_discard_to_last_publish(self, store):
        store.update_product("1", {"price": Decimal("50.00")})
        store.publish("alice")
        store.update_product("1", {"price": Decimal("60.00")})

        discarded = store.discard_to_last_publish()

        assert discarded == 1
        assert store.get_product("1").price == Decimal("50.00")
        assert store.state == CatalogState.CLEAN

    def test_discard_to_last_publish_without_publish(self, store):
        """Test the start-up state is used when nothing was published."""
        store.update_product("1", {"price": Decimal("60.00")})
        store.discard_to_last_publish()
        assert store.get_product("1").price == Decimal("45.00")
