"""Tests for catalog store persistence."""

from decimal import Decimal

from sqlalchemy.exc import SQLAlchemyError

from menu_manager.application.catalog_store import CatalogStore
from menu_manager.domain.models import PriceMode
from menu_manager.infrastructure.state_repository import (
    CatalogStateBlob,
    CatalogStateRepository,
)


class CountingRepository(CatalogStateRepository):
    """Repository that counts writes."""

    def __init__(self, session_factory, namespace):
        super().__init__(session_factory, namespace)
        self.saves = 0

    def save(self, state):
        self.saves += 1
        super().save(state)


class FailingRepository(CatalogStateRepository):
    """Repository whose writes always fail."""

    def save(self, state):
        raise SQLAlchemyError("disk full")


class TestStorePersistence:
    """Test restoring and saving the catalog blob."""

    def test_first_run_uses_seed(self, repository):
        store = CatalogStore(repository=repository)
        assert len(store.products) == 12

    def test_products_and_logs_survive_restart(self, repository):
        store = CatalogStore(repository=repository)
        store.update_product("1", {"price": Decimal("50.00")})
        store.publish("alice")
        store.add_category("Tinctures")

        restored = CatalogStore(repository=repository)

        assert restored.get_product("1").price == Decimal("50.00")
        assert [log.published_by for log in restored.publish_logs] == ["alice"]
        assert "Tinctures" in [c.name for c in restored.categories]

    def test_pending_changes_not_persisted_by_default(self, repository):
        """Test edits survive a restart but the draft does not."""
        store = CatalogStore(repository=repository)
        store.update_product("1", {"price": Decimal("50.00")})

        restored = CatalogStore(repository=repository)

        assert restored.get_product("1").price == Decimal("50.00")
        assert restored.pending_changes == []

    def test_pending_changes_persisted_when_enabled(self, repository):
        store = CatalogStore(repository=repository, persist_pending_changes=True)
        store.update_product("1", {"price": Decimal("50.00")})

        restored = CatalogStore(repository=repository, persist_pending_changes=True)

        assert len(restored.pending_changes) == 1
        assert restored.pending_changes[0].before == "$45.00"
        assert restored.pending_changes[0].after == "$50.00"

    def test_corrupt_blob_falls_back_to_seed(self, repository):
        with repository.session_factory.begin() as session:
            session.add(CatalogStateBlob(key=repository.namespace, value="{not json"))

        store = CatalogStore(repository=repository)

        assert len(store.products) == 12
        assert store.get_product("1").price == Decimal("45.00")

    def test_bulk_operation_persists_once(self, repository):
        counting = CountingRepository(repository.session_factory, repository.namespace)
        store = CatalogStore(repository=counting)
        store.select_all_products()

        store.bulk_update_price(10, PriceMode.PERCENT_INCREASE)

        assert counting.saves == 1

    def test_negative_price_survives_restart(self, repository):
        """Test a price driven below zero by a bulk decrease reloads as-is."""
        store = CatalogStore(repository=repository)
        store.toggle_product_selection("1")
        store.bulk_update_price(150, PriceMode.PERCENT_DECREASE)

        restored = CatalogStore(repository=repository)

        assert restored.get_product("1").price == Decimal("-22.50")
        assert len(restored.products) == 12

    def test_save_failure_is_not_raised(self, repository):
        failing = FailingRepository(repository.session_factory, repository.namespace)
        store = CatalogStore(repository=failing)

        result = store.update_product("1", {"price": Decimal("50.00")})

        assert result.product.price == Decimal("50.00")
        assert store.pending_change_count == 1
