"""Durable catalog state.

The catalog is persisted as one JSON blob in a key-value table, keyed by
a fixed namespace. The blob is always read and written wholesale.

Blob layout::

    {"products": [...], "categories": [...], "publishLogs": [...]}

``pendingChanges`` is only present when draft persistence is enabled.
"""

from datetime import datetime, timezone

import structlog
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy import Column, DateTime, String, Text, delete
from sqlalchemy.orm import sessionmaker

from menu_manager.domain.models import Category, PendingChange, Product, PublishLog
from menu_manager.infrastructure.database import (
    Base,
    create_db_engine,
    create_session_factory,
)

logger = structlog.get_logger()


# ============================================================================
# Table
# ============================================================================


class CatalogStateBlob(Base):
    """Key-value row holding one serialized catalog."""

    __tablename__ = "kv_store"

    key = Column(String(255), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )


# ============================================================================
# Blob Schema
# ============================================================================


class PersistedCatalog(BaseModel):
    """The persisted subset of catalog state."""

    model_config = ConfigDict(populate_by_name=True)

    products: list[Product] = Field(default_factory=list)
    categories: list[Category] = Field(default_factory=list)
    publish_logs: list[PublishLog] = Field(default_factory=list, alias="publishLogs")
    pending_changes: list[PendingChange] | None = Field(None, alias="pendingChanges")

    def to_json(self) -> str:
        """Serialize with the blob's camelCase top-level keys."""
        return self.model_dump_json(by_alias=True, exclude_none=True)


# ============================================================================
# Repository
# ============================================================================


class CatalogStateRepository:
    """Reads and writes the catalog blob under one namespace key.

    Example usage:
        repo = CatalogStateRepository.from_url("sqlite:///./data/menu.db")
        state = repo.load()
        repo.save(PersistedCatalog(products=..., categories=...))
    """

    def __init__(self, session_factory: sessionmaker, namespace: str) -> None:
        """Initialize repository.

        Args:
            session_factory: SQLAlchemy session factory.
            namespace: Key the blob is stored under.
        """
        self.session_factory = session_factory
        self.namespace = namespace

    @classmethod
    def from_url(
        cls, database_url: str, namespace: str, echo: bool = False
    ) -> "CatalogStateRepository":
        """Create a repository for a database URL, creating the table if needed."""
        engine = create_db_engine(database_url, echo=echo)
        return cls(create_session_factory(engine), namespace)

    def load(self) -> PersistedCatalog | None:
        """Load the persisted catalog.

        Returns:
            Persisted catalog, or None on first run.

        Raises:
            pydantic.ValidationError: If the stored blob is malformed.
        """
        with self.session_factory() as session:
            row = session.get(CatalogStateBlob, self.namespace)
            if row is None:
                return None
            raw = row.value

        state = PersistedCatalog.model_validate_json(raw)
        logger.debug(
            "Catalog state loaded",
            namespace=self.namespace,
            product_count=len(state.products),
        )
        return state

    def save(self, state: PersistedCatalog) -> None:
        """Write the catalog blob, replacing any previous value.

        Raises:
            sqlalchemy.exc.SQLAlchemyError: If the write fails.
        """
        payload = state.to_json()
        with self.session_factory.begin() as session:
            row = session.get(CatalogStateBlob, self.namespace)
            if row is None:
                session.add(CatalogStateBlob(key=self.namespace, value=payload))
            else:
                row.value = payload
                row.updated_at = datetime.now(timezone.utc)

    def clear(self) -> None:
        """Delete the stored blob."""
        with self.session_factory.begin() as session:
            session.execute(
                delete(CatalogStateBlob).where(CatalogStateBlob.key == self.namespace)
            )
