"""Database configuration and session management.

Provides a SQLAlchemy engine and session factory. The catalog store is
synchronous, so the engine is too.
"""

from pathlib import Path

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker

# Base class for models
Base = declarative_base()


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine, making sure a SQLite file's directory exists.

    Args:
        database_url: SQLAlchemy database URL.
        echo: Log SQL statements.

    Returns:
        Engine with tables created.
    """
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite" and url.database not in (None, "", ":memory:"):
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(database_url, echo=echo, pool_pre_ping=True)
    Base.metadata.create_all(engine)
    return engine


def create_session_factory(engine: Engine) -> sessionmaker:
    """Create a session factory bound to an engine."""
    return sessionmaker(engine, expire_on_commit=False)
