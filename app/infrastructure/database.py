"""
Database engine and schema for the person store.

SQLAlchemy Core table definitions plus the engine factory. The schema is
created idempotently at startup; there is no migration tooling.
"""

import logging

from sqlalchemy import Column, Integer, MetaData, String, Table, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from app.domain.person.name_validator import NAME_MAX_LENGTH

logger = logging.getLogger(__name__)

metadata = MetaData()

persons = Table(
    "persons",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(NAME_MAX_LENGTH), nullable=False),
)


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Build a SQLAlchemy engine for the given URL.

    SQLite connections are shared across the request threadpool, and an
    in-memory SQLite database is pinned to a single connection so every
    request sees the same data.

    Args:
        database_url: SQLAlchemy database URL.
        echo: Log every SQL statement.

    Returns:
        A configured Engine.
    """
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in database_url or database_url in ("sqlite://", "sqlite:///"):
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, echo=echo, **kwargs)
    return create_engine(database_url, echo=echo, pool_pre_ping=True)


def create_schema(engine: Engine) -> None:
    """Create the person tables if they do not exist yet."""
    metadata.create_all(engine)
    logger.info("Person schema ready on %s", engine.url.render_as_string(hide_password=True))
