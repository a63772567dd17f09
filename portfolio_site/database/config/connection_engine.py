"""
Connection Engine (SQLAlchemy)

Purpose
-------
Centralizes database initialization for the application:
- Builds a SQLAlchemy connection URL from environment-backed settings.
- Creates the Engine (connection pool + SQL execution entry point).
- Defines shared MetaData for table and schema objects.
- Exposes a Declarative Base class for ORM models.
- Wraps engine + session factory in a `Database` object that is built once
  per application and passed to the services that need it.

Notes
-----
- Uses `URL.create(...)` to avoid hardcoding credentials, unless a full
  `DATABASE_URL` is configured.
- In-memory SQLite databases share a single connection (`StaticPool`) so every
  session, on every thread, sees the same data.
- All ORM models must inherit from `declarativeBase` to participate in schema
  creation.
"""

import logging

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from sqlalchemy.schema import MetaData

from portfolio_site.database.config.config import Settings

logger = logging.getLogger(__name__)

metadata = MetaData()
"""
Metadata object: Stores schema-level information about tables, constraints, indexes, etc. Shared across all models.
"""

declarativeBase = declarative_base(metadata=metadata)
"""Declarative Base: Root class for ORM models.
All model classes should inherit from this to gain ORM features and automatic schema generation.
"""


def build_connection_url(settings: Settings):
    """
    Construct the SQLAlchemy connection URL from `Settings`.

    `DATABASE_URL` wins when present; otherwise the URL is assembled from the
    individual `DB_*` fields.
    """
    if settings.DATABASE_URL:
        return settings.DATABASE_URL
    return URL.create(
        drivername=settings.DB_DRIVER_NAME,
        username=settings.DB_USERNAME,
        password=settings.DB_PASSWORD,
        host=settings.DB_HOST,
        port=settings.DB_PORT,
        database=settings.DB_DATABASE_NAME,
    )


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_connection_engine(url) -> Engine:
    """
    Create the Engine for a connection URL.

    SQLite gets `check_same_thread=False` (store calls run in worker threads)
    and foreign-key enforcement; in-memory SQLite additionally gets a
    `StaticPool`.
    """
    url_text = url if isinstance(url, str) else url.render_as_string(hide_password=False)
    if not url_text.startswith("sqlite"):
        return create_engine(url, pool_pre_ping=True)

    kwargs = {"connect_args": {"check_same_thread": False}}
    if url_text in ("sqlite://", "sqlite:///:memory:") or ":memory:" in url_text:
        kwargs["poolclass"] = StaticPool
    engine = create_engine(url, **kwargs)
    event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


class Database:
    """
    Engine plus session factory for one application instance.

    Attributes
    ----------
    engine : Engine
        Core interface to the database (connections, pooling).
    session_factory : sessionmaker
        Factory producing sessions bound to `engine`. Sessions do not expire
        objects on commit, so rows can be read after the transaction closes.
    """

    def __init__(self, url):
        self.engine = create_connection_engine(url)
        self.session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(build_connection_url(settings))

    def create_all(self) -> None:
        """Create every table registered on `metadata` that does not exist yet."""
        # Import for side effects: registers all entities on `metadata`.
        import portfolio_site.database.entities  # noqa: F401

        metadata.create_all(self.engine)
        logger.info("Database schema ensured (%d tables).", len(metadata.tables))

    def dispose(self) -> None:
        self.engine.dispose()
