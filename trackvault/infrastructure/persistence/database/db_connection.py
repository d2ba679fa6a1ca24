"""SQLAlchemy engine and session factory construction.

This module is responsible for:
- Engine creation and SQLite connection tuning
- Session factory configuration
"""

from pathlib import Path

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from trackvault.config import get_logger, settings

logger = get_logger(__name__)


def _is_memory_database(db_url: str) -> bool:
    database = make_url(db_url).database
    return database in (None, "", ":memory:")


def create_db_engine(
    connection_string: str | None = None,
    echo: bool | None = None,
) -> AsyncEngine:
    """Create async SQLAlchemy engine tuned for SQLite.

    In-memory databases share one connection (``StaticPool``) so every
    session sees the same tables. File databases get their parent
    directory created.
    """
    db_url = connection_string or settings.database.url
    echo = settings.database.echo if echo is None else echo

    engine_kwargs: dict = {"echo": echo}
    is_sqlite = db_url.startswith("sqlite")

    if is_sqlite:
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        if _is_memory_database(db_url):
            engine_kwargs["poolclass"] = StaticPool
        else:
            database = make_url(db_url).database
            Path(database).parent.mkdir(parents=True, exist_ok=True)

    engine = create_async_engine(db_url, **engine_kwargs)

    if is_sqlite:

        @event.listens_for(engine.sync_engine, "connect")
        def _set_sqlite_pragma(dbapi_connection, _):  # pragma: no cover
            """Set SQLite PRAGMAs on connection creation."""
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA busy_timeout = 30000")
            cursor.execute("PRAGMA synchronous = NORMAL")
            cursor.execute("PRAGMA foreign_keys = ON")
            cursor.execute("PRAGMA temp_store = MEMORY")
            cursor.close()

    logger.info("Created database engine for {}", make_url(db_url).render_as_string())
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    """Create an async session factory bound to ``engine``."""
    return async_sessionmaker(
        bind=engine,
        expire_on_commit=False,
        autoflush=True,
    )
