"""Catalog store owning the database engine for one catalog instance.

A store is created once (genesis), initialized to create the schema, and
then hands out a fresh unit of work per catalog operation.
"""

from typing import Self

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from trackvault.config import get_logger, log_startup_info
from trackvault.infrastructure.persistence.database.db_connection import (
    create_db_engine,
    create_session_factory,
)
from trackvault.infrastructure.persistence.database.db_models import init_db
from trackvault.infrastructure.persistence.unit_of_work import DatabaseUnitOfWork

logger = get_logger(__name__)


class CatalogStore:
    """Owner of the tracks table, the access table and the track counter.

    Example:
        ```python
        async with CatalogStore("sqlite+aiosqlite:///:memory:") as store:
            catalog = TrackCatalog(store.unit_of_work)
            track_id = await catalog.register_track(ctx, ...)
        ```
    """

    def __init__(
        self,
        database_url: str | None = None,
        echo: bool | None = None,
    ) -> None:
        self._engine: AsyncEngine = create_db_engine(database_url, echo=echo)
        self._session_factory: async_sessionmaker = create_session_factory(
            self._engine
        )
        self._initialized = False

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @property
    def initialized(self) -> bool:
        return self._initialized

    async def initialize(self) -> None:
        """Create the catalog schema; safe to call more than once."""
        if self._initialized:
            return
        log_startup_info()
        await init_db(self._engine)
        self._initialized = True

    def unit_of_work(self) -> DatabaseUnitOfWork:
        """Create a unit of work over a new session."""
        return DatabaseUnitOfWork(self._session_factory())

    async def dispose(self) -> None:
        """Release every pooled connection."""
        await self._engine.dispose()
        self._initialized = False
        logger.info("Catalog store disposed")

    async def __aenter__(self) -> Self:
        await self.initialize()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        await self.dispose()
