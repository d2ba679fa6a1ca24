"""Database Unit of Work implementation for transaction boundary management.

Each public catalog operation runs inside exactly one unit of work, so all of
its reads see one consistent state and its writes commit or roll back together.
"""

from typing import Self

from sqlalchemy.ext.asyncio import AsyncSession

from trackvault.config import get_logger
from trackvault.domain.repositories.interfaces import (
    AccessRepositoryProtocol,
    CounterRepositoryProtocol,
    TrackRepositoryProtocol,
)
from trackvault.infrastructure.persistence.repositories.counter import (
    CatalogCounterRepository,
)
from trackvault.infrastructure.persistence.repositories.track.access import (
    TrackAccessRepository,
)
from trackvault.infrastructure.persistence.repositories.track.core import (
    TrackRepository,
)

logger = get_logger(__name__)


class DatabaseUnitOfWork:
    """Database implementation of the Unit of Work pattern.

    Commits on clean exit unless ``commit`` was already called, rolls back
    when the block raises, and closes the session either way.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._committed = False

    async def __aenter__(self) -> Self:
        self._committed = False
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        try:
            if exc_type is not None:
                logger.debug(f"Rolling back unit of work after {exc_type.__name__}")
                await self.rollback()
            elif not self._committed:
                await self.commit()
        finally:
            await self._session.close()

    async def commit(self) -> None:
        """Explicitly commit the current transaction."""
        await self._session.commit()
        self._committed = True

    async def rollback(self) -> None:
        """Explicitly rollback the current transaction."""
        await self._session.rollback()

    def get_track_repository(self) -> TrackRepositoryProtocol:
        return TrackRepository(self._session)

    def get_access_repository(self) -> AccessRepositoryProtocol:
        return TrackAccessRepository(self._session)

    def get_counter_repository(self) -> CounterRepositoryProtocol:
        return CatalogCounterRepository(self._session)
