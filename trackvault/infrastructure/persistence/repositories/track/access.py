"""Track repository for per-listener access grants."""

from sqlalchemy.ext.asyncio import AsyncSession

from trackvault.config import get_logger
from trackvault.domain.entities import AccessGrant
from trackvault.infrastructure.persistence.database.db_models import DBTrackAccess
from trackvault.infrastructure.persistence.repositories.base_repo import (
    BaseRepository,
    is_storable_id,
)
from trackvault.infrastructure.persistence.repositories.repo_decorator import (
    db_operation,
)
from trackvault.infrastructure.persistence.repositories.track.mapper import (
    AccessGrantMapper,
)

logger = get_logger(__name__)


class TrackAccessRepository(BaseRepository[DBTrackAccess, AccessGrant]):
    """Repository for access grant operations.

    Lookups are by exact (track, listener) key and never consult the
    tracks table.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(
            session=session,
            model_class=DBTrackAccess,
            mapper=AccessGrantMapper(),
        )

    def _key_conditions(self, track_id: int, listener: str) -> list:
        return [
            self.model_class.track_id == track_id,
            self.model_class.listener == listener,
        ]

    @db_operation("find_grant")
    async def find_grant(self, track_id: int, listener: str) -> AccessGrant | None:
        if not is_storable_id(track_id):
            return None
        return await self.find_one(self._key_conditions(track_id, listener))

    @db_operation("save_grant")
    async def save_grant(self, grant: AccessGrant) -> AccessGrant:
        """Insert the grant, or overwrite ``can_access`` on an existing key."""
        existing = await self.find_db_model(
            self._key_conditions(grant.track_id, grant.listener)
        )
        if existing is None:
            return await self.insert(grant)

        updated = await self.apply_changes(existing, {"can_access": grant.can_access})
        return self.mapper.to_domain(updated)

    @db_operation("delete_grant")
    async def delete_grant(self, track_id: int, listener: str) -> bool:
        if not is_storable_id(track_id):
            return False
        removed = await self.delete_where(self._key_conditions(track_id, listener))
        if removed:
            logger.debug(f"Removed access grant ({track_id}, {listener})")
        return removed > 0
