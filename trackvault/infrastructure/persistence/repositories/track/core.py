"""Track repository for core track record operations."""

from sqlalchemy.ext.asyncio import AsyncSession

from trackvault.config import get_logger
from trackvault.domain.entities import TrackRecord
from trackvault.infrastructure.persistence.database.db_models import DBTrack
from trackvault.infrastructure.persistence.repositories.base_repo import (
    BaseRepository,
    is_storable_id,
)
from trackvault.infrastructure.persistence.repositories.repo_decorator import (
    db_operation,
)
from trackvault.infrastructure.persistence.repositories.track.mapper import (
    TrackMapper,
)

logger = get_logger(__name__)


class TrackRepository(BaseRepository[DBTrack, TrackRecord]):
    """Repository for track record operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(
            session=session,
            model_class=DBTrack,
            mapper=TrackMapper(),
        )

    @db_operation("find_track_by_id")
    async def find_track_by_id(self, track_id: int) -> TrackRecord | None:
        """Get a track record, or None when absent."""
        if not is_storable_id(track_id):
            return None
        return await self.find_one([self.model_class.id == track_id])

    @db_operation("track_exists")
    async def track_exists(self, track_id: int) -> bool:
        if not is_storable_id(track_id):
            return False
        return await self.exists([self.model_class.id == track_id])

    @db_operation("add_track")
    async def add_track(self, track: TrackRecord) -> TrackRecord:
        """Insert a new record keyed by ``track.track_id``."""
        saved = await self.insert(track)
        logger.debug(f"Inserted track {saved.track_id}: {saved.name}")
        return saved

    @db_operation("update_track")
    async def update_track(self, track: TrackRecord) -> TrackRecord:
        """Overwrite the stored record sharing ``track.track_id``.

        Raises:
            ValueError: if no record exists for the id
        """
        db_track = await self.find_db_model([self.model_class.id == track.track_id])
        if db_track is None:
            raise ValueError(f"Track {track.track_id} does not exist")

        db_track = await self.apply_changes(
            db_track,
            {
                "name": track.name,
                "performer": track.performer,
                "creator": track.creator,
                "length": track.length,
                "added_at": track.added_at,
                "category": track.category,
                "labels": list(track.labels),
            },
        )
        return self.mapper.to_domain(db_track)

    @db_operation("delete_track")
    async def delete_track(self, track_id: int) -> bool:
        """Remove a track record; returns True if one was removed."""
        if not is_storable_id(track_id):
            return False
        return await self.delete_where([self.model_class.id == track_id]) > 0
