"""Read-only catalog queries.

Every query opens its own unit of work and never writes. Track lookups
raise ``NotFoundError`` for absent ids; ``track_exists`` is the one query
that answers with a boolean instead.
"""

from trackvault.application.context import CallContext
from trackvault.application.use_cases.register_track import TRACK_COUNTER
from trackvault.config import get_logger
from trackvault.domain.authorization import require_owner, require_track
from trackvault.domain.entities import TrackRecord
from trackvault.domain.errors import NotFoundError
from trackvault.domain.repositories import UnitOfWorkProtocol

logger = get_logger(__name__)


class TrackLookupService:
    """Query surface over the tracks table, the access table and the counter."""

    async def get_track(self, track_id: int, uow: UnitOfWorkProtocol) -> TrackRecord:
        async with uow:
            track = await uow.get_track_repository().find_track_by_id(track_id)
        return require_track(track, track_id)

    async def get_owned_track(
        self,
        track_id: int,
        context: CallContext,
        uow: UnitOfWorkProtocol,
    ) -> TrackRecord:
        """Fetch a track only if the caller is its creator."""
        async with uow:
            track = await uow.get_track_repository().find_track_by_id(track_id)
        return require_owner(track, track_id, context.caller)

    async def track_exists(self, track_id: int, uow: UnitOfWorkProtocol) -> bool:
        async with uow:
            return await uow.get_track_repository().track_exists(track_id)

    async def catalog_size(self, uow: UnitOfWorkProtocol) -> int:
        """Number of tracks ever registered, deleted ones included."""
        async with uow:
            return await uow.get_counter_repository().get_value(TRACK_COUNTER)

    async def listener_access(
        self,
        track_id: int,
        listener: str,
        uow: UnitOfWorkProtocol,
    ) -> bool:
        """Stored grant value for the exact (track, listener) key.

        Track existence is not consulted; a missing grant is an error and is
        never read as a denial.
        """
        async with uow:
            grant = await uow.get_access_repository().find_grant(track_id, listener)
        if grant is None:
            raise NotFoundError(
                f"No access record for listener {listener} on track {track_id}"
            )
        return grant.can_access
