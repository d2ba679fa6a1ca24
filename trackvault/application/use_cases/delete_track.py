"""DeleteTrack use case: owner-only removal of a track record."""

from attrs import define

from trackvault.application.context import CallContext
from trackvault.config import get_logger
from trackvault.domain.authorization import require_owner
from trackvault.domain.repositories import UnitOfWorkProtocol

logger = get_logger(__name__)


@define(frozen=True, slots=True)
class DeleteTrackCommand:
    track_id: int


@define(slots=True)
class DeleteTrackUseCase:
    """Remove the track and the caller's own grant for it.

    Grants held by other listeners are left in the access table, and the
    track counter is untouched so the id is never handed out again.
    """

    async def execute(
        self,
        command: DeleteTrackCommand,
        context: CallContext,
        uow: UnitOfWorkProtocol,
    ) -> None:
        async with uow:
            track_repo = uow.get_track_repository()
            require_owner(
                await track_repo.find_track_by_id(command.track_id),
                command.track_id,
                context.caller,
            )
            await track_repo.delete_track(command.track_id)
            await uow.get_access_repository().delete_grant(
                command.track_id, context.caller
            )

        logger.info(f"Track {command.track_id} deleted by {context.caller}")
