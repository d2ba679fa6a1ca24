"""TransferOwnership use case: hand a track to a new creator.

Two policies share one implementation. The plain transfer sets the new
creator unconditionally. The guarded transfer first requires the new creator
to already hold a true access grant for the track.
"""

from attrs import define

from trackvault.application.context import CallContext
from trackvault.config import get_logger
from trackvault.domain.authorization import require_access, require_owner
from trackvault.domain.entities import TrackRecord
from trackvault.domain.repositories import UnitOfWorkProtocol

logger = get_logger(__name__)


@define(frozen=True, slots=True)
class TransferOwnershipCommand:
    """Transfer request; ``require_listener_access`` selects the guarded policy."""

    track_id: int
    new_creator: str
    require_listener_access: bool = False


@define(slots=True)
class TransferOwnershipUseCase:
    """Change a track's creator.

    Neither policy creates, removes or changes any grant record.
    """

    async def execute(
        self,
        command: TransferOwnershipCommand,
        context: CallContext,
        uow: UnitOfWorkProtocol,
    ) -> TrackRecord:
        async with uow:
            track_repo = uow.get_track_repository()
            current = require_owner(
                await track_repo.find_track_by_id(command.track_id),
                command.track_id,
                context.caller,
            )

            if command.require_listener_access:
                grant = await uow.get_access_repository().find_grant(
                    command.track_id, command.new_creator
                )
                require_access(grant, command.track_id, command.new_creator)

            updated = await track_repo.update_track(
                current.with_creator(command.new_creator)
            )

        logger.info(
            f"Track {command.track_id} transferred from {context.caller} "
            f"to {command.new_creator}"
        )
        return updated
