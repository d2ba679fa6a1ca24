"""ModifyTrack use case: owner-only update of descriptive track fields."""

from attrs import define, field

from trackvault.application.context import CallContext
from trackvault.config import get_logger
from trackvault.domain.authorization import require_owner
from trackvault.domain.entities import TrackRecord
from trackvault.domain.entities.track import as_label_tuple
from trackvault.domain.repositories import UnitOfWorkProtocol
from trackvault.domain.validation import validate_track_details

logger = get_logger(__name__)


@define(frozen=True, slots=True)
class ModifyTrackCommand:
    """Replacement values for a track's name, length, category and labels.

    Performer is fixed at registration and has no field here.
    """

    track_id: int
    name: str
    length: int
    category: str
    labels: tuple[str, ...] = field(converter=as_label_tuple)

    def validate(self) -> None:
        validate_track_details(self.name, self.length, self.category, self.labels)


@define(slots=True)
class ModifyTrackUseCase:
    """Replace descriptive fields in place; creator and added_at stay put."""

    async def execute(
        self,
        command: ModifyTrackCommand,
        context: CallContext,
        uow: UnitOfWorkProtocol,
    ) -> TrackRecord:
        command.validate()

        async with uow:
            track_repo = uow.get_track_repository()
            current = require_owner(
                await track_repo.find_track_by_id(command.track_id),
                command.track_id,
                context.caller,
            )
            updated = await track_repo.update_track(
                current.with_details(
                    name=command.name,
                    length=command.length,
                    category=command.category,
                    labels=command.labels,
                )
            )

        logger.info(f"Track {command.track_id} modified by {context.caller}")
        return updated
