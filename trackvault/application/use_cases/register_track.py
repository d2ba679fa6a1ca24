"""RegisterTrack use case: create a track, its owner grant, and its id."""

from attrs import define, field

from trackvault.application.context import CallContext
from trackvault.config import get_logger
from trackvault.domain.entities import AccessGrant, TrackRecord
from trackvault.domain.entities.track import as_label_tuple
from trackvault.domain.repositories import UnitOfWorkProtocol
from trackvault.domain.validation import validate_new_track

logger = get_logger(__name__)

TRACK_COUNTER = "track_counter"


@define(frozen=True, slots=True)
class RegisterTrackCommand:
    """Fields supplied by the caller for a new track."""

    name: str
    performer: str
    length: int
    category: str
    labels: tuple[str, ...] = field(converter=as_label_tuple)

    def validate(self) -> None:
        """Raise the first field error, in name/performer/length/category/labels order."""
        validate_new_track(
            self.name, self.performer, self.length, self.category, self.labels
        )


@define(slots=True)
class RegisterTrackUseCase:
    """Register a track owned by the caller.

    The record, the caller's default grant and the counter increment are
    written in one unit of work; the new id is the post-increment counter.
    """

    async def execute(
        self,
        command: RegisterTrackCommand,
        context: CallContext,
        uow: UnitOfWorkProtocol,
    ) -> int:
        command.validate()

        async with uow:
            counter_repo = uow.get_counter_repository()
            track_id = await counter_repo.get_value(TRACK_COUNTER) + 1

            track = TrackRecord(
                track_id=track_id,
                name=command.name,
                performer=command.performer,
                creator=context.caller,
                length=command.length,
                added_at=context.block_height,
                category=command.category,
                labels=command.labels,
            )
            await uow.get_track_repository().add_track(track)
            await uow.get_access_repository().save_grant(
                AccessGrant(track_id=track_id, listener=context.caller, can_access=True)
            )
            await counter_repo.increment(TRACK_COUNTER)

        logger.info(
            f"Registered track {track_id} for {context.caller} "
            f"at height {context.block_height}"
        )
        return track_id
