"""Mappers between track catalog DB rows and domain entities."""

from attrs import define

from trackvault.domain.entities import AccessGrant, TrackRecord
from trackvault.infrastructure.persistence.database.db_models import (
    DBTrack,
    DBTrackAccess,
)
from trackvault.infrastructure.persistence.repositories.base_repo import (
    BaseModelMapper,
)


@define(frozen=True, slots=True)
class TrackMapper(BaseModelMapper[DBTrack, TrackRecord]):
    """Maps between DBTrack and TrackRecord domain models."""

    @staticmethod
    def to_domain(db_model: DBTrack) -> TrackRecord:
        return TrackRecord(
            track_id=db_model.id,
            name=db_model.name,
            performer=db_model.performer,
            creator=db_model.creator,
            length=db_model.length,
            added_at=db_model.added_at,
            category=db_model.category,
            labels=db_model.labels or [],
        )

    @staticmethod
    def to_db(domain_model: TrackRecord) -> DBTrack:
        return DBTrack(
            id=domain_model.track_id,
            name=domain_model.name,
            performer=domain_model.performer,
            creator=domain_model.creator,
            length=domain_model.length,
            added_at=domain_model.added_at,
            category=domain_model.category,
            labels=list(domain_model.labels),
        )


@define(frozen=True, slots=True)
class AccessGrantMapper(BaseModelMapper[DBTrackAccess, AccessGrant]):
    """Maps between DBTrackAccess and AccessGrant domain models."""

    @staticmethod
    def to_domain(db_model: DBTrackAccess) -> AccessGrant:
        return AccessGrant(
            track_id=db_model.track_id,
            listener=db_model.listener,
            can_access=bool(db_model.can_access),
        )

    @staticmethod
    def to_db(domain_model: AccessGrant) -> DBTrackAccess:
        return DBTrackAccess(
            track_id=domain_model.track_id,
            listener=domain_model.listener,
            can_access=domain_model.can_access,
        )
