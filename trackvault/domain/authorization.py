"""Ownership checks gating mutations and restricted reads."""

from .entities import AccessGrant, TrackRecord
from .errors import AccessForbiddenError, NoPermissionError, NotFoundError


def is_owner(track: TrackRecord | None, identity: str) -> bool:
    """True iff the track exists and ``identity`` is its current creator."""
    return track is not None and track.creator == identity


def require_track(track: TrackRecord | None, track_id: int) -> TrackRecord:
    """Return ``track`` or raise ``NotFoundError`` if it is absent."""
    if track is None:
        raise NotFoundError(f"Track {track_id} not found")
    return track


def require_owner(
    track: TrackRecord | None,
    track_id: int,
    identity: str,
) -> TrackRecord:
    """Check existence, then ownership.

    Raises:
        NotFoundError: no record for ``track_id``
        NoPermissionError: ``identity`` is not the current creator
    """
    record = require_track(track, track_id)
    if not is_owner(record, identity):
        raise NoPermissionError(
            f"Caller {identity} is not the creator of track {track_id}"
        )
    return record


def has_access(grant: AccessGrant | None) -> bool:
    """True iff a grant exists and allows access."""
    return grant is not None and grant.can_access


def require_access(grant: AccessGrant | None, track_id: int, listener: str) -> None:
    """Raise ``AccessForbiddenError`` unless ``listener`` holds a true grant."""
    if not has_access(grant):
        raise AccessForbiddenError(
            f"Listener {listener} has no access grant for track {track_id}"
        )
