"""Track record and access grant repositories."""

from trackvault.infrastructure.persistence.repositories.track.access import (
    TrackAccessRepository,
)
from trackvault.infrastructure.persistence.repositories.track.core import (
    TrackRepository,
)
from trackvault.infrastructure.persistence.repositories.track.mapper import (
    AccessGrantMapper,
    TrackMapper,
)

__all__ = [
    "AccessGrantMapper",
    "TrackAccessRepository",
    "TrackMapper",
    "TrackRepository",
]
