"""Repository layer for database operations with SQLAlchemy 2.0."""

from trackvault.infrastructure.persistence.repositories.base_repo import (
    BaseModelMapper,
    BaseRepository,
    ModelMapper,
)
from trackvault.infrastructure.persistence.repositories.counter import (
    CatalogCounterRepository,
)
from trackvault.infrastructure.persistence.repositories.repo_decorator import (
    db_operation,
)
from trackvault.infrastructure.persistence.repositories.track import (
    AccessGrantMapper,
    TrackAccessRepository,
    TrackMapper,
    TrackRepository,
)

__all__ = [
    "AccessGrantMapper",
    "BaseModelMapper",
    "BaseRepository",
    "CatalogCounterRepository",
    "ModelMapper",
    "TrackAccessRepository",
    "TrackMapper",
    "TrackRepository",
    "db_operation",
]
