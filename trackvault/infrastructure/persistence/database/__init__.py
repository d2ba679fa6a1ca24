"""Database models and connection management."""

from .db_connection import create_db_engine, create_session_factory
from .db_models import (
    DBCatalogCounter,
    DBTrack,
    DBTrackAccess,
    TrackVaultDBBase,
    init_db,
)

__all__ = [
    "DBCatalogCounter",
    "DBTrack",
    "DBTrackAccess",
    "TrackVaultDBBase",
    "create_db_engine",
    "create_session_factory",
    "init_db",
]
