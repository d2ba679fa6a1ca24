"""trackvault - track metadata registry with per-listener access rights."""

from trackvault.application import CallContext, TrackCatalog
from trackvault.domain import AccessGrant, CatalogError, ErrorKind, TrackRecord
from trackvault.infrastructure.persistence import CatalogStore

__version__ = "0.1.0"

__all__ = [
    "AccessGrant",
    "CallContext",
    "CatalogError",
    "CatalogStore",
    "ErrorKind",
    "TrackCatalog",
    "TrackRecord",
]
