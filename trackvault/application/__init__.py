"""Application layer - catalog operations over the domain and a unit of work."""

from .catalog import TrackCatalog, catalog_operation
from .context import CallContext

__all__ = [
    "CallContext",
    "TrackCatalog",
    "catalog_operation",
]
