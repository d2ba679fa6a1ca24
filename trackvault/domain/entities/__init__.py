"""Core domain entities for the track catalog."""

from .access import AccessGrant
from .track import TrackRecord

__all__ = [
    "AccessGrant",
    "TrackRecord",
]
