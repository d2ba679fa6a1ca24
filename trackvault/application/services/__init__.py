"""Application services."""

from .track_lookup import TrackLookupService

__all__ = ["TrackLookupService"]
