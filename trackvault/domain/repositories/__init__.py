"""Domain repository interfaces following Clean Architecture principles."""

from .interfaces import (
    AccessRepositoryProtocol,
    CounterRepositoryProtocol,
    TrackRepositoryProtocol,
    UnitOfWorkProtocol,
)

__all__ = [
    "AccessRepositoryProtocol",
    "CounterRepositoryProtocol",
    "TrackRepositoryProtocol",
    "UnitOfWorkProtocol",
]
