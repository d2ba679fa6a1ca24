"""Domain repository interfaces following Clean Architecture principles.

These interfaces define the contracts for data access without depending on
infrastructure implementations, following the dependency inversion principle.
"""

from collections.abc import Awaitable
from typing import TYPE_CHECKING, Protocol, Self

if TYPE_CHECKING:
    from trackvault.domain.entities import AccessGrant, TrackRecord


class TrackRepositoryProtocol(Protocol):
    """Repository interface for track record persistence."""

    def find_track_by_id(self, track_id: int) -> Awaitable["TrackRecord | None"]:
        """Get a track record, or None when no record exists for the id."""
        ...

    def track_exists(self, track_id: int) -> Awaitable[bool]:
        """Check whether a record exists for the id."""
        ...

    def add_track(self, track: "TrackRecord") -> Awaitable["TrackRecord"]:
        """Insert a new track record under its own ``track_id``."""
        ...

    def update_track(self, track: "TrackRecord") -> Awaitable["TrackRecord"]:
        """Overwrite the stored record sharing ``track.track_id``."""
        ...

    def delete_track(self, track_id: int) -> Awaitable[bool]:
        """Remove a track record.

        Returns:
            True if a record was removed
        """
        ...


class AccessRepositoryProtocol(Protocol):
    """Repository interface for per-listener access grants."""

    def find_grant(
        self, track_id: int, listener: str
    ) -> Awaitable["AccessGrant | None"]:
        """Get the grant stored under the exact (track, listener) key."""
        ...

    def save_grant(self, grant: "AccessGrant") -> Awaitable["AccessGrant"]:
        """Insert or overwrite the grant for ``grant.key``."""
        ...

    def delete_grant(self, track_id: int, listener: str) -> Awaitable[bool]:
        """Remove a single grant.

        Returns:
            True if a grant was removed
        """
        ...


class CounterRepositoryProtocol(Protocol):
    """Repository interface for named monotonic counters."""

    def get_value(self, name: str) -> Awaitable[int]:
        """Current counter value; 0 for a counter never incremented."""
        ...

    def increment(self, name: str) -> Awaitable[int]:
        """Add one to the counter and return the post-increment value."""
        ...


class UnitOfWorkProtocol(Protocol):
    """Unit of Work interface for transaction boundary management.

    Each UnitOfWork instance manages a single transaction and provides access
    to all repositories sharing that transaction. Leaving the context without
    an exception commits; an exception rolls every write back.
    """

    async def __aenter__(self) -> Self:
        """Enter async context manager."""
        ...

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Exit async context manager with automatic commit/rollback."""
        ...

    async def commit(self) -> None:
        """Explicitly commit the current transaction."""
        ...

    async def rollback(self) -> None:
        """Explicitly rollback the current transaction."""
        ...

    def get_track_repository(self) -> TrackRepositoryProtocol:
        """Get track repository using this unit of work's transaction."""
        ...

    def get_access_repository(self) -> AccessRepositoryProtocol:
        """Get access grant repository using this unit of work's transaction."""
        ...

    def get_counter_repository(self) -> CounterRepositoryProtocol:
        """Get counter repository using this unit of work's transaction."""
        ...
