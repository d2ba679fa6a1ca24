"""Public operation surface of the track catalog.

``TrackCatalog`` exposes every catalog operation under its public name. Each
call gets a fresh unit of work from the factory the catalog was built with,
so the caller owns the store and the catalog owns nothing but the wiring.

Usage:
------
```python
async with CatalogStore() as store:
    catalog = TrackCatalog(store.unit_of_work)
    ctx = CallContext(caller="alice", block_height=120)
    track_id = await catalog.register_track(
        ctx, "Blue in Green", "Miles Davis", 337, "jazz", ["modal", "1959"]
    )
```
"""

from collections.abc import Callable, Coroutine, Sequence
import functools
from typing import Any, ParamSpec, TypeVar

from trackvault.application.context import CallContext
from trackvault.application.services.track_lookup import TrackLookupService
from trackvault.application.use_cases import (
    DeleteTrackCommand,
    DeleteTrackUseCase,
    ModifyTrackCommand,
    ModifyTrackUseCase,
    RegisterTrackCommand,
    RegisterTrackUseCase,
    TransferOwnershipCommand,
    TransferOwnershipUseCase,
)
from trackvault.config import get_logger
from trackvault.domain.entities import TrackRecord
from trackvault.domain.errors import CatalogError
from trackvault.domain.repositories import UnitOfWorkProtocol

logger = get_logger(__name__)

P = ParamSpec("P")
T = TypeVar("T")

UnitOfWorkFactory = Callable[[], UnitOfWorkProtocol]


def catalog_operation(operation_name: str | None = None):
    """Log rejected catalog operations with their error kind, then re-raise.

    Args:
        operation_name: Optional name for the operation (defaults to function name)
    """

    def decorator(
        func: Callable[P, Coroutine[Any, Any, T]],
    ) -> Callable[P, Coroutine[Any, Any, T]]:
        op_name = operation_name or func.__name__

        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            try:
                return await func(*args, **kwargs)
            except CatalogError as e:
                logger.warning(
                    f"{op_name} rejected: {e.kind.value}",
                    operation=op_name,
                    error=str(e),
                )
                raise

        return wrapper

    return decorator


class TrackCatalog:
    """Track registry and access-rights table behind one object.

    Operations that take a ``CallContext`` use its caller identity for
    authorization and its block height as the creation timestamp.
    """

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory
        self._lookup = TrackLookupService()

    # -------------------------------------------------------------------------
    # MUTATIONS
    # -------------------------------------------------------------------------

    @catalog_operation()
    async def register_track(
        self,
        context: CallContext,
        name: str,
        performer: str,
        length: int,
        category: str,
        labels: Sequence[str],
    ) -> int:
        """Register a track owned by the caller and return its new id."""
        command = RegisterTrackCommand(
            name=name,
            performer=performer,
            length=length,
            category=category,
            labels=labels,
        )
        return await RegisterTrackUseCase().execute(
            command, context, self._uow_factory()
        )

    @catalog_operation()
    async def modify_track_info(
        self,
        context: CallContext,
        track_id: int,
        name: str,
        length: int,
        category: str,
        labels: Sequence[str],
    ) -> TrackRecord:
        """Replace name, length, category and labels of a track the caller owns."""
        command = ModifyTrackCommand(
            track_id=track_id,
            name=name,
            length=length,
            category=category,
            labels=labels,
        )
        return await ModifyTrackUseCase().execute(
            command, context, self._uow_factory()
        )

    @catalog_operation()
    async def change_track_owner(
        self, context: CallContext, track_id: int, new_creator: str
    ) -> TrackRecord:
        command = TransferOwnershipCommand(track_id=track_id, new_creator=new_creator)
        return await TransferOwnershipUseCase().execute(
            command, context, self._uow_factory()
        )

    @catalog_operation()
    async def change_owner_with_access_check(
        self, context: CallContext, track_id: int, new_creator: str
    ) -> TrackRecord:
        """Transfer ownership only to a listener already granted access."""
        command = TransferOwnershipCommand(
            track_id=track_id,
            new_creator=new_creator,
            require_listener_access=True,
        )
        return await TransferOwnershipUseCase().execute(
            command, context, self._uow_factory()
        )

    @catalog_operation()
    async def delete_track(self, context: CallContext, track_id: int) -> None:
        await DeleteTrackUseCase().execute(
            DeleteTrackCommand(track_id=track_id), context, self._uow_factory()
        )

    # -------------------------------------------------------------------------
    # QUERIES
    # -------------------------------------------------------------------------

    @catalog_operation()
    async def get_track_info(self, track_id: int) -> TrackRecord:
        return await self._lookup.get_track(track_id, self._uow_factory())

    async def _track_field(self, track_id: int, attribute: str):
        track = await self._lookup.get_track(track_id, self._uow_factory())
        return getattr(track, attribute)

    @catalog_operation()
    async def lookup_track_name(self, track_id: int) -> str:
        return await self._track_field(track_id, "name")

    @catalog_operation()
    async def lookup_track_performer(self, track_id: int) -> str:
        return await self._track_field(track_id, "performer")

    @catalog_operation()
    async def lookup_track_category(self, track_id: int) -> str:
        return await self._track_field(track_id, "category")

    @catalog_operation()
    async def lookup_track_labels(self, track_id: int) -> tuple[str, ...]:
        return await self._track_field(track_id, "labels")

    get_all_track_labels = lookup_track_labels
    get_track_metadata = lookup_track_labels

    @catalog_operation()
    async def lookup_track_length(self, track_id: int) -> int:
        return await self._track_field(track_id, "length")

    @catalog_operation()
    async def get_creator_only_track_length(
        self, context: CallContext, track_id: int
    ) -> int:
        track = await self._lookup.get_owned_track(
            track_id, context, self._uow_factory()
        )
        return track.length

    @catalog_operation()
    async def lookup_track_creator(self, track_id: int) -> str:
        return await self._track_field(track_id, "creator")

    @catalog_operation()
    async def lookup_track_creation_block(self, track_id: int) -> int:
        return await self._track_field(track_id, "added_at")

    @catalog_operation()
    async def get_catalog_size(self) -> int:
        """Current value of the track counter."""
        return await self._lookup.catalog_size(self._uow_factory())

    @catalog_operation()
    async def is_track_in_catalog(self, track_id: int) -> bool:
        return await self._lookup.track_exists(track_id, self._uow_factory())

    @catalog_operation()
    async def check_listener_access(self, track_id: int, listener: str) -> bool:
        """Stored grant for (track, listener); NotFoundError when no grant exists."""
        return await self._lookup.listener_access(
            track_id, listener, self._uow_factory()
        )

    verify_listener_access = check_listener_access
