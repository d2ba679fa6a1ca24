"""Repository layer base classes for SQLAlchemy 2.0 async sessions."""

from typing import Any, Generic, Protocol, TypeVar

from attrs import define
from sqlalchemy import Select, delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import ColumnElement

from trackvault.config import get_logger
from trackvault.infrastructure.persistence.database.db_models import TrackVaultDBBase

logger = get_logger(__name__)

# SQLite INTEGER is a signed 64-bit value
MAX_ROW_ID = 2**63 - 1

TDBModel = TypeVar("TDBModel", bound=TrackVaultDBBase)
TDomainModel = TypeVar("TDomainModel")


def is_storable_id(value: int) -> bool:
    """True iff ``value`` can name a row; anything else can never match one."""
    return 0 < value <= MAX_ROW_ID


class ModelMapper(Protocol[TDBModel, TDomainModel]):
    """Protocol for bidirectional mapping between models."""

    @staticmethod
    def to_domain(db_model: TDBModel) -> TDomainModel:
        """Convert database model to domain model."""
        ...

    @staticmethod
    def to_db(domain_model: TDomainModel) -> TDBModel:
        """Convert domain model to database model."""
        ...


@define(frozen=True, slots=True)
class BaseModelMapper(Generic[TDBModel, TDomainModel]):
    """Base implementation of ModelMapper.

    Usage:
        @define(frozen=True, slots=True)
        class GrantMapper(BaseModelMapper[DBTrackAccess, AccessGrant]):
            @staticmethod
            def to_domain(db_model: DBTrackAccess) -> AccessGrant:
                return AccessGrant(...)

            @staticmethod
            def to_db(domain_model: AccessGrant) -> DBTrackAccess:
                return DBTrackAccess(...)
    """

    @staticmethod
    def to_domain(db_model: TDBModel) -> TDomainModel:
        raise NotImplementedError("Subclasses must implement to_domain")

    @staticmethod
    def to_db(domain_model: TDomainModel) -> TDBModel:
        raise NotImplementedError("Subclasses must implement to_db")


class BaseRepository(Generic[TDBModel, TDomainModel]):
    """Base repository sharing one session with the rest of a unit of work."""

    def __init__(
        self,
        session: AsyncSession,
        model_class: type[TDBModel],
        mapper: ModelMapper[TDBModel, TDomainModel],
    ) -> None:
        self.session = session
        self.model_class = model_class
        self.mapper = mapper
        logger.debug(
            f"Initialized {self.__class__.__name__} for {model_class.__name__}",
        )

    def select_where(self, conditions: list[ColumnElement]) -> Select[tuple[TDBModel]]:
        """Create select statement for rows matching every condition."""
        return select(self.model_class).where(*conditions)

    async def find_db_model(self, conditions: list[ColumnElement]) -> TDBModel | None:
        """Fetch the single row matching ``conditions``, if any."""
        result = await self.session.execute(self.select_where(conditions))
        return result.scalar_one_or_none()

    async def find_one(self, conditions: list[ColumnElement]) -> TDomainModel | None:
        """Fetch and map the single row matching ``conditions``, if any."""
        db_model = await self.find_db_model(conditions)
        if db_model is None:
            return None
        return self.mapper.to_domain(db_model)

    async def exists(self, conditions: list[ColumnElement]) -> bool:
        """Check whether any row matches ``conditions``."""
        return await self.find_db_model(conditions) is not None

    async def insert(self, domain_model: TDomainModel) -> TDomainModel:
        """Insert a new row built from ``domain_model`` and flush it."""
        db_model = self.mapper.to_db(domain_model)
        self.session.add(db_model)
        await self.session.flush()
        return self.mapper.to_domain(db_model)

    async def apply_changes(self, db_model: TDBModel, values: dict[str, Any]) -> TDBModel:
        """Assign ``values`` onto a loaded row and flush."""
        for key, value in values.items():
            setattr(db_model, key, value)
        await self.session.flush()
        return db_model

    async def delete_where(self, conditions: list[ColumnElement]) -> int:
        """Delete every row matching ``conditions``; returns the row count."""
        result = await self.session.execute(
            delete(self.model_class)
            .where(*conditions)
            .execution_options(synchronize_session="fetch")
        )
        return result.rowcount or 0
