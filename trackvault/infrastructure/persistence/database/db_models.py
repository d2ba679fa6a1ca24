"""SQLAlchemy database models for the track catalog.

Three tables back the catalog: track records, per-listener access grants and
named counters. Grants carry no foreign key to tracks; deleting a track leaves
other listeners' grants in place.
"""

from datetime import UTC, datetime

from sqlalchemy import (
    JSON,
    Boolean,
    DateTime,
    Integer,
    MetaData,
    String,
    UniqueConstraint,
)
from sqlalchemy.ext.asyncio import AsyncAttrs, AsyncEngine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from trackvault.config import get_logger

logger = get_logger(__name__)

# Define naming convention for constraints
convention = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_N_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

metadata = MetaData(naming_convention=convention)


class TrackVaultDBBase(AsyncAttrs, DeclarativeBase):
    """Base class for all database models with bookkeeping timestamps."""

    metadata = metadata

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
    )


class DBTrack(TrackVaultDBBase):
    """Registered track; ``id`` is assigned from the track counter."""

    __tablename__ = "tracks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String(64), nullable=False)
    performer: Mapped[str] = mapped_column(String(32), nullable=False)
    creator: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    length: Mapped[int] = mapped_column(Integer, nullable=False)
    added_at: Mapped[int] = mapped_column(Integer, nullable=False)
    category: Mapped[str] = mapped_column(String(32), nullable=False)
    labels: Mapped[list[str]] = mapped_column(JSON, nullable=False)


class DBTrackAccess(TrackVaultDBBase):
    """Listening permission for one (track, listener) pair."""

    __tablename__ = "track_access"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    track_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    listener: Mapped[str] = mapped_column(String(255), nullable=False)
    can_access: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    __table_args__ = (UniqueConstraint("track_id", "listener"),)


class DBCatalogCounter(TrackVaultDBBase):
    """Named monotonic counter."""

    __tablename__ = "catalog_counters"

    name: Mapped[str] = mapped_column(String(64), primary_key=True)
    value: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


async def init_db(engine: AsyncEngine) -> None:
    """Create all catalog tables that do not exist yet."""
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    logger.info("Catalog schema initialized")
