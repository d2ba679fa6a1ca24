"""Repository for named monotonic counters."""

from attrs import define
from sqlalchemy.ext.asyncio import AsyncSession

from trackvault.infrastructure.persistence.database.db_models import DBCatalogCounter
from trackvault.infrastructure.persistence.repositories.base_repo import (
    BaseModelMapper,
    BaseRepository,
)
from trackvault.infrastructure.persistence.repositories.repo_decorator import (
    db_operation,
)


@define(frozen=True, slots=True)
class CounterMapper(BaseModelMapper[DBCatalogCounter, int]):
    """Maps a counter row to its integer value."""

    @staticmethod
    def to_domain(db_model: DBCatalogCounter) -> int:
        return db_model.value


class CatalogCounterRepository(BaseRepository[DBCatalogCounter, int]):
    """Counters start at 0 and only ever move up by one.

    A counter row is created lazily on its first increment.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(
            session=session,
            model_class=DBCatalogCounter,
            mapper=CounterMapper(),
        )

    @db_operation("get_counter_value")
    async def get_value(self, name: str) -> int:
        value = await self.find_one([self.model_class.name == name])
        return value if value is not None else 0

    @db_operation("increment_counter")
    async def increment(self, name: str) -> int:
        counter = await self.find_db_model([self.model_class.name == name])
        if counter is None:
            counter = DBCatalogCounter(name=name, value=1)
            self.session.add(counter)
            await self.session.flush()
            return counter.value

        counter = await self.apply_changes(counter, {"value": counter.value + 1})
        return counter.value
