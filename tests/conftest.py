import pytest

from trackvault.application import CallContext, TrackCatalog
from trackvault.infrastructure.persistence import CatalogStore
from trackvault.infrastructure.persistence.database import create_session_factory

IN_MEMORY_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def store():
    """Fresh in-memory catalog store per test."""
    catalog_store = CatalogStore(IN_MEMORY_URL)
    await catalog_store.initialize()
    yield catalog_store
    await catalog_store.dispose()


@pytest.fixture
def catalog(store):
    """Track catalog wired to the test store."""
    return TrackCatalog(store.unit_of_work)


@pytest.fixture
def alice():
    return CallContext(caller="alice", block_height=100)


@pytest.fixture
def bob():
    return CallContext(caller="bob", block_height=105)


@pytest.fixture
def track_fields():
    """Valid registration fields."""
    return {
        "name": "Blue in Green",
        "performer": "Miles Davis",
        "length": 337,
        "category": "jazz",
        "labels": ["modal", "1959"],
    }


@pytest.fixture
async def db_session(store):
    """Raw session on the test store for repository-level tests."""
    async with create_session_factory(store.engine)() as session:
        yield session
