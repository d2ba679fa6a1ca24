"""Unit test fixtures - use cases run against a mocked unit of work.

Re-exports the domain fixtures so use case tests can build on the same
records.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from tests.domain.conftest import grant, track

__all__ = ["grant", "mock_uow", "track"]


@pytest.fixture
def mock_uow():
    """Unit of work whose repositories are mocks with async methods."""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)

    track_repo = MagicMock()
    track_repo.find_track_by_id = AsyncMock(return_value=None)
    track_repo.track_exists = AsyncMock(return_value=False)
    track_repo.add_track = AsyncMock(side_effect=lambda t: t)
    track_repo.update_track = AsyncMock(side_effect=lambda t: t)
    track_repo.delete_track = AsyncMock(return_value=True)

    access_repo = MagicMock()
    access_repo.find_grant = AsyncMock(return_value=None)
    access_repo.save_grant = AsyncMock(side_effect=lambda g: g)
    access_repo.delete_grant = AsyncMock(return_value=True)

    counter_repo = MagicMock()
    counter_repo.get_value = AsyncMock(return_value=0)
    counter_repo.increment = AsyncMock(return_value=1)

    uow.get_track_repository.return_value = track_repo
    uow.get_access_repository.return_value = access_repo
    uow.get_counter_repository.return_value = counter_repo
    return uow
