"""Domain layer test fixtures - Pure business objects with no dependencies."""

import pytest

from trackvault.domain.entities import AccessGrant, TrackRecord


@pytest.fixture
def track():
    """Basic track record owned by alice."""
    return TrackRecord(
        track_id=1,
        name="So What",
        performer="Miles Davis",
        creator="alice",
        length=562,
        added_at=100,
        category="jazz",
        labels=["modal", "1959"],
    )


@pytest.fixture
def grant():
    return AccessGrant(track_id=1, listener="bob", can_access=True)
