"""Tests for ownership and access checks."""

import pytest

from trackvault.domain.authorization import (
    has_access,
    is_owner,
    require_access,
    require_owner,
    require_track,
)
from trackvault.domain.entities import AccessGrant
from trackvault.domain.errors import (
    AccessForbiddenError,
    NoPermissionError,
    NotFoundError,
)


class TestIsOwner:
    def test_creator_is_owner(self, track):
        assert is_owner(track, "alice")

    def test_other_identity_is_not_owner(self, track):
        assert not is_owner(track, "bob")

    def test_missing_track_is_not_an_error(self):
        assert is_owner(None, "alice") is False


class TestRequireOwner:
    def test_returns_track_for_owner(self, track):
        assert require_owner(track, 1, "alice") is track

    def test_missing_track_raises_not_found_before_permission(self):
        with pytest.raises(NotFoundError):
            require_owner(None, 1, "bob")

    def test_non_owner_raises_no_permission(self, track):
        with pytest.raises(NoPermissionError):
            require_owner(track, 1, "bob")

    def test_require_track(self, track):
        assert require_track(track, 1) is track
        with pytest.raises(NotFoundError):
            require_track(None, 2)


class TestAccess:
    def test_true_grant_allows(self, grant):
        assert has_access(grant)
        require_access(grant, 1, "bob")

    def test_false_grant_is_forbidden(self):
        denied = AccessGrant(track_id=1, listener="bob", can_access=False)
        assert not has_access(denied)
        with pytest.raises(AccessForbiddenError):
            require_access(denied, 1, "bob")

    def test_missing_grant_is_forbidden(self):
        with pytest.raises(AccessForbiddenError):
            require_access(None, 1, "carol")
