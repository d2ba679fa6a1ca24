"""Unit tests for owner-gated mutations: modify, transfer, delete."""

import pytest

from trackvault.application.context import CallContext
from trackvault.application.use_cases import (
    DeleteTrackCommand,
    DeleteTrackUseCase,
    ModifyTrackCommand,
    ModifyTrackUseCase,
    TransferOwnershipCommand,
    TransferOwnershipUseCase,
)
from trackvault.domain.entities import AccessGrant
from trackvault.domain.errors import (
    AccessForbiddenError,
    InvalidLengthError,
    NoPermissionError,
    NotFoundError,
)

ALICE = CallContext(caller="alice", block_height=200)
BOB = CallContext(caller="bob", block_height=200)


def _modify_command(track_id=1, **overrides):
    fields = {
        "track_id": track_id,
        "name": "Flamenco Sketches",
        "length": 566,
        "category": "jazz",
        "labels": ["modal"],
    }
    fields.update(overrides)
    return ModifyTrackCommand(**fields)


class TestModifyTrackUseCase:
    @pytest.mark.asyncio
    async def test_owner_updates_details(self, mock_uow, track):
        track_repo = mock_uow.get_track_repository.return_value
        track_repo.find_track_by_id.return_value = track

        updated = await ModifyTrackUseCase().execute(_modify_command(), ALICE, mock_uow)

        assert updated.name == "Flamenco Sketches"
        assert updated.performer == track.performer
        assert updated.added_at == track.added_at
        assert updated.creator == "alice"
        track_repo.update_track.assert_awaited_once_with(updated)

    @pytest.mark.asyncio
    async def test_missing_track(self, mock_uow):
        with pytest.raises(NotFoundError):
            await ModifyTrackUseCase().execute(_modify_command(), ALICE, mock_uow)

    @pytest.mark.asyncio
    async def test_non_owner(self, mock_uow, track):
        track_repo = mock_uow.get_track_repository.return_value
        track_repo.find_track_by_id.return_value = track

        with pytest.raises(NoPermissionError):
            await ModifyTrackUseCase().execute(_modify_command(), BOB, mock_uow)
        track_repo.update_track.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_length_rejected_before_lookup(self, mock_uow):
        with pytest.raises(InvalidLengthError):
            await ModifyTrackUseCase().execute(
                _modify_command(length=0), ALICE, mock_uow
            )
        mock_uow.get_track_repository.return_value.find_track_by_id.assert_not_awaited()


class TestTransferOwnershipUseCase:
    @pytest.mark.asyncio
    async def test_plain_transfer_skips_grant_check(self, mock_uow, track):
        mock_uow.get_track_repository.return_value.find_track_by_id.return_value = track

        updated = await TransferOwnershipUseCase().execute(
            TransferOwnershipCommand(track_id=1, new_creator="carol"), ALICE, mock_uow
        )

        assert updated.creator == "carol"
        access_repo = mock_uow.get_access_repository.return_value
        access_repo.find_grant.assert_not_awaited()
        access_repo.save_grant.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_guarded_transfer_requires_grant(self, mock_uow, track):
        mock_uow.get_track_repository.return_value.find_track_by_id.return_value = track

        with pytest.raises(AccessForbiddenError):
            await TransferOwnershipUseCase().execute(
                TransferOwnershipCommand(
                    track_id=1, new_creator="carol", require_listener_access=True
                ),
                ALICE,
                mock_uow,
            )
        mock_uow.get_track_repository.return_value.update_track.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_guarded_transfer_rejects_false_grant(self, mock_uow, track):
        mock_uow.get_track_repository.return_value.find_track_by_id.return_value = track
        mock_uow.get_access_repository.return_value.find_grant.return_value = (
            AccessGrant(track_id=1, listener="carol", can_access=False)
        )

        with pytest.raises(AccessForbiddenError):
            await TransferOwnershipUseCase().execute(
                TransferOwnershipCommand(
                    track_id=1, new_creator="carol", require_listener_access=True
                ),
                ALICE,
                mock_uow,
            )

    @pytest.mark.asyncio
    async def test_guarded_transfer_with_grant(self, mock_uow, track, grant):
        mock_uow.get_track_repository.return_value.find_track_by_id.return_value = track
        mock_uow.get_access_repository.return_value.find_grant.return_value = grant

        updated = await TransferOwnershipUseCase().execute(
            TransferOwnershipCommand(
                track_id=1, new_creator="bob", require_listener_access=True
            ),
            ALICE,
            mock_uow,
        )

        assert updated.creator == "bob"

    @pytest.mark.asyncio
    async def test_non_owner_checked_before_grant(self, mock_uow, track):
        mock_uow.get_track_repository.return_value.find_track_by_id.return_value = track

        with pytest.raises(NoPermissionError):
            await TransferOwnershipUseCase().execute(
                TransferOwnershipCommand(
                    track_id=1, new_creator="carol", require_listener_access=True
                ),
                BOB,
                mock_uow,
            )


class TestDeleteTrackUseCase:
    @pytest.mark.asyncio
    async def test_removes_track_and_only_callers_grant(self, mock_uow, track):
        track_repo = mock_uow.get_track_repository.return_value
        track_repo.find_track_by_id.return_value = track

        await DeleteTrackUseCase().execute(DeleteTrackCommand(track_id=1), ALICE, mock_uow)

        track_repo.delete_track.assert_awaited_once_with(1)
        mock_uow.get_access_repository.return_value.delete_grant.assert_awaited_once_with(
            1, "alice"
        )

    @pytest.mark.asyncio
    async def test_non_owner_cannot_delete(self, mock_uow, track):
        track_repo = mock_uow.get_track_repository.return_value
        track_repo.find_track_by_id.return_value = track

        with pytest.raises(NoPermissionError):
            await DeleteTrackUseCase().execute(
                DeleteTrackCommand(track_id=1), BOB, mock_uow
            )
        track_repo.delete_track.assert_not_awaited()
