"""A failing write inside an operation must leave no partial state behind."""

import pytest

from trackvault.infrastructure.persistence.repositories import (
    CatalogCounterRepository,
    TrackAccessRepository,
)


async def _fail(*args, **kwargs):
    raise RuntimeError("disk full")


@pytest.mark.asyncio
async def test_register_rolls_back_when_grant_write_fails(
    catalog, alice, track_fields, monkeypatch
):
    monkeypatch.setattr(TrackAccessRepository, "save_grant", _fail)

    with pytest.raises(RuntimeError, match="disk full"):
        await catalog.register_track(alice, **track_fields)

    assert await catalog.is_track_in_catalog(1) is False
    assert await catalog.get_catalog_size() == 0


@pytest.mark.asyncio
async def test_register_rolls_back_when_counter_write_fails(
    catalog, alice, track_fields, monkeypatch
):
    await catalog.register_track(alice, **track_fields)
    monkeypatch.setattr(CatalogCounterRepository, "increment", _fail)

    with pytest.raises(RuntimeError):
        await catalog.register_track(alice, **track_fields)

    monkeypatch.undo()
    assert await catalog.is_track_in_catalog(2) is False
    assert await catalog.get_catalog_size() == 1
    # Failed attempt consumed no id
    assert await catalog.register_track(alice, **track_fields) == 2


@pytest.mark.asyncio
async def test_delete_rolls_back_when_grant_removal_fails(
    catalog, alice, track_fields, monkeypatch
):
    track_id = await catalog.register_track(alice, **track_fields)
    monkeypatch.setattr(TrackAccessRepository, "delete_grant", _fail)

    with pytest.raises(RuntimeError):
        await catalog.delete_track(alice, track_id)

    monkeypatch.undo()
    assert await catalog.is_track_in_catalog(track_id) is True
    assert await catalog.check_listener_access(track_id, "alice") is True


@pytest.mark.asyncio
async def test_store_initialize_is_idempotent(store, catalog, alice, track_fields):
    track_id = await catalog.register_track(alice, **track_fields)

    await store.initialize()

    assert store.initialized is True
    assert await catalog.is_track_in_catalog(track_id) is True
