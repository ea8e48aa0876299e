"""
Unit tests for the two sync strategies and the last sync timestamp.
"""
from datetime import datetime, timezone

import pytest

from snapfind.application.use_cases.sync import (
    ClearAndSyncUseCase,
    GetLastSyncTimeUseCase,
    MergeSyncUseCase,
)
from snapfind.core.exceptions import AuthenticationError, RemoteStoreError
from snapfind.domain.models.object_with_picture import ObjectWithPicture


def _remote_rows():
    return [
        ObjectWithPicture(
            object_id="remote-1", object_name="lamp", picture_id="p1", user_id="u1",
            image_url="user-u1/images/snapfind_9.jpg", x_position=40, y_position=60,
            has_ai_coordinates=True, created_at=datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc),
        )
    ]


class TestClearAndSync:
    @pytest.mark.asyncio
    async def test_cache_mirrors_remote(self, cache, make_entry, mock_object_repo):
        await cache.add(make_entry(name="offline-only"))
        await cache.add(make_entry(user_id="u2"))
        mock_object_repo.list_with_pictures.return_value = _remote_rows()

        result = await ClearAndSyncUseCase(mock_object_repo, cache).execute("u1")

        assert result.success is True
        assert result.synced_count == 1
        entries = await cache.load_entries()
        assert [(e.id, e.object_name, e.user_id) for e in entries] == [("remote-1", "lamp", "u1")]
        assert entries[0].picture_id == "p1"
        assert entries[0].created_at == "2024-03-01T09:00:00.000Z"
        last_sync = await cache.get_last_sync_time()
        assert abs((last_sync - result.synced_at).total_seconds()) < 0.001

    @pytest.mark.asyncio
    async def test_remote_failure_leaves_cache_empty(self, cache, make_entry, mock_object_repo):
        await cache.add(make_entry())
        mock_object_repo.list_with_pictures.side_effect = RemoteStoreError("offline")

        result = await ClearAndSyncUseCase(mock_object_repo, cache).execute("u1")

        assert result.success is False
        assert result.error
        assert await cache.load_entries() == []
        assert await cache.get_last_sync_time() is None

    @pytest.mark.asyncio
    async def test_requires_owner(self, cache, mock_object_repo):
        with pytest.raises(AuthenticationError):
            await ClearAndSyncUseCase(mock_object_repo, cache).execute(None)


class TestMergeSync:
    @pytest.mark.asyncio
    async def test_replaces_only_owner_entries(self, cache, make_entry, mock_object_repo):
        await cache.add(make_entry(name="offline-only"))
        await cache.add(make_entry(user_id="u2"))
        mock_object_repo.list_with_pictures.return_value = _remote_rows()

        result = await MergeSyncUseCase(mock_object_repo, cache).execute("u1")

        assert result.success is True
        assert [e.object_name for e in await cache.get_all("u1")] == ["lamp"]
        assert len(await cache.get_all("u2")) == 1

    @pytest.mark.asyncio
    async def test_remote_failure_leaves_cache_untouched(self, cache, make_entry, mock_object_repo):
        await cache.add(make_entry())
        mock_object_repo.list_with_pictures.side_effect = RemoteStoreError("offline")

        result = await MergeSyncUseCase(mock_object_repo, cache).execute("u1")

        assert result.success is False
        assert [e.object_name for e in await cache.get_all("u1")] == ["cup"]


@pytest.mark.asyncio
async def test_last_sync_time(cache):
    use_case = GetLastSyncTimeUseCase(cache)
    assert (await use_case.execute()).last_sync is None

    moment = datetime(2024, 6, 1, tzinfo=timezone.utc)
    await cache.set_last_sync_time(moment)
    assert (await use_case.execute()).last_sync == moment
