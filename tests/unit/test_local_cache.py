"""
Unit tests for the on-device cache: key-value file, write mutex and
LocalObjectCache.
"""
import asyncio
import json
from datetime import datetime, timezone

import pytest

from snapfind.domain.constants.storage_constants import OBJECTS_CACHE_KEY
from snapfind.infrastructure.local.key_value_store import JsonFileKeyValueStore
from snapfind.infrastructure.local.mutex import BusyWaitMutex


class TestJsonFileKeyValueStore:
    @pytest.mark.asyncio
    async def test_set_get_remove(self, tmp_path):
        store = JsonFileKeyValueStore(tmp_path / "kv.json")
        assert await store.get_item("k") is None

        await store.set_item("k", "v")
        assert await store.get_item("k") == "v"
        assert json.loads((tmp_path / "kv.json").read_text()) == {"k": "v"}

        await store.remove_item("k")
        assert await store.get_item("k") is None

    @pytest.mark.asyncio
    async def test_corrupt_file_reads_as_empty(self, tmp_path):
        path = tmp_path / "kv.json"
        path.write_text("{not json")
        store = JsonFileKeyValueStore(path)

        assert await store.get_item("k") is None
        await store.set_item("k", "v")
        assert await store.get_item("k") == "v"

    @pytest.mark.asyncio
    async def test_remove_missing_key_is_noop(self, tmp_path):
        store = JsonFileKeyValueStore(tmp_path / "kv.json")
        await store.remove_item("absent")
        assert not (tmp_path / "kv.json").exists()


class TestBusyWaitMutex:
    @pytest.mark.asyncio
    async def test_serializes_critical_sections(self):
        lock = BusyWaitMutex(spin_seconds=0.001)
        order = []

        async def worker(tag):
            async with lock:
                order.append(f"{tag}-in")
                await asyncio.sleep(0.01)
                order.append(f"{tag}-out")

        await asyncio.gather(worker("a"), worker("b"))
        assert order == ["a-in", "a-out", "b-in", "b-out"]
        assert lock.locked is False

    @pytest.mark.asyncio
    async def test_released_on_exception(self):
        lock = BusyWaitMutex(spin_seconds=0.001)
        with pytest.raises(RuntimeError):
            async with lock:
                raise RuntimeError("boom")
        assert lock.locked is False


class TestLocalObjectCacheWrites:
    @pytest.mark.asyncio
    async def test_add_skips_duplicate_triple(self, cache, make_entry):
        assert await cache.add(make_entry()) is not None
        assert await cache.add(make_entry(id="other-id")) is None

        entries = await cache.get_all("u1")
        assert [e.id for e in entries] == ["local-cup-u1"]

    @pytest.mark.asyncio
    async def test_same_name_on_other_image_or_owner_is_kept(self, cache, make_entry):
        await cache.add(make_entry())
        await cache.add(make_entry(image_url="user-u1/images/snapfind_2.jpg", id="second"))
        await cache.add(make_entry(user_id="u2"))

        assert len(await cache.get_all("u1")) == 2
        assert len(await cache.get_all("u2")) == 1

    @pytest.mark.asyncio
    async def test_concurrent_adds_keep_every_entry(self, cache, make_entry):
        names = [f"item{i}" for i in range(10)]
        await asyncio.gather(*(cache.add(make_entry(name=n)) for n in names))

        assert sorted(e.object_name for e in await cache.get_all("u1")) == sorted(names)

    @pytest.mark.asyncio
    async def test_clear_user_keeps_other_owners(self, cache, make_entry):
        await cache.add(make_entry())
        await cache.add(make_entry(user_id="u2"))

        await cache.clear_user("u1")

        assert await cache.get_all("u1") == []
        assert len(await cache.get_all("u2")) == 1

    @pytest.mark.asyncio
    async def test_clear_user_without_owner_removes_everything(self, cache, make_entry):
        await cache.add(make_entry())
        await cache.add(make_entry(user_id="u2"))

        await cache.clear_user(None)

        assert await cache.load_entries() == []

    @pytest.mark.asyncio
    async def test_replace_user(self, cache, make_entry):
        await cache.add(make_entry(name="old"))
        await cache.add(make_entry(user_id="u2"))

        await cache.replace_user("u1", [make_entry(name="new")])

        assert [e.object_name for e in await cache.get_all("u1")] == ["new"]
        assert len(await cache.get_all("u2")) == 1

    @pytest.mark.asyncio
    async def test_replace_all_drops_every_owner(self, cache, make_entry):
        await cache.add(make_entry())
        await cache.add(make_entry(user_id="u2"))

        await cache.replace_all([make_entry(name="lamp")])

        assert [e.object_name for e in await cache.load_entries()] == ["lamp"]

    @pytest.mark.asyncio
    async def test_remove_image(self, cache, make_entry):
        await cache.add(make_entry(name="cup"))
        await cache.add(make_entry(name="pen"))
        await cache.add(make_entry(name="mug", image_url="user-u1/images/snapfind_2.jpg"))
        await cache.add(make_entry(name="cup", user_id="u2"))

        removed = await cache.remove_image("u1", "user-u1/images/snapfind_1.jpg")

        assert removed == 2
        assert [e.object_name for e in await cache.get_all("u1")] == ["mug"]
        assert len(await cache.get_all("u2")) == 1


class TestLocalObjectCacheReads:
    @pytest.mark.asyncio
    async def test_get_all_without_owner(self, cache, make_entry):
        await cache.add(make_entry())
        assert await cache.get_all(None) == []
        assert await cache.get_all("") == []

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive_substring(self, cache, make_entry):
        await cache.add(make_entry(name="coffee mug"))
        await cache.add(make_entry(name="phone"))

        result = await cache.search("u1", "MUG")

        assert [e.object_name for e in result] == ["coffee mug"]

    @pytest.mark.asyncio
    async def test_objects_for_image_excludes_deleted(self, cache, make_entry):
        await cache.add(make_entry(name="cup"))
        await cache.add(make_entry(name="pen", deleted=True))

        result = await cache.objects_for_image("u1", "user-u1/images/snapfind_1.jpg")

        assert [e.object_name for e in result] == ["cup"]

    @pytest.mark.asyncio
    async def test_non_array_blob_reads_as_empty(self, cache):
        await cache.store.set_item(OBJECTS_CACHE_KEY, json.dumps({"oops": True}))
        assert await cache.load_entries() == []

    @pytest.mark.asyncio
    async def test_invalid_json_blob_reads_as_empty(self, cache):
        await cache.store.set_item(OBJECTS_CACHE_KEY, "[{broken")
        assert await cache.load_entries() == []

    @pytest.mark.asyncio
    async def test_stats(self, cache, make_entry):
        await cache.add(make_entry(name="cup", created_at="2024-01-02T10:00:00+00:00"))
        await cache.add(make_entry(
            name="cup", image_url="user-u1/images/snapfind_2.jpg", id="c2",
            created_at="2024-01-03T10:00:00+00:00",
        ))
        await cache.add(make_entry(name="pen", created_at="2024-01-01T10:00:00+00:00"))

        stats = await cache.stats("u1")

        assert stats["total_objects"] == 3
        assert stats["unique_images"] == 2
        assert stats["object_types"] == 2
        assert stats["most_common_object"] == "cup"
        assert stats["oldest_object"].object_name == "pen"
        assert stats["newest_object"].id == "c2"

    @pytest.mark.asyncio
    async def test_stats_empty(self, cache):
        stats = await cache.stats("u1")
        assert stats["total_objects"] == 0
        assert stats["most_common_object"] is None
        assert stats["oldest_object"] is None


class TestLastSyncTime:
    @pytest.mark.asyncio
    async def test_roundtrip(self, cache):
        assert await cache.get_last_sync_time() is None

        moment = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)
        assert await cache.set_last_sync_time(moment) == moment
        assert await cache.get_last_sync_time() == moment

    @pytest.mark.asyncio
    async def test_sync_time_survives_object_clear(self, cache, make_entry):
        await cache.add(make_entry())
        await cache.set_last_sync_time()

        await cache.clear()

        assert await cache.load_entries() == []
        assert await cache.get_last_sync_time() is not None
