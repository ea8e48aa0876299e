"""
Local object cache.

A denormalized copy of the user's objects, stored as one JSON array under a
fixed key of the on-device key-value store. It serves as offline fallback
for reads and as write buffer in front of the remote tables. It is never
authoritative: a sync replaces it with the remote rows.

Read-modify-write sequences run under a BusyWaitMutex. Methods whose names
end in ``_locked`` expect the caller to already hold ``cache.lock``; the
other writers take the lock themselves.
"""
import json
import logging
from collections import Counter
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from ...domain.constants.storage_constants import OBJECTS_CACHE_KEY, LAST_SYNC_KEY
from ...domain.models.cached_object import CachedObject
from ...utils.datetime_utils import parse_iso, to_iso, utc_now
from .key_value_store import KeyValueStore
from .mutex import BusyWaitMutex

logger = logging.getLogger(__name__)


class LocalObjectCache:
    """Owner-tagged object entries persisted in a KeyValueStore"""

    def __init__(self, store: KeyValueStore, lock: Optional[BusyWaitMutex] = None) -> None:
        self.store = store
        self._lock = lock or BusyWaitMutex()

    @property
    def lock(self) -> BusyWaitMutex:
        return self._lock

    # ------------------------------------------------------------------
    # Raw blob access
    # ------------------------------------------------------------------

    async def load_entries(self) -> List[CachedObject]:
        """All entries of every owner; an unreadable blob reads as empty."""
        raw = await self.store.get_item(OBJECTS_CACHE_KEY)
        if not raw:
            return []
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error(f"Local object cache is not valid JSON, ignoring it: {e}")
            return []
        if not isinstance(data, list):
            logger.error("Local object cache is not a JSON array, ignoring it")
            return []
        return [CachedObject.from_dict(item) for item in data if isinstance(item, dict)]

    async def store_entries_locked(self, entries: Iterable[CachedObject]) -> None:
        payload = [entry.to_dict() for entry in entries]
        await self.store.set_item(OBJECTS_CACHE_KEY, json.dumps(payload))

    async def remove_all_locked(self) -> None:
        await self.store.remove_item(OBJECTS_CACHE_KEY)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def append_if_absent_locked(self, entry: CachedObject) -> Optional[CachedObject]:
        """
        Append entry unless the (image_url, object_name, user_id) triple is
        already cached.

        Returns:
            The stored entry, or None when it was a duplicate
        """
        existing = await self.load_entries()
        key = entry.dedupe_key()
        if any(item.dedupe_key() == key for item in existing):
            logger.info(f"Duplicate object detected, skipping: {entry.object_name}")
            return None

        existing.append(entry)
        await self.store_entries_locked(existing)
        logger.info(f"Object saved to local cache: {entry.object_name}")
        return entry

    async def add(self, entry: CachedObject) -> Optional[CachedObject]:
        """Locked append_if_absent."""
        async with self._lock:
            return await self.append_if_absent_locked(entry)

    async def replace_user_locked(self, user_id: str, entries: List[CachedObject]) -> None:
        """Swap one owner's entries for ``entries``; other owners stay untouched."""
        others = [item for item in await self.load_entries() if item.user_id != user_id]
        await self.store_entries_locked(others + list(entries))

    async def replace_user(self, user_id: str, entries: List[CachedObject]) -> None:
        async with self._lock:
            await self.replace_user_locked(user_id, entries)

    async def replace_all(self, entries: List[CachedObject]) -> None:
        async with self._lock:
            await self.store_entries_locked(entries)

    async def clear(self) -> None:
        async with self._lock:
            await self.remove_all_locked()

    async def clear_user(self, user_id: Optional[str]) -> None:
        """
        Remove one owner's entries. Without an owner the whole blob goes,
        matching what a signed-out device should keep: nothing.
        """
        async with self._lock:
            if not user_id:
                logger.info("No owner given, clearing all local data")
                await self.remove_all_locked()
                return
            await self.replace_user_locked(user_id, [])
            logger.info(f"Cleared local objects for user {user_id}")

    async def remove_image(self, user_id: str, image_url: str) -> int:
        """Drop the owner's entries for one image, returns how many were removed."""
        async with self._lock:
            entries = await self.load_entries()
            kept = [
                item for item in entries
                if not (item.user_id == user_id and item.image_url == image_url)
            ]
            removed = len(entries) - len(kept)
            if removed:
                await self.store_entries_locked(kept)
            return removed

    async def rename(
        self,
        user_id: str,
        image_url: str,
        old_name: str,
        new_name: str,
        object_id: Optional[str] = None,
    ) -> int:
        """
        Rename the owner's entry matched by remote id, or by image and old
        name for entries saved before the remote id was known. When an entry
        with the new name already exists for the image the renamed one is
        dropped, so the (image, name, owner) triple stays unique.

        Returns:
            Number of entries renamed or dropped
        """
        async with self._lock:
            entries = await self.load_entries()
            taken = {
                item.dedupe_key() for item in entries
                if item.user_id == user_id and item.image_url == image_url and item.object_name == new_name
            }
            kept: List[CachedObject] = []
            changed = 0
            for item in entries:
                matches = item.user_id == user_id and (
                    (object_id and item.id == object_id)
                    or (item.image_url == image_url and item.object_name == old_name)
                )
                if not matches or item.object_name == new_name:
                    kept.append(item)
                    continue
                changed += 1
                item.object_name = new_name
                if item.dedupe_key() in taken:
                    continue
                taken.add(item.dedupe_key())
                kept.append(item)
            if changed:
                await self.store_entries_locked(kept)
                logger.info(f"Renamed {changed} local object(s) from '{old_name}' to '{new_name}'")
            return changed

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def get_all(self, user_id: Optional[str]) -> List[CachedObject]:
        if not user_id:
            logger.warning("No user given, returning no local objects")
            return []
        entries = [item for item in await self.load_entries() if item.user_id == user_id]
        logger.debug(f"Retrieved {len(entries)} local objects for user {user_id}")
        return entries

    async def search(self, user_id: Optional[str], query: str) -> List[CachedObject]:
        needle = (query or "").lower()
        return [
            item for item in await self.get_all(user_id)
            if item.object_name and needle in item.object_name.lower()
        ]

    async def objects_for_image(self, user_id: Optional[str], image_url: str) -> List[CachedObject]:
        return [
            item for item in await self.get_all(user_id)
            if item.image_url == image_url and not item.deleted
        ]

    async def stats(self, user_id: Optional[str]) -> Dict[str, Any]:
        entries = await self.get_all(user_id)
        name_counts = Counter(item.object_name for item in entries if item.object_name)
        dated = [item for item in entries if parse_iso(item.created_at)]
        dated.sort(key=lambda item: parse_iso(item.created_at))

        return {
            "total_objects": len(entries),
            "unique_images": len({item.image_url for item in entries if item.image_url}),
            "object_types": len(name_counts),
            "most_common_object": name_counts.most_common(1)[0][0] if name_counts else None,
            "oldest_object": dated[0] if dated else None,
            "newest_object": dated[-1] if dated else None,
        }

    # ------------------------------------------------------------------
    # Sync bookkeeping
    # ------------------------------------------------------------------

    async def get_last_sync_time(self) -> Optional[datetime]:
        return parse_iso(await self.store.get_item(LAST_SYNC_KEY))

    async def set_last_sync_time(self, synced_at: Optional[datetime] = None) -> datetime:
        synced_at = synced_at or utc_now()
        await self.store.set_item(LAST_SYNC_KEY, to_iso(synced_at))
        return synced_at
