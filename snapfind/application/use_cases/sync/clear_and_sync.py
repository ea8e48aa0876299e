# Standard library imports
import logging
from typing import Any

# Local application imports
from ....core.exceptions import AuthenticationError, RemoteStoreError, get_user_message
from ....domain.repositories.object_repository import ObjectRepository
from ....infrastructure.local.object_cache import LocalObjectCache
from ....utils.user_id import safe_user_id
from ...dto.sync_dto import SyncResult
from ...mappers.object_mapper import view_row_to_cached

logger = logging.getLogger(__name__)


class ClearAndSyncUseCase:
    """
    Rebuild the local cache from the remote store.

    The whole object blob is wiped first, entries of other owners and
    unsynced local-only entries included, then refilled with the owner's
    active remote rows. The remote store always wins. If the remote fetch
    fails the cache stays empty and the failure is reported.
    """

    def __init__(self, object_repository: ObjectRepository, local_cache: LocalObjectCache) -> None:
        self.object_repository = object_repository
        self.local_cache = local_cache

    async def execute(self, user: Any) -> SyncResult:
        user_id = safe_user_id(user)
        if not user_id:
            raise AuthenticationError("No valid user ID available for sync")

        async with self.local_cache.lock:
            await self.local_cache.remove_all_locked()
            logger.info("Cleared local object cache before sync")

            try:
                rows = await self.object_repository.list_with_pictures(user_id)
            except RemoteStoreError as e:
                logger.error(f"Sync fetch failed for user {user_id}, local cache left empty: {e}")
                return SyncResult(success=False, error=get_user_message(e))

            entries = [view_row_to_cached(row) for row in rows]
            await self.local_cache.store_entries_locked(entries)

        synced_at = await self.local_cache.set_last_sync_time()
        logger.info(f"Synced {len(entries)} objects for user {user_id}")
        return SyncResult(success=True, synced_count=len(entries), synced_at=synced_at)
