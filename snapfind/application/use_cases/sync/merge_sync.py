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


class MergeSyncUseCase:
    """
    Replace only the owner's cache entries with the remote rows.

    Entries of other owners on the same device are kept. The remote rows are
    fetched before the cache is touched, so a failed fetch changes nothing.
    """

    def __init__(self, object_repository: ObjectRepository, local_cache: LocalObjectCache) -> None:
        self.object_repository = object_repository
        self.local_cache = local_cache

    async def execute(self, user: Any) -> SyncResult:
        user_id = safe_user_id(user)
        if not user_id:
            raise AuthenticationError("No valid user ID available for sync")

        try:
            rows = await self.object_repository.list_with_pictures(user_id)
        except RemoteStoreError as e:
            logger.error(f"Merge sync failed for user {user_id}, local cache untouched: {e}")
            return SyncResult(success=False, error=get_user_message(e))

        entries = [view_row_to_cached(row) for row in rows]
        await self.local_cache.replace_user(user_id, entries)
        synced_at = await self.local_cache.set_last_sync_time()
        logger.info(f"Merged {len(entries)} remote objects into local cache for user {user_id}")
        return SyncResult(success=True, synced_count=len(entries), synced_at=synced_at)
