# Standard library imports
import logging
from typing import Any, List

# Local application imports
from ....core.exceptions import RemoteStoreError
from ....domain.repositories.object_repository import ObjectRepository
from ....infrastructure.local.object_cache import LocalObjectCache
from ....utils.user_id import safe_user_id
from ...dto.object_dto import ObjectResponse
from ...mappers.object_mapper import cached_to_response, view_row_to_response

logger = logging.getLogger(__name__)


class ListObjectsUseCase:
    """All active objects of the owner, newest first; local cache when offline"""

    def __init__(self, object_repository: ObjectRepository, local_cache: LocalObjectCache) -> None:
        self.object_repository = object_repository
        self.local_cache = local_cache

    async def execute(self, user: Any) -> List[ObjectResponse]:
        user_id = safe_user_id(user)
        if not user_id:
            return []

        try:
            rows = await self.object_repository.list_with_pictures(user_id)
            return [view_row_to_response(row) for row in rows]
        except RemoteStoreError as e:
            logger.warning(f"Listing objects remotely failed, using local cache: {e}")

        entries = [e for e in await self.local_cache.get_all(user_id) if not e.deleted]
        entries.sort(key=lambda e: e.created_at or "", reverse=True)
        return [cached_to_response(e) for e in entries]
