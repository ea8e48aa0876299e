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


class SearchObjectsUseCase:
    """Case-insensitive substring search on object names"""

    def __init__(self, object_repository: ObjectRepository, local_cache: LocalObjectCache) -> None:
        self.object_repository = object_repository
        self.local_cache = local_cache

    async def execute(self, user: Any, query: str) -> List[ObjectResponse]:
        user_id = safe_user_id(user)
        query = (query or "").strip()
        if not user_id or not query:
            return []

        try:
            rows = await self.object_repository.list_with_pictures(user_id, name_query=query)
            logger.info(f"Search for '{query}' returned {len(rows)} results for user {user_id}")
            return [view_row_to_response(row) for row in rows]
        except RemoteStoreError as e:
            logger.warning(f"Remote search failed, searching local cache: {e}")

        entries = await self.local_cache.search(user_id, query)
        return [cached_to_response(e) for e in entries if not e.deleted]
