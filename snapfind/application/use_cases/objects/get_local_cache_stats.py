# Standard library imports
from typing import Any

# Local application imports
from ....infrastructure.local.object_cache import LocalObjectCache
from ....utils.user_id import safe_user_id
from ...dto.object_dto import LocalCacheStatsResponse
from ...mappers.object_mapper import cached_to_response


class GetLocalCacheStatsUseCase:
    """Summary of what the device holds for the owner"""

    def __init__(self, local_cache: LocalObjectCache) -> None:
        self.local_cache = local_cache

    async def execute(self, user: Any) -> LocalCacheStatsResponse:
        stats = await self.local_cache.stats(safe_user_id(user))
        oldest = stats.pop("oldest_object")
        newest = stats.pop("newest_object")
        return LocalCacheStatsResponse(
            **stats,
            oldest_object=cached_to_response(oldest) if oldest else None,
            newest_object=cached_to_response(newest) if newest else None,
        )
