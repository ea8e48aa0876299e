from ....infrastructure.local.object_cache import LocalObjectCache
from ...dto.sync_dto import LastSyncResponse


class GetLastSyncTimeUseCase:
    def __init__(self, local_cache: LocalObjectCache) -> None:
        self.local_cache = local_cache

    async def execute(self) -> LastSyncResponse:
        return LastSyncResponse(last_sync=await self.local_cache.get_last_sync_time())
