from typing import TYPE_CHECKING
from ...domain.repositories.object_repository import ObjectRepository
from ...infrastructure.local.object_cache import LocalObjectCache
from ...application.use_cases.sync import (
    ClearAndSyncUseCase,
    MergeSyncUseCase,
    GetLastSyncTimeUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class SyncProvider:
    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            ClearAndSyncUseCase,
            lambda: ClearAndSyncUseCase(
                object_repository=container.get(ObjectRepository),
                local_cache=container.get(LocalObjectCache),
            )
        )
        container.register_factory(
            MergeSyncUseCase,
            lambda: MergeSyncUseCase(
                object_repository=container.get(ObjectRepository),
                local_cache=container.get(LocalObjectCache),
            )
        )
        container.register_factory(
            GetLastSyncTimeUseCase,
            lambda: GetLastSyncTimeUseCase(local_cache=container.get(LocalObjectCache))
        )
