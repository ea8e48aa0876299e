from typing import TYPE_CHECKING
from ...domain.repositories.picture_repository import PictureRepository
from ...domain.repositories.object_repository import ObjectRepository
from ...infrastructure.local.object_cache import LocalObjectCache
from ...application.use_cases.objects import (
    SaveObjectUseCase,
    SaveConfirmedObjectsUseCase,
    ListObjectsUseCase,
    SearchObjectsUseCase,
    GetObjectsForImageUseCase,
    RenameObjectUseCase,
    GetLocalCacheStatsUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ObjectsProvider:
    """Object save, read and rename use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            SaveObjectUseCase,
            lambda: SaveObjectUseCase(
                picture_repository=container.get(PictureRepository),
                object_repository=container.get(ObjectRepository),
                local_cache=container.get(LocalObjectCache),
            )
        )
        container.register_factory(
            SaveConfirmedObjectsUseCase,
            lambda: SaveConfirmedObjectsUseCase(
                save_object=container.get(SaveObjectUseCase),
                picture_repository=container.get(PictureRepository),
                object_repository=container.get(ObjectRepository),
                local_cache=container.get(LocalObjectCache),
            )
        )
        container.register_factory(
            ListObjectsUseCase,
            lambda: ListObjectsUseCase(
                object_repository=container.get(ObjectRepository),
                local_cache=container.get(LocalObjectCache),
            )
        )
        container.register_factory(
            SearchObjectsUseCase,
            lambda: SearchObjectsUseCase(
                object_repository=container.get(ObjectRepository),
                local_cache=container.get(LocalObjectCache),
            )
        )
        container.register_factory(
            GetObjectsForImageUseCase,
            lambda: GetObjectsForImageUseCase(
                object_repository=container.get(ObjectRepository),
                local_cache=container.get(LocalObjectCache),
            )
        )
        container.register_factory(
            RenameObjectUseCase,
            lambda: RenameObjectUseCase(
                object_repository=container.get(ObjectRepository),
                picture_repository=container.get(PictureRepository),
                local_cache=container.get(LocalObjectCache),
            )
        )
        container.register_factory(
            GetLocalCacheStatsUseCase,
            lambda: GetLocalCacheStatsUseCase(local_cache=container.get(LocalObjectCache))
        )
