from typing import TYPE_CHECKING
from ...domain.repositories.picture_repository import PictureRepository
from ...domain.repositories.object_repository import ObjectRepository
from ...infrastructure.local.object_cache import LocalObjectCache
from ...application.use_cases.pictures import (
    CheckDailyQuotaUseCase,
    GetUsageStatsUseCase,
    SavePictureMetadataUseCase,
    GetPictureMetadataUseCase,
    ListPicturesUseCase,
    DeletePictureUseCase,
    RestorePictureUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class PicturesProvider:
    """Quota, metadata and soft-delete use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            CheckDailyQuotaUseCase,
            lambda: CheckDailyQuotaUseCase(picture_repository=container.get(PictureRepository))
        )
        container.register_factory(
            GetUsageStatsUseCase,
            lambda: GetUsageStatsUseCase(picture_repository=container.get(PictureRepository))
        )
        container.register_factory(
            SavePictureMetadataUseCase,
            lambda: SavePictureMetadataUseCase(picture_repository=container.get(PictureRepository))
        )
        container.register_factory(
            GetPictureMetadataUseCase,
            lambda: GetPictureMetadataUseCase(picture_repository=container.get(PictureRepository))
        )
        container.register_factory(
            ListPicturesUseCase,
            lambda: ListPicturesUseCase(
                picture_repository=container.get(PictureRepository),
                object_repository=container.get(ObjectRepository),
            )
        )
        container.register_factory(
            DeletePictureUseCase,
            lambda: DeletePictureUseCase(
                picture_repository=container.get(PictureRepository),
                local_cache=container.get(LocalObjectCache),
            )
        )
        container.register_factory(
            RestorePictureUseCase,
            lambda: RestorePictureUseCase(picture_repository=container.get(PictureRepository))
        )
