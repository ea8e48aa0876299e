from typing import TYPE_CHECKING
from ...infrastructure.external.vision_client import VisionClient
from ...infrastructure.storage.object_storage import ObjectStorageService
from ...application.use_cases.images import (
    UploadImageUseCase,
    GetDisplayUrlUseCase,
    ListUserImagesUseCase,
    DeleteUserImageUseCase,
)
from ...application.use_cases.detection import AnalyzeImageUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ImagesProvider:
    """Image storage and vision analysis use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            UploadImageUseCase,
            lambda: UploadImageUseCase(storage_service=container.get(ObjectStorageService))
        )
        container.register_factory(
            GetDisplayUrlUseCase,
            lambda: GetDisplayUrlUseCase(storage_service=container.get(ObjectStorageService))
        )
        container.register_factory(
            ListUserImagesUseCase,
            lambda: ListUserImagesUseCase(storage_service=container.get(ObjectStorageService))
        )
        container.register_factory(
            DeleteUserImageUseCase,
            lambda: DeleteUserImageUseCase(storage_service=container.get(ObjectStorageService))
        )
        container.register_factory(
            AnalyzeImageUseCase,
            lambda: AnalyzeImageUseCase(
                storage_service=container.get(ObjectStorageService),
                vision_client=container.get(VisionClient),
            )
        )
