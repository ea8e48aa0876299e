from typing import TYPE_CHECKING
from ...infrastructure.external.vision_client import VisionClient
from ...infrastructure.storage.object_storage import ObjectStorageService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ServicesProvider:
    """External services shared by all use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        if not container.is_registered(ObjectStorageService):
            container.register_singleton(ObjectStorageService, ObjectStorageService())
        if not container.is_registered(VisionClient):
            container.register_singleton(VisionClient, VisionClient())
