# Standard library imports
from typing import Any, List

# Local application imports
from ....core.exceptions import AuthenticationError
from ....infrastructure.storage.object_storage import ObjectStorageService
from ....utils.user_id import safe_user_id
from ...dto.image_dto import StoredImageResponse


class ListUserImagesUseCase:
    """Files in the owner's storage folder, newest first"""

    def __init__(self, storage_service: ObjectStorageService) -> None:
        self.storage_service = storage_service

    async def execute(self, user: Any) -> List[StoredImageResponse]:
        user_id = safe_user_id(user)
        if not user_id:
            raise AuthenticationError()

        images = await self.storage_service.list_user_images(user_id)
        return [
            StoredImageResponse(name=img["name"], path=img["path"], url=img["url"], size=img["size"])
            for img in images
        ]
