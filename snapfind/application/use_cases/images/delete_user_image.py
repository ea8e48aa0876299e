# Standard library imports
import logging
from typing import Any

# Local application imports
from ....core.exceptions import AuthenticationError, ValidationError
from ....infrastructure.storage.object_storage import ObjectStorageService
from ....infrastructure.storage.url_helpers import extract_file_name_from_url
from ....utils.user_id import safe_user_id

logger = logging.getLogger(__name__)


class DeleteUserImageUseCase:
    """
    Remove a file from the owner's storage folder.

    Pictures referencing it are left alone; soft-deleting a picture never
    calls this.
    """

    def __init__(self, storage_service: ObjectStorageService) -> None:
        self.storage_service = storage_service

    async def execute(self, user: Any, image_url: str) -> str:
        user_id = safe_user_id(user)
        if not user_id:
            raise AuthenticationError()

        file_name = extract_file_name_from_url(image_url)
        if not file_name:
            raise ValidationError("Image file name is required")

        await self.storage_service.delete_user_image(user_id, file_name)
        logger.info(f"User {user_id} deleted stored image {file_name}")
        return file_name
