# Standard library imports
import asyncio
import logging
from pathlib import Path
from typing import Any, Optional, Union

# Local application imports
from ....core.config import get_settings
from ....core.exceptions import AuthenticationError, ValidationError
from ....infrastructure.storage.object_storage import ObjectStorageService
from ....utils.user_id import safe_user_id
from ...dto.image_dto import UploadImageResponse

logger = logging.getLogger(__name__)


def _extension_of(name: Optional[str]) -> Optional[str]:
    if not name or "." not in name:
        return None
    return name.rsplit(".", 1)[-1]


class UploadImageUseCase:
    """Store a captured image in the owner's folder and sign it for display"""

    def __init__(self, storage_service: ObjectStorageService) -> None:
        self.storage_service = storage_service

    async def execute(self, user: Any, source: Union[str, Path]) -> UploadImageResponse:
        """
        Upload an image file from disk.

        Raises:
            ValidationError: If the file does not exist or is empty
        """
        path = Path(source)
        if not path.is_file():
            raise ValidationError(f"Image file does not exist: {path}")
        data = await asyncio.to_thread(path.read_bytes)
        return await self.upload_bytes(user, data, path.name)

    async def upload_bytes(self, user: Any, data: bytes, file_name: Optional[str] = None) -> UploadImageResponse:
        user_id = safe_user_id(user)
        if not user_id:
            raise AuthenticationError("User ID is required for image upload")
        if not data:
            raise ValidationError("Image file is empty (0 bytes)")

        reference = await self.storage_service.upload_user_image(user_id, data, _extension_of(file_name))
        display_url = await self.storage_service.create_signed_url(
            reference, get_settings().display_url_ttl_seconds
        )
        logger.info(f"Uploaded {len(data)} bytes for user {user_id} to {reference}")
        return UploadImageResponse(image_url=reference, display_url=display_url)
