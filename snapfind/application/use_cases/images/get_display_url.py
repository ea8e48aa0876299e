# Standard library imports
import logging

# Local application imports
from ....core.config import get_settings
from ....core.exceptions import ValidationError
from ....infrastructure.storage.object_storage import ObjectStorageService
from ...dto.image_dto import DisplayUrlResponse

logger = logging.getLogger(__name__)


class GetDisplayUrlUseCase:
    """Signed URL for showing a stored image; full URLs are returned unchanged"""

    def __init__(self, storage_service: ObjectStorageService) -> None:
        self.storage_service = storage_service

    async def execute(self, image_url: str) -> DisplayUrlResponse:
        if not image_url:
            raise ValidationError("Image reference is required")

        if image_url.startswith("http"):
            return DisplayUrlResponse(image_url=image_url, display_url=image_url)

        display_url = await self.storage_service.create_signed_url(
            image_url, get_settings().display_url_ttl_seconds
        )
        return DisplayUrlResponse(image_url=image_url, display_url=display_url)
