# Standard library imports
import logging
from typing import Any

# Local application imports
from ....core.exceptions import AuthenticationError, NotFoundError
from ....domain.repositories.picture_repository import PictureRepository
from ....infrastructure.storage.url_helpers import create_storage_reference
from ....utils.user_id import safe_user_id
from ...dto.picture_dto import RestorePictureResponse

logger = logging.getLogger(__name__)


class RestorePictureUseCase:
    """Undo a soft delete; restored objects reach the local cache on the next sync"""

    def __init__(self, picture_repository: PictureRepository) -> None:
        self.picture_repository = picture_repository

    async def execute(self, user: Any, image_url: str) -> RestorePictureResponse:
        user_id = safe_user_id(user)
        if not user_id:
            raise AuthenticationError("No valid user ID available for restoring a picture")

        image_ref = create_storage_reference(image_url)
        picture = await self.picture_repository.find_by_image(user_id, image_ref)
        if picture is None:
            raise NotFoundError(f"Picture not found for {image_ref}")

        restored = await self.picture_repository.restore_by_image(user_id, image_ref)
        logger.info(f"Restored picture {picture.id} with {restored} objects")
        return RestorePictureResponse(image_url=image_ref, objects_restored=restored)
