# Standard library imports
import logging
from typing import Any

# Local application imports
from ....core.exceptions import AuthenticationError
from ....domain.models.picture import Picture
from ....domain.repositories.picture_repository import PictureRepository
from ....infrastructure.storage.url_helpers import create_storage_reference
from ....utils.user_id import safe_user_id
from ...dto.picture_dto import PictureMetadataRequest, PictureResponse
from ...mappers.picture_mapper import picture_to_response

logger = logging.getLogger(__name__)


class SavePictureMetadataUseCase:
    """Set name and description of the owner's picture, creating the row when absent"""

    def __init__(self, picture_repository: PictureRepository) -> None:
        self.picture_repository = picture_repository

    async def execute(self, request: PictureMetadataRequest, user: Any) -> PictureResponse:
        user_id = safe_user_id(user)
        if not user_id:
            raise AuthenticationError("No valid user ID available for saving picture metadata")

        image_ref = create_storage_reference(request.image_url)
        picture_name = request.picture_name.strip()
        description = request.description.strip()

        existing = await self.picture_repository.find_by_image(user_id, image_ref)
        if existing is not None:
            await self.picture_repository.update_metadata(existing.id or "", picture_name, description)
            existing.picture_name = picture_name
            existing.description = description
            logger.info(f"Updated metadata of picture {existing.id}")
            return picture_to_response(existing)

        created = await self.picture_repository.create(
            Picture(
                id=None,
                user_id=user_id,
                image_url=image_ref,
                picture_name=picture_name,
                description=description,
            )
        )
        logger.info(f"Created picture {created.id} with metadata for {image_ref}")
        return picture_to_response(created)
