# Standard library imports
from typing import Any, Optional

# Local application imports
from ....domain.repositories.picture_repository import PictureRepository
from ....infrastructure.storage.url_helpers import create_storage_reference
from ....utils.user_id import safe_user_id
from ...dto.picture_dto import PictureResponse
from ...mappers.picture_mapper import picture_to_response


class GetPictureMetadataUseCase:
    def __init__(self, picture_repository: PictureRepository) -> None:
        self.picture_repository = picture_repository

    async def execute(self, user: Any, image_url: str) -> Optional[PictureResponse]:
        """The owner's active picture for an image, or None"""
        user_id = safe_user_id(user)
        if not user_id or not image_url:
            return None

        picture = await self.picture_repository.find_by_image(user_id, create_storage_reference(image_url))
        if picture is None or picture.deleted:
            return None
        return picture_to_response(picture)
