# Standard library imports
import logging
from typing import Any

# Local application imports
from ....core.exceptions import AuthenticationError, NotFoundError, ValidationError
from ....domain.models.detected_object import normalize_object_name
from ....domain.repositories.object_repository import ObjectRepository
from ....domain.repositories.picture_repository import PictureRepository
from ....infrastructure.local.object_cache import LocalObjectCache
from ....utils.user_id import safe_user_id
from ...dto.object_dto import ObjectResponse

logger = logging.getLogger(__name__)


class RenameObjectUseCase:
    """Rename an active object of one of the owner's pictures, remotely and in the local cache"""

    def __init__(
        self,
        object_repository: ObjectRepository,
        picture_repository: PictureRepository,
        local_cache: LocalObjectCache,
    ) -> None:
        self.object_repository = object_repository
        self.picture_repository = picture_repository
        self.local_cache = local_cache

    async def execute(self, user: Any, object_id: str, new_name: str) -> ObjectResponse:
        """
        Raises:
            AuthenticationError: No owner
            ValidationError: Empty name
            NotFoundError: Object missing, deleted or owned by someone else
        """
        user_id = safe_user_id(user)
        if not user_id:
            raise AuthenticationError()

        object_name = normalize_object_name(new_name)
        if not object_name:
            raise ValidationError("Object name is required")

        detected = await self.object_repository.find_by_id(object_id)
        if detected is None or detected.deleted:
            raise NotFoundError(f"Object {object_id} not found")

        picture = await self.picture_repository.find_by_id(detected.picture_id)
        if picture is None or picture.deleted or picture.user_id != user_id:
            raise NotFoundError(f"Object {object_id} not found")

        if not await self.object_repository.rename(object_id, object_name):
            raise NotFoundError(f"Object {object_id} not found")

        await self.local_cache.rename(
            user_id, picture.image_url, detected.object_name, object_name, object_id=object_id
        )
        logger.info(f"Renamed object {object_id} from '{detected.object_name}' to '{object_name}'")
        return ObjectResponse(
            id=object_id,
            object_name=object_name,
            image_url=picture.image_url,
            picture_id=picture.id,
            picture_name=picture.picture_name,
            description=picture.description,
            x_position=detected.x_position,
            y_position=detected.y_position,
            has_ai_coordinates=detected.has_ai_coordinates,
            created_at=detected.created_at,
        )
