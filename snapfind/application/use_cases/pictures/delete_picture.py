# Standard library imports
import logging
from typing import Any

# Local application imports
from ....core.exceptions import AuthenticationError, NotFoundError
from ....domain.repositories.picture_repository import PictureRepository
from ....infrastructure.local.object_cache import LocalObjectCache
from ....infrastructure.storage.url_helpers import create_storage_reference
from ....utils.user_id import safe_user_id
from ...dto.picture_dto import DeletePictureResponse

logger = logging.getLogger(__name__)


class DeletePictureUseCase:
    """
    Soft-delete a picture and its objects.

    The stored image file is kept so the delete can be undone. The image's
    local cache entries are dropped right away instead of waiting for the
    next sync.
    """

    def __init__(self, picture_repository: PictureRepository, local_cache: LocalObjectCache) -> None:
        self.picture_repository = picture_repository
        self.local_cache = local_cache

    async def execute(self, user: Any, image_url: str) -> DeletePictureResponse:
        user_id = safe_user_id(user)
        if not user_id:
            raise AuthenticationError("No valid user ID available for deleting a picture")

        image_ref = create_storage_reference(image_url)
        picture = await self.picture_repository.find_by_image(user_id, image_ref)
        if picture is None or picture.deleted:
            raise NotFoundError(f"Picture not found for {image_ref}")

        objects_deleted = await self.picture_repository.soft_delete_by_image(user_id, image_ref)
        removed = await self.local_cache.remove_image(user_id, image_ref)
        logger.info(
            f"Deleted picture {picture.id}: {objects_deleted} objects soft-deleted, "
            f"{removed} local entries removed"
        )
        return DeletePictureResponse(
            image_url=image_ref,
            objects_deleted=objects_deleted,
            local_entries_removed=removed,
        )
