# Standard library imports
import logging
from typing import Any, List

# Local application imports
from ....core.exceptions import RemoteStoreError
from ....domain.repositories.object_repository import ObjectRepository
from ....infrastructure.local.object_cache import LocalObjectCache
from ....infrastructure.storage.url_helpers import create_storage_reference
from ....utils.user_id import safe_user_id
from ...dto.object_dto import ObjectResponse
from ...mappers.object_mapper import cached_to_response, view_row_to_response

logger = logging.getLogger(__name__)


class GetObjectsForImageUseCase:
    """
    Active objects of one image, oldest first.

    Falls back to the local cache when the remote store has nothing for the
    image (objects saved offline) or cannot be reached.
    """

    def __init__(self, object_repository: ObjectRepository, local_cache: LocalObjectCache) -> None:
        self.object_repository = object_repository
        self.local_cache = local_cache

    async def execute(self, user: Any, image_url: str) -> List[ObjectResponse]:
        user_id = safe_user_id(user)
        if not user_id or not image_url:
            return []

        image_ref = create_storage_reference(image_url)
        try:
            rows = await self.object_repository.list_with_pictures(
                user_id, image_url=image_ref, ascending=True
            )
            if rows:
                return [view_row_to_response(row) for row in rows]
        except RemoteStoreError as e:
            logger.warning(f"Remote lookup for {image_ref} failed, using local cache: {e}")

        entries = await self.local_cache.objects_for_image(user_id, image_ref)
        return [cached_to_response(e) for e in entries]
