# Standard library imports
import logging
from typing import Any, List

# Local application imports
from ....domain.repositories.object_repository import ObjectRepository
from ....domain.repositories.picture_repository import PictureRepository
from ....utils.user_id import safe_user_id
from ...dto.picture_dto import PictureWithCountResponse
from ...mappers.picture_mapper import picture_with_count

logger = logging.getLogger(__name__)


class ListPicturesUseCase:
    """Active pictures of the owner, newest first, with their active object counts"""

    def __init__(self, picture_repository: PictureRepository, object_repository: ObjectRepository) -> None:
        self.picture_repository = picture_repository
        self.object_repository = object_repository

    async def execute(self, user: Any) -> List[PictureWithCountResponse]:
        user_id = safe_user_id(user)
        if not user_id:
            return []

        pictures = await self.picture_repository.list_active(user_id)
        counts = await self.object_repository.count_active_by_picture(
            [p.id for p in pictures if p.id]
        )
        logger.info(f"Found {len(pictures)} active pictures for user {user_id}")
        return [picture_with_count(p, counts.get(p.id or "", 0)) for p in pictures]
