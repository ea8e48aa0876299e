# Standard library imports
import logging
from typing import Any, Dict, List

# Local application imports
from ....core.exceptions import AuthenticationError, NotFoundError
from ....domain.models.detected_object import normalize_object_name
from ....domain.repositories.object_repository import ObjectRepository
from ....domain.repositories.picture_repository import PictureRepository
from ....infrastructure.local.object_cache import LocalObjectCache
from ....infrastructure.storage.url_helpers import create_storage_reference
from ....utils.user_id import safe_user_id
from ...dto.object_dto import (
    ConfirmObjectsRequest,
    ConfirmObjectsResponse,
    DetectedPosition,
    SaveObjectRequest,
    SaveObjectResult,
)
from .save_object import SaveObjectUseCase

logger = logging.getLogger(__name__)


class SaveConfirmedObjectsUseCase:
    """
    Persist the object names the user confirmed for one image.

    Names are saved one after another. A name that matches a detection gets
    the detection's coordinates. In edit mode the picture's current objects
    are soft-deleted first and its local entries dropped, so the confirmed
    list replaces them.
    """

    def __init__(
        self,
        save_object: SaveObjectUseCase,
        picture_repository: PictureRepository,
        object_repository: ObjectRepository,
        local_cache: LocalObjectCache,
    ) -> None:
        self.save_object = save_object
        self.picture_repository = picture_repository
        self.object_repository = object_repository
        self.local_cache = local_cache

    async def execute(self, request: ConfirmObjectsRequest, user: Any) -> ConfirmObjectsResponse:
        user_id = safe_user_id(user)
        if not user_id:
            raise AuthenticationError("No valid user ID available for saving objects")

        image_ref = create_storage_reference(request.image_url)
        replaced = 0
        if request.edit_mode:
            picture = await self.picture_repository.find_by_image(user_id, image_ref)
            if picture is None or picture.deleted:
                raise NotFoundError(f"Picture not found for {image_ref}")
            replaced = await self.object_repository.soft_delete_by_picture(picture.id or "")
            await self.local_cache.remove_image(user_id, image_ref)
            logger.info(f"Edit mode: replaced {replaced} existing objects of picture {picture.id}")

        positions: Dict[str, DetectedPosition] = {}
        for detection in request.detections:
            positions.setdefault(normalize_object_name(detection.name), detection)

        results: List[SaveObjectResult] = []
        seen = set()
        for raw_name in request.object_names:
            name = normalize_object_name(raw_name)
            if not name or name in seen:
                continue
            seen.add(name)

            detection = positions.get(name)
            save_request = SaveObjectRequest(
                object_name=name,
                image_url=image_ref,
                x_position=detection.x if detection else None,
                y_position=detection.y if detection else None,
                has_ai_coordinates=detection is not None,
            )
            results.append(await self.save_object.execute(save_request, user_id))

        saved_count = sum(1 for r in results if r.local_saved)
        logger.info(f"Saved {saved_count}/{len(results)} confirmed objects for {image_ref}")
        return ConfirmObjectsResponse(results=results, saved_count=saved_count, replaced_count=replaced)
