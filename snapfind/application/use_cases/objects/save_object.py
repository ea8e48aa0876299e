# Standard library imports
import logging
from typing import Any

# Local application imports
from ....core.exceptions import AuthenticationError, RemoteStoreError, ValidationError, get_user_message
from ....domain.models.cached_object import CachedObject, new_local_id
from ....domain.models.detected_object import DetectedObject, normalize_object_name
from ....domain.models.picture import Picture
from ....domain.repositories.object_repository import ObjectRepository
from ....domain.repositories.picture_repository import PictureRepository
from ....infrastructure.local.object_cache import LocalObjectCache
from ....infrastructure.storage.url_helpers import create_storage_reference
from ....utils.datetime_utils import to_iso, utc_now
from ....utils.picture_names import DEFAULT_PICTURE_DESCRIPTION, generate_picture_name
from ....utils.user_id import safe_user_id
from ...dto.object_dto import SaveObjectRequest, SaveObjectResult

logger = logging.getLogger(__name__)


class SaveObjectUseCase:
    """
    Save one object: local cache first, then the remote tables.

    The local write is de-duplicated on (image, name, owner); a duplicate
    stops the whole save, so the remote store never receives the same
    object twice from one device. The remote upsert looks up or creates
    the Picture and inserts the Object. Its failure is reported in the
    result and never undoes the local write.
    """

    def __init__(
        self,
        picture_repository: PictureRepository,
        object_repository: ObjectRepository,
        local_cache: LocalObjectCache,
    ) -> None:
        self.picture_repository = picture_repository
        self.object_repository = object_repository
        self.local_cache = local_cache

    async def execute(self, request: SaveObjectRequest, user: Any) -> SaveObjectResult:
        user_id = safe_user_id(user)
        if not user_id:
            raise AuthenticationError("No valid user ID available for saving object")

        object_name = normalize_object_name(request.object_name)
        if not object_name:
            raise ValidationError("Object name is required")

        image_ref = create_storage_reference(request.image_url)
        entry = CachedObject(
            id=new_local_id(),
            object_name=object_name,
            image_url=image_ref,
            user_id=user_id,
            x_position=request.x_position,
            y_position=request.y_position,
            has_ai_coordinates=request.has_ai_coordinates,
            created_at=to_iso(utc_now()),
        )
        result = SaveObjectResult(object_name=object_name, image_url=image_ref, local_saved=False)

        # The lock covers the remote upsert too, so two saves for a new image
        # in this process cannot both create a Picture.
        async with self.local_cache.lock:
            stored = await self.local_cache.append_if_absent_locked(entry)
            if stored is None:
                result.duplicate = True
                return result

            result.local_saved = True
            result.local_id = stored.id

            try:
                picture = await self._find_or_create_picture(user_id, image_ref)
                saved = await self.object_repository.create(
                    DetectedObject(
                        id=None,
                        picture_id=picture.id or "",
                        object_name=object_name,
                        x_position=request.x_position,
                        y_position=request.y_position,
                        has_ai_coordinates=request.has_ai_coordinates,
                    )
                )
            except (RemoteStoreError, ValueError) as e:
                logger.error(f"Remote save failed for '{object_name}' of user {user_id}: {e}")
                result.error = get_user_message(e) if isinstance(e, RemoteStoreError) else str(e)
                return result

        result.remote_saved = True
        result.picture_id = picture.id
        result.object_id = saved.id
        logger.info(f"Object '{object_name}' saved remotely in picture {picture.id}")
        return result

    async def _find_or_create_picture(self, user_id: str, image_ref: str) -> Picture:
        # Read-then-write: another device can still create a second Picture
        picture = await self.picture_repository.find_by_image(user_id, image_ref)
        if picture is not None:
            if picture.deleted:
                # Only the picture row comes back; objects deleted with it stay deleted
                logger.info(f"Picture {picture.id} was deleted, undeleting it for the new object")
                await self.picture_repository.undelete(picture.id or "")
                picture.deleted = False
            return picture

        created = await self.picture_repository.create(
            Picture(
                id=None,
                user_id=user_id,
                image_url=image_ref,
                picture_name=generate_picture_name(),
                description=DEFAULT_PICTURE_DESCRIPTION,
            )
        )
        logger.info(f"Created picture {created.id} ('{created.picture_name}') for {image_ref}")
        return created
