# Standard library imports
import logging
from datetime import datetime
from typing import List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import PyMongoError

# Local application imports
from ...core.exceptions import RemoteStoreError
from ...domain.repositories.picture_repository import PictureRepository
from ...domain.models.picture import Picture
from ...domain.constants import PictureFields, ObjectFields
from ...utils.datetime_utils import utc_now
from .mongo_connection import get_picture_collection, get_object_collection

logger = logging.getLogger(__name__)


class MongoPictureRepository(PictureRepository):
    """
    MongoDB implementation of PictureRepository.

    Soft delete and restore touch two collections with two separate writes,
    there is no transaction around them.
    """

    def __init__(
        self,
        picture_collection: Optional[AsyncIOMotorCollection] = None,
        object_collection: Optional[AsyncIOMotorCollection] = None,
    ) -> None:
        self.picture_collection = picture_collection if picture_collection is not None else get_picture_collection()
        self.object_collection = object_collection if object_collection is not None else get_object_collection()

    async def find_by_image(self, user_id: str, image_url: str) -> Optional[Picture]:
        if not user_id or not image_url:
            return None

        try:
            document = await self.picture_collection.find_one({
                PictureFields.USER_ID: str(user_id),
                PictureFields.IMAGE_URL: image_url,
            })
        except PyMongoError as e:
            raise RemoteStoreError(f"Error finding picture by image: {e}", operation="find_picture")
        return self._document_to_picture(document) if document else None

    async def find_by_id(self, picture_id: str) -> Optional[Picture]:
        object_id = self._to_object_id(picture_id)
        if object_id is None:
            return None

        try:
            document = await self.picture_collection.find_one({PictureFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise RemoteStoreError(f"Error finding picture by ID: {e}", operation="find_picture")
        return self._document_to_picture(document) if document else None

    async def create(self, picture: Picture) -> Picture:
        if not picture:
            raise ValueError("Picture cannot be None")

        timestamp = utc_now()
        doc = {
            PictureFields.USER_ID: str(picture.user_id),
            PictureFields.IMAGE_URL: picture.image_url,
            PictureFields.PICTURE_NAME: picture.picture_name,
            PictureFields.DESCRIPTION: picture.description,
            PictureFields.DELETED: False,
            PictureFields.CREATED_AT: picture.created_at or timestamp,
            PictureFields.UPDATED_AT: timestamp,
        }

        try:
            result = await self.picture_collection.insert_one(doc)
        except PyMongoError as e:
            raise RemoteStoreError(f"Error creating picture: {e}", operation="create_picture")

        doc[PictureFields.MONGO_ID] = result.inserted_id
        return self._document_to_picture(doc)

    async def update_metadata(self, picture_id: str, picture_name: str, description: str) -> bool:
        object_id = self._to_object_id(picture_id)
        if object_id is None:
            return False

        try:
            result = await self.picture_collection.update_one(
                {PictureFields.MONGO_ID: object_id},
                {"$set": {
                    PictureFields.PICTURE_NAME: picture_name,
                    PictureFields.DESCRIPTION: description,
                    PictureFields.UPDATED_AT: utc_now(),
                }},
            )
        except PyMongoError as e:
            raise RemoteStoreError(f"Error updating picture metadata: {e}", operation="update_picture")
        return result.matched_count > 0

    async def undelete(self, picture_id: str) -> bool:
        object_id = self._to_object_id(picture_id)
        if object_id is None:
            return False

        try:
            result = await self.picture_collection.update_one(
                {PictureFields.MONGO_ID: object_id},
                {"$set": {PictureFields.DELETED: False, PictureFields.UPDATED_AT: utc_now()}},
            )
        except PyMongoError as e:
            raise RemoteStoreError(f"Error undeleting picture: {e}", operation="undelete_picture")
        return result.matched_count > 0

    async def list_active(self, user_id: str) -> List[Picture]:
        if not user_id:
            return []

        try:
            cursor = self.picture_collection.find({
                PictureFields.USER_ID: str(user_id),
                PictureFields.DELETED: False,
            }).sort(PictureFields.CREATED_AT, -1)

            pictures: List[Picture] = []
            async for document in cursor:
                pictures.append(self._document_to_picture(document))
            return pictures
        except PyMongoError as e:
            raise RemoteStoreError(f"Error listing pictures: {e}", operation="list_pictures")

    async def count_created_between(self, user_id: str, start_utc: datetime, end_utc: datetime) -> int:
        try:
            return await self.picture_collection.count_documents({
                PictureFields.USER_ID: str(user_id),
                PictureFields.DELETED: False,
                PictureFields.CREATED_AT: {"$gte": start_utc, "$lt": end_utc},
            })
        except PyMongoError as e:
            raise RemoteStoreError(f"Error counting pictures: {e}", operation="count_pictures")

    async def soft_delete_by_image(self, user_id: str, image_url: str) -> int:
        return await self._set_deleted_by_image(user_id, image_url, deleted=True)

    async def restore_by_image(self, user_id: str, image_url: str) -> int:
        return await self._set_deleted_by_image(user_id, image_url, deleted=False)

    async def _set_deleted_by_image(self, user_id: str, image_url: str, deleted: bool) -> int:
        picture_query = {
            PictureFields.USER_ID: str(user_id),
            PictureFields.IMAGE_URL: image_url,
        }
        timestamp = utc_now()

        try:
            picture_ids = [
                str(doc[PictureFields.MONGO_ID])
                async for doc in self.picture_collection.find(picture_query, {PictureFields.MONGO_ID: 1})
            ]
            if not picture_ids:
                return 0

            await self.picture_collection.update_many(
                picture_query,
                {"$set": {PictureFields.DELETED: deleted, PictureFields.UPDATED_AT: timestamp}},
            )
            result = await self.object_collection.update_many(
                {
                    ObjectFields.PICTURE_ID: {"$in": picture_ids},
                    ObjectFields.DELETED: not deleted,
                },
                {"$set": {ObjectFields.DELETED: deleted, ObjectFields.UPDATED_AT: timestamp}},
            )
        except PyMongoError as e:
            operation = "soft_delete_picture" if deleted else "restore_picture"
            raise RemoteStoreError(f"Error updating deleted flag for {image_url}: {e}", operation=operation)

        logger.info(
            f"{'Soft-deleted' if deleted else 'Restored'} {len(picture_ids)} picture(s) "
            f"and {result.modified_count} object(s) for {image_url}"
        )
        return result.modified_count

    @staticmethod
    def _to_object_id(value: Optional[str]) -> Optional[ObjectId]:
        if not value:
            return None
        try:
            return ObjectId(value)
        except (InvalidId, TypeError):
            return None

    def _document_to_picture(self, doc: dict) -> Picture:
        return Picture(
            id=str(doc.get(PictureFields.MONGO_ID)),
            user_id=doc.get(PictureFields.USER_ID) or "",
            image_url=doc.get(PictureFields.IMAGE_URL) or "",
            picture_name=doc.get(PictureFields.PICTURE_NAME) or "",
            description=doc.get(PictureFields.DESCRIPTION) or "",
            deleted=bool(doc.get(PictureFields.DELETED, False)),
            created_at=doc.get(PictureFields.CREATED_AT),
            updated_at=doc.get(PictureFields.UPDATED_AT),
        )
