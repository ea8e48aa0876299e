# Standard library imports
import re
from typing import Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import PyMongoError

# Local application imports
from ...core.exceptions import RemoteStoreError
from ...domain.repositories.object_repository import ObjectRepository
from ...domain.models.detected_object import DetectedObject
from ...domain.models.object_with_picture import ObjectWithPicture
from ...domain.constants import ObjectFields, PictureFields
from ...utils.datetime_utils import utc_now
from .mongo_connection import get_object_collection, get_picture_collection


class MongoObjectRepository(ObjectRepository):
    """MongoDB implementation of ObjectRepository"""

    def __init__(
        self,
        object_collection: Optional[AsyncIOMotorCollection] = None,
        picture_collection: Optional[AsyncIOMotorCollection] = None,
    ) -> None:
        self.object_collection = object_collection if object_collection is not None else get_object_collection()
        self.picture_collection = picture_collection if picture_collection is not None else get_picture_collection()

    async def create(self, detected_object: DetectedObject) -> DetectedObject:
        if not detected_object:
            raise ValueError("Object cannot be None")

        timestamp = utc_now()
        doc = {
            ObjectFields.PICTURE_ID: detected_object.picture_id,
            ObjectFields.OBJECT_NAME: detected_object.object_name,
            ObjectFields.X_POSITION: detected_object.x_position,
            ObjectFields.Y_POSITION: detected_object.y_position,
            ObjectFields.HAS_AI_COORDINATES: bool(detected_object.has_ai_coordinates),
            ObjectFields.DELETED: False,
            ObjectFields.CREATED_AT: timestamp,
            ObjectFields.UPDATED_AT: timestamp,
        }

        try:
            result = await self.object_collection.insert_one(doc)
        except PyMongoError as e:
            raise RemoteStoreError(f"Error creating object: {e}", operation="create_object")

        doc[ObjectFields.MONGO_ID] = result.inserted_id
        return self._document_to_object(doc)

    async def find_by_id(self, object_id: str) -> Optional[DetectedObject]:
        mongo_id = self._to_object_id(object_id)
        if mongo_id is None:
            return None

        try:
            document = await self.object_collection.find_one({ObjectFields.MONGO_ID: mongo_id})
        except PyMongoError as e:
            raise RemoteStoreError(f"Error finding object: {e}", operation="find_object")
        return self._document_to_object(document) if document else None

    async def rename(self, object_id: str, object_name: str) -> bool:
        mongo_id = self._to_object_id(object_id)
        if mongo_id is None:
            return False

        try:
            result = await self.object_collection.update_one(
                {ObjectFields.MONGO_ID: mongo_id, ObjectFields.DELETED: False},
                {"$set": {ObjectFields.OBJECT_NAME: object_name, ObjectFields.UPDATED_AT: utc_now()}},
            )
        except PyMongoError as e:
            raise RemoteStoreError(f"Error renaming object: {e}", operation="rename_object")
        return result.matched_count > 0

    async def soft_delete_by_picture(self, picture_id: str) -> int:
        try:
            result = await self.object_collection.update_many(
                {ObjectFields.PICTURE_ID: picture_id, ObjectFields.DELETED: False},
                {"$set": {ObjectFields.DELETED: True, ObjectFields.UPDATED_AT: utc_now()}},
            )
        except PyMongoError as e:
            raise RemoteStoreError(f"Error deleting objects of picture: {e}", operation="soft_delete_objects")
        return result.modified_count

    async def list_with_pictures(
        self,
        user_id: str,
        name_query: Optional[str] = None,
        image_url: Optional[str] = None,
        ascending: bool = False,
    ) -> List[ObjectWithPicture]:
        if not user_id:
            return []

        picture_query = {
            PictureFields.USER_ID: str(user_id),
            PictureFields.DELETED: False,
        }
        if image_url:
            picture_query[PictureFields.IMAGE_URL] = image_url

        try:
            pictures: Dict[str, dict] = {}
            async for doc in self.picture_collection.find(picture_query):
                pictures[str(doc[PictureFields.MONGO_ID])] = doc
            if not pictures:
                return []

            object_query = {
                ObjectFields.PICTURE_ID: {"$in": list(pictures)},
                ObjectFields.DELETED: False,
            }
            if name_query:
                object_query[ObjectFields.OBJECT_NAME] = {
                    "$regex": re.escape(name_query),
                    "$options": "i",
                }

            cursor = self.object_collection.find(object_query).sort(
                ObjectFields.CREATED_AT, 1 if ascending else -1
            )
            rows: List[ObjectWithPicture] = []
            async for doc in cursor:
                picture = pictures.get(doc.get(ObjectFields.PICTURE_ID))
                if picture is not None:
                    rows.append(self._to_view_row(doc, picture))
            return rows
        except PyMongoError as e:
            raise RemoteStoreError(f"Error listing objects with pictures: {e}", operation="list_objects")

    async def count_active_by_picture(self, picture_ids: List[str]) -> Dict[str, int]:
        if not picture_ids:
            return {}

        pipeline = [
            {"$match": {ObjectFields.PICTURE_ID: {"$in": picture_ids}, ObjectFields.DELETED: False}},
            {"$group": {"_id": f"${ObjectFields.PICTURE_ID}", "count": {"$sum": 1}}},
        ]
        try:
            counts: Dict[str, int] = {}
            async for row in self.object_collection.aggregate(pipeline):
                counts[row["_id"]] = row["count"]
            return counts
        except PyMongoError as e:
            raise RemoteStoreError(f"Error counting objects: {e}", operation="count_objects")

    @staticmethod
    def _to_object_id(value: Optional[str]) -> Optional[ObjectId]:
        if not value:
            return None
        try:
            return ObjectId(value)
        except (InvalidId, TypeError):
            return None

    def _document_to_object(self, doc: dict) -> DetectedObject:
        return DetectedObject(
            id=str(doc.get(ObjectFields.MONGO_ID)),
            picture_id=doc.get(ObjectFields.PICTURE_ID) or "",
            object_name=doc.get(ObjectFields.OBJECT_NAME) or "",
            x_position=doc.get(ObjectFields.X_POSITION),
            y_position=doc.get(ObjectFields.Y_POSITION),
            has_ai_coordinates=bool(doc.get(ObjectFields.HAS_AI_COORDINATES, False)),
            deleted=bool(doc.get(ObjectFields.DELETED, False)),
            created_at=doc.get(ObjectFields.CREATED_AT),
            updated_at=doc.get(ObjectFields.UPDATED_AT),
        )

    def _to_view_row(self, doc: dict, picture: dict) -> ObjectWithPicture:
        return ObjectWithPicture(
            object_id=str(doc.get(ObjectFields.MONGO_ID)),
            object_name=doc.get(ObjectFields.OBJECT_NAME) or "",
            picture_id=doc.get(ObjectFields.PICTURE_ID) or "",
            user_id=picture.get(PictureFields.USER_ID) or "",
            image_url=picture.get(PictureFields.IMAGE_URL) or "",
            x_position=doc.get(ObjectFields.X_POSITION),
            y_position=doc.get(ObjectFields.Y_POSITION),
            has_ai_coordinates=bool(doc.get(ObjectFields.HAS_AI_COORDINATES, False)),
            deleted=bool(doc.get(ObjectFields.DELETED, False)),
            created_at=doc.get(ObjectFields.CREATED_AT),
            picture_name=picture.get(PictureFields.PICTURE_NAME),
            description=picture.get(PictureFields.DESCRIPTION),
        )
