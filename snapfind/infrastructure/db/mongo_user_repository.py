# Standard library imports
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import PyMongoError

# Local application imports
from ...core.exceptions import RemoteStoreError
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from .mongo_connection import get_user_collection


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def find_by_email(self, email: str) -> Optional[User]:
        if not email:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: email.lower()})
        except PyMongoError as e:
            raise RemoteStoreError(f"Error finding user by email: {e}", operation="find_user")
        return self._document_to_user(document) if document else None

    async def find_by_id(self, user_id: str) -> Optional[User]:
        if not user_id:
            return None

        try:
            object_id = ObjectId(user_id)
        except (InvalidId, TypeError):
            return None

        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise RemoteStoreError(f"Error finding user by ID: {e}", operation="find_user")
        return self._document_to_user(document) if document else None

    async def save(self, user: User) -> User:
        """
        Save user (create new or update existing)

        Args:
            user: User domain model to save

        Returns:
            Saved User domain model with ID set
        """
        if not user:
            raise ValueError("User cannot be None")

        user_dict = {
            UserFields.FULL_NAME: user.full_name,
            UserFields.EMAIL: user.email.lower(),
            UserFields.HASHED_PASSWORD: user.hashed_password,
        }

        try:
            if user.id:
                try:
                    object_id = ObjectId(user.id)
                except (InvalidId, TypeError):
                    raise ValueError(f"Invalid user ID format: {user.id}")

                update_result = await self.user_collection.update_one(
                    {UserFields.MONGO_ID: object_id},
                    {"$set": user_dict}
                )
                if update_result.matched_count == 0:
                    raise ValueError(f"User with ID {user.id} not found")
                return User(id=user.id, **user_dict)

            result = await self.user_collection.insert_one(user_dict)
            return User(id=str(result.inserted_id), **user_dict)
        except PyMongoError as e:
            raise RemoteStoreError(f"Error saving user: {e}", operation="save_user")

    def _document_to_user(self, document: dict) -> User:
        if UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            full_name=document.get(UserFields.FULL_NAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            hashed_password=document.get(UserFields.HASHED_PASSWORD, ""),
        )
