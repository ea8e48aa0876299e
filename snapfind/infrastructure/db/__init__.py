from .mongo_connection import (
    get_database,
    close_database,
    get_user_collection,
    get_picture_collection,
    get_object_collection,
)
from .mongo_user_repository import MongoUserRepository
from .mongo_picture_repository import MongoPictureRepository
from .mongo_object_repository import MongoObjectRepository

__all__ = [
    "get_database",
    "close_database",
    "get_user_collection",
    "get_picture_collection",
    "get_object_collection",
    "MongoUserRepository",
    "MongoPictureRepository",
    "MongoObjectRepository",
]
