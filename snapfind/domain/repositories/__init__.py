from .user_repository import UserRepository
from .picture_repository import PictureRepository
from .object_repository import ObjectRepository

__all__ = [
    "UserRepository",
    "PictureRepository",
    "ObjectRepository",
]
