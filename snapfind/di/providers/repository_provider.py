from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.picture_repository import PictureRepository
from ...domain.repositories.object_repository import ObjectRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository
from ...infrastructure.db.mongo_picture_repository import MongoPictureRepository
from ...infrastructure.db.mongo_object_repository import MongoObjectRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Wires domain repository interfaces to the MongoDB implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        user_collection = container.get("user_collection")
        picture_collection = container.get("picture_collection")
        object_collection = container.get("object_collection")

        container.register_singleton(
            UserRepository,
            MongoUserRepository(user_collection=user_collection)
        )
        container.register_singleton(
            PictureRepository,
            MongoPictureRepository(
                picture_collection=picture_collection,
                object_collection=object_collection,
            )
        )
        container.register_singleton(
            ObjectRepository,
            MongoObjectRepository(
                object_collection=object_collection,
                picture_collection=picture_collection,
            )
        )
