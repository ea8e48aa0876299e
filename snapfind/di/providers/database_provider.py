from typing import TYPE_CHECKING
from ...infrastructure.db.mongo_connection import (
    get_database,
    get_user_collection,
    get_picture_collection,
    get_object_collection,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Single place where database collections are registered"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_singleton("database", get_database())
        container.register_singleton("user_collection", get_user_collection())
        container.register_singleton("picture_collection", get_picture_collection())
        container.register_singleton("object_collection", get_object_collection())
