from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from ..models.detected_object import DetectedObject
from ..models.object_with_picture import ObjectWithPicture


class ObjectRepository(ABC):
    """Repository interface - defines contract for detected object data access"""

    @abstractmethod
    async def create(self, detected_object: DetectedObject) -> DetectedObject:
        """Insert an object row and return it with its ID"""
        pass

    @abstractmethod
    async def find_by_id(self, object_id: str) -> Optional[DetectedObject]:
        """Find object by ID"""
        pass

    @abstractmethod
    async def rename(self, object_id: str, object_name: str) -> bool:
        """Rename an active object, returns False when no row matched"""
        pass

    @abstractmethod
    async def soft_delete_by_picture(self, picture_id: str) -> int:
        """Mark all objects of a picture deleted, returns rows affected"""
        pass

    @abstractmethod
    async def list_with_pictures(
        self,
        user_id: str,
        name_query: Optional[str] = None,
        image_url: Optional[str] = None,
        ascending: bool = False,
    ) -> List[ObjectWithPicture]:
        """
        Active objects of the owner's active pictures, ordered by object
        creation time. ``name_query`` is a case-insensitive substring filter.
        """
        pass

    @abstractmethod
    async def count_active_by_picture(self, picture_ids: List[str]) -> Dict[str, int]:
        """Active object count per picture ID"""
        pass
