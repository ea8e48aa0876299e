from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from ..models.picture import Picture


class PictureRepository(ABC):
    """Repository interface - defines contract for picture data access"""

    @abstractmethod
    async def find_by_image(self, user_id: str, image_url: str) -> Optional[Picture]:
        """Find the owner's picture for a storage reference, deleted or not"""
        pass

    @abstractmethod
    async def find_by_id(self, picture_id: str) -> Optional[Picture]:
        """Find picture by ID"""
        pass

    @abstractmethod
    async def create(self, picture: Picture) -> Picture:
        """Insert a picture row and return it with its ID"""
        pass

    @abstractmethod
    async def update_metadata(self, picture_id: str, picture_name: str, description: str) -> bool:
        """Set name and description, returns False when no row matched"""
        pass

    @abstractmethod
    async def list_active(self, user_id: str) -> List[Picture]:
        """Active pictures of the owner, newest first"""
        pass

    @abstractmethod
    async def count_created_between(self, user_id: str, start_utc: datetime, end_utc: datetime) -> int:
        """Count active pictures created in [start_utc, end_utc)"""
        pass

    @abstractmethod
    async def soft_delete_by_image(self, user_id: str, image_url: str) -> int:
        """Mark the picture and its objects deleted, returns objects affected"""
        pass

    @abstractmethod
    async def restore_by_image(self, user_id: str, image_url: str) -> int:
        """Clear the deleted flag on the picture and its objects, returns objects affected"""
        pass

    @abstractmethod
    async def undelete(self, picture_id: str) -> bool:
        """Clear the deleted flag on the picture row only, its objects stay deleted"""
        pass
