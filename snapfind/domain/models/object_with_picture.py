from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class ObjectWithPicture:
    """Read model joining an active Object with its active Picture"""

    object_id: str
    object_name: str
    picture_id: str
    user_id: str
    image_url: str

    x_position: Optional[float] = None
    y_position: Optional[float] = None
    has_ai_coordinates: bool = False
    deleted: bool = False
    created_at: Optional[datetime] = None

    picture_name: Optional[str] = None
    description: Optional[str] = None

    @property
    def display_picture_name(self) -> str:
        if self.picture_name:
            return self.picture_name
        if self.created_at:
            return f"Picture {self.created_at.date().isoformat()}"
        return "Picture"
