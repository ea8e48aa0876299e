# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Picture:
    """
    A captured or uploaded image owned by one user.

    ``image_url`` holds the standardized storage reference (the object key),
    never a signed URL, so lookups by image match regardless of link expiry.
    Pictures are soft-deleted by flipping ``deleted``.
    """
    id: Optional[str]
    user_id: str
    image_url: str
    picture_name: str = ""
    description: str = ""
    deleted: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.user_id:
            raise ValueError("Owner user ID is required")
        if not self.image_url or not self.image_url.strip():
            raise ValueError("Image reference is required")
