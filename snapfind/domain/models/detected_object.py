# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


def normalize_object_name(name: Optional[str]) -> str:
    """Object names are stored lower-cased and trimmed."""
    return (name or "").strip().lower()


@dataclass
class DetectedObject:
    """
    An item tagged inside a Picture, detected by the vision API or added by hand.

    Positions are percentages from the top-left corner of the image.
    """
    id: Optional[str]
    picture_id: str
    object_name: str
    x_position: Optional[float] = None
    y_position: Optional[float] = None
    has_ai_coordinates: bool = False
    deleted: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.picture_id:
            raise ValueError("Picture ID is required")
        self.object_name = normalize_object_name(self.object_name)
        if not self.object_name:
            raise ValueError("Object name is required")
        for label, value in (("x", self.x_position), ("y", self.y_position)):
            if value is not None and not 0 <= value <= 100:
                raise ValueError(f"Object {label} position must be between 0 and 100")
