from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class SaveObjectRequest(BaseModel):
    """DTO for saving one object of an image"""
    object_name: str = Field(min_length=1, max_length=200)
    image_url: str = Field(min_length=1)
    x_position: Optional[float] = Field(default=None, ge=0, le=100)
    y_position: Optional[float] = Field(default=None, ge=0, le=100)
    has_ai_coordinates: bool = False


class SaveObjectResult(BaseModel):
    """
    Outcome of a save.

    ``local_saved`` is False only for duplicates. ``remote_saved`` is False
    when the remote write failed; the local entry is kept either way.
    """
    object_name: str
    image_url: str
    local_id: Optional[str] = None
    local_saved: bool
    duplicate: bool = False
    remote_saved: bool = False
    picture_id: Optional[str] = None
    object_id: Optional[str] = None
    error: Optional[str] = None


class DetectedPosition(BaseModel):
    name: str
    x: float = Field(ge=0, le=100)
    y: float = Field(ge=0, le=100)


class ConfirmObjectsRequest(BaseModel):
    """DTO for the confirmation screen: names the user kept, plus what the AI reported"""
    image_url: str = Field(min_length=1)
    object_names: List[str]
    detections: List[DetectedPosition] = Field(default_factory=list)
    edit_mode: bool = False


class ConfirmObjectsResponse(BaseModel):
    results: List[SaveObjectResult]
    saved_count: int
    replaced_count: int = 0


class RenameObjectRequest(BaseModel):
    object_name: str = Field(min_length=1, max_length=200)


class ObjectResponse(BaseModel):
    """One object joined with its picture, from the remote store or the local cache"""
    id: str
    object_name: str
    image_url: str
    picture_id: Optional[str] = None
    picture_name: Optional[str] = None
    description: Optional[str] = None
    x_position: Optional[float] = None
    y_position: Optional[float] = None
    has_ai_coordinates: bool = False
    created_at: Optional[datetime] = None
    source: str = "remote"


class LocalCacheStatsResponse(BaseModel):
    total_objects: int
    unique_images: int
    object_types: int
    most_common_object: Optional[str] = None
    oldest_object: Optional[ObjectResponse] = None
    newest_object: Optional[ObjectResponse] = None
