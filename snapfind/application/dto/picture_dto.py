from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class DailyQuotaResponse(BaseModel):
    """Whether another picture may be captured today"""
    can_capture: bool
    today_count: int
    limit: int


class UsageStatsResponse(BaseModel):
    today: int
    this_week: int
    this_month: int
    daily_limit: int
    remaining_today: int


class PictureMetadataRequest(BaseModel):
    image_url: str = Field(min_length=1)
    picture_name: str = Field(default="", max_length=200)
    description: str = Field(default="", max_length=2000)


class PictureResponse(BaseModel):
    id: str
    image_url: str
    picture_name: str
    description: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PictureWithCountResponse(PictureResponse):
    object_count: int = 0
    has_objects: bool = False


class PictureImageRequest(BaseModel):
    """Identifies a picture by its image reference (or a signed URL of it)"""
    image_url: str = Field(min_length=1)


class DeletePictureResponse(BaseModel):
    image_url: str
    objects_deleted: int
    local_entries_removed: int = 0


class RestorePictureResponse(BaseModel):
    image_url: str
    objects_restored: int
