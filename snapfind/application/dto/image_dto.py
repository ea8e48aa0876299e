from typing import List, Optional

from pydantic import BaseModel, Field


class UploadImageResponse(BaseModel):
    """Storage reference to persist plus a signed URL to show right away"""
    image_url: str
    display_url: str


class DisplayUrlResponse(BaseModel):
    image_url: str
    display_url: str


class AnalyzeImageRequest(BaseModel):
    image_url: str = Field(min_length=1)


class DetectionResponse(BaseModel):
    name: str
    x: float
    y: float


class AnalyzeImageResponse(BaseModel):
    image_url: str
    detections: List[DetectionResponse]


class StoredImageResponse(BaseModel):
    name: str
    path: str
    url: Optional[str] = None
    size: Optional[int] = None
