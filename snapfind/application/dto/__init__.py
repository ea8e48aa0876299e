from .auth_dto import UserRegistrationRequest, UserLoginRequest, TokenResponse
from .user_dto import UserResponse
from .object_dto import (
    SaveObjectRequest,
    SaveObjectResult,
    DetectedPosition,
    ConfirmObjectsRequest,
    ConfirmObjectsResponse,
    RenameObjectRequest,
    ObjectResponse,
    LocalCacheStatsResponse,
)
from .picture_dto import (
    DailyQuotaResponse,
    UsageStatsResponse,
    PictureMetadataRequest,
    PictureResponse,
    PictureWithCountResponse,
    PictureImageRequest,
    DeletePictureResponse,
    RestorePictureResponse,
)
from .sync_dto import SyncResult, LastSyncResponse
from .image_dto import (
    UploadImageResponse,
    DisplayUrlResponse,
    AnalyzeImageRequest,
    DetectionResponse,
    AnalyzeImageResponse,
    StoredImageResponse,
)

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "TokenResponse",
    "UserResponse",
    "SaveObjectRequest",
    "SaveObjectResult",
    "DetectedPosition",
    "ConfirmObjectsRequest",
    "ConfirmObjectsResponse",
    "RenameObjectRequest",
    "ObjectResponse",
    "LocalCacheStatsResponse",
    "DailyQuotaResponse",
    "UsageStatsResponse",
    "PictureMetadataRequest",
    "PictureResponse",
    "PictureWithCountResponse",
    "PictureImageRequest",
    "DeletePictureResponse",
    "RestorePictureResponse",
    "SyncResult",
    "LastSyncResponse",
    "UploadImageResponse",
    "DisplayUrlResponse",
    "AnalyzeImageRequest",
    "DetectionResponse",
    "AnalyzeImageResponse",
    "StoredImageResponse",
]
