from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    GetCurrentUserUseCase,
)
from .objects import (
    SaveObjectUseCase,
    SaveConfirmedObjectsUseCase,
    ListObjectsUseCase,
    SearchObjectsUseCase,
    GetObjectsForImageUseCase,
    RenameObjectUseCase,
    GetLocalCacheStatsUseCase,
)
from .sync import (
    ClearAndSyncUseCase,
    MergeSyncUseCase,
    GetLastSyncTimeUseCase,
)
from .pictures import (
    CheckDailyQuotaUseCase,
    GetUsageStatsUseCase,
    SavePictureMetadataUseCase,
    GetPictureMetadataUseCase,
    ListPicturesUseCase,
    DeletePictureUseCase,
    RestorePictureUseCase,
)
from .images import (
    UploadImageUseCase,
    GetDisplayUrlUseCase,
    ListUserImagesUseCase,
    DeleteUserImageUseCase,
)
from .detection import AnalyzeImageUseCase

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "GetCurrentUserUseCase",
    "SaveObjectUseCase",
    "SaveConfirmedObjectsUseCase",
    "ListObjectsUseCase",
    "SearchObjectsUseCase",
    "GetObjectsForImageUseCase",
    "RenameObjectUseCase",
    "GetLocalCacheStatsUseCase",
    "ClearAndSyncUseCase",
    "MergeSyncUseCase",
    "GetLastSyncTimeUseCase",
    "CheckDailyQuotaUseCase",
    "GetUsageStatsUseCase",
    "SavePictureMetadataUseCase",
    "GetPictureMetadataUseCase",
    "ListPicturesUseCase",
    "DeletePictureUseCase",
    "RestorePictureUseCase",
    "UploadImageUseCase",
    "GetDisplayUrlUseCase",
    "ListUserImagesUseCase",
    "DeleteUserImageUseCase",
    "AnalyzeImageUseCase",
]
