from .check_daily_quota import CheckDailyQuotaUseCase
from .get_usage_stats import GetUsageStatsUseCase
from .save_picture_metadata import SavePictureMetadataUseCase
from .get_picture_metadata import GetPictureMetadataUseCase
from .list_pictures import ListPicturesUseCase
from .delete_picture import DeletePictureUseCase
from .restore_picture import RestorePictureUseCase

__all__ = [
    "CheckDailyQuotaUseCase",
    "GetUsageStatsUseCase",
    "SavePictureMetadataUseCase",
    "GetPictureMetadataUseCase",
    "ListPicturesUseCase",
    "DeletePictureUseCase",
    "RestorePictureUseCase",
]
