from .save_object import SaveObjectUseCase
from .save_confirmed_objects import SaveConfirmedObjectsUseCase
from .list_objects import ListObjectsUseCase
from .search_objects import SearchObjectsUseCase
from .get_objects_for_image import GetObjectsForImageUseCase
from .rename_object import RenameObjectUseCase
from .get_local_cache_stats import GetLocalCacheStatsUseCase

__all__ = [
    "SaveObjectUseCase",
    "SaveConfirmedObjectsUseCase",
    "ListObjectsUseCase",
    "SearchObjectsUseCase",
    "GetObjectsForImageUseCase",
    "RenameObjectUseCase",
    "GetLocalCacheStatsUseCase",
]
