from .clear_and_sync import ClearAndSyncUseCase
from .merge_sync import MergeSyncUseCase
from .get_last_sync_time import GetLastSyncTimeUseCase

__all__ = [
    "ClearAndSyncUseCase",
    "MergeSyncUseCase",
    "GetLastSyncTimeUseCase",
]
