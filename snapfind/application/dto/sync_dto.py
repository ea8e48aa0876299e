from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class SyncResult(BaseModel):
    """
    Outcome of a sync.

    On failure ``success`` is False and ``error`` holds the user-facing
    message; ``synced_count`` is the number of entries now cached.
    """
    success: bool
    synced_count: int = 0
    synced_at: Optional[datetime] = None
    error: Optional[str] = None


class LastSyncResponse(BaseModel):
    last_sync: Optional[datetime] = None
