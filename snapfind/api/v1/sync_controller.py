# External package imports
from fastapi import APIRouter, Depends

# Local application imports
from ...application.dto.sync_dto import LastSyncResponse, SyncResult
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.sync import (
    ClearAndSyncUseCase,
    GetLastSyncTimeUseCase,
    MergeSyncUseCase,
)
from ...core.exceptions import SnapFindError
from ...di.container import get_container
from .dependencies import get_current_user, to_http_exception


router = APIRouter(tags=["sync"])


@router.post("/clear-and-sync", response_model=SyncResult)
async def clear_and_sync(
    current_user: UserResponse = Depends(get_current_user),
) -> SyncResult:
    """
    Replace the device cache with the remote rows of the current user.
    Objects saved only on the device are dropped.
    """
    use_case = get_container().get(ClearAndSyncUseCase)
    try:
        return await use_case.execute(current_user.id)
    except SnapFindError as exception:
        raise to_http_exception(exception)


@router.post("/merge", response_model=SyncResult)
async def merge_sync(
    current_user: UserResponse = Depends(get_current_user),
) -> SyncResult:
    use_case = get_container().get(MergeSyncUseCase)
    try:
        return await use_case.execute(current_user.id)
    except SnapFindError as exception:
        raise to_http_exception(exception)


@router.get("/last", response_model=LastSyncResponse)
async def last_sync_time(
    current_user: UserResponse = Depends(get_current_user),
) -> LastSyncResponse:
    _ = current_user
    use_case = get_container().get(GetLastSyncTimeUseCase)
    return await use_case.execute()
