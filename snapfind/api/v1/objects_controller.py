# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends, Query, status

# Local application imports
from ...application.dto.object_dto import (
    ConfirmObjectsRequest,
    ConfirmObjectsResponse,
    LocalCacheStatsResponse,
    ObjectResponse,
    RenameObjectRequest,
    SaveObjectRequest,
    SaveObjectResult,
)
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.objects import (
    GetLocalCacheStatsUseCase,
    GetObjectsForImageUseCase,
    ListObjectsUseCase,
    RenameObjectUseCase,
    SaveConfirmedObjectsUseCase,
    SaveObjectUseCase,
    SearchObjectsUseCase,
)
from ...core.exceptions import SnapFindError
from ...di.container import get_container
from .dependencies import get_current_user, to_http_exception


router = APIRouter(tags=["objects"])


@router.post("", response_model=SaveObjectResult, status_code=status.HTTP_201_CREATED)
async def save_object(
    request: SaveObjectRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> SaveObjectResult:
    """
    Save one object of an image.

    Duplicates come back with ``duplicate`` set; a failed remote write comes
    back with ``remote_saved`` False and the object kept on the device.
    """
    use_case = get_container().get(SaveObjectUseCase)
    try:
        return await use_case.execute(request, current_user.id)
    except SnapFindError as exception:
        raise to_http_exception(exception)


@router.post("/confirm", response_model=ConfirmObjectsResponse)
async def confirm_objects(
    request: ConfirmObjectsRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> ConfirmObjectsResponse:
    use_case = get_container().get(SaveConfirmedObjectsUseCase)
    try:
        return await use_case.execute(request, current_user.id)
    except SnapFindError as exception:
        raise to_http_exception(exception)


@router.get("", response_model=List[ObjectResponse])
async def list_objects(
    current_user: UserResponse = Depends(get_current_user),
) -> List[ObjectResponse]:
    use_case = get_container().get(ListObjectsUseCase)
    return await use_case.execute(current_user.id)


@router.get("/search", response_model=List[ObjectResponse])
async def search_objects(
    q: str = Query(default=""),
    current_user: UserResponse = Depends(get_current_user),
) -> List[ObjectResponse]:
    use_case = get_container().get(SearchObjectsUseCase)
    return await use_case.execute(current_user.id, q)


@router.get("/by-image", response_model=List[ObjectResponse])
async def objects_for_image(
    image_url: str = Query(min_length=1),
    current_user: UserResponse = Depends(get_current_user),
) -> List[ObjectResponse]:
    use_case = get_container().get(GetObjectsForImageUseCase)
    return await use_case.execute(current_user.id, image_url)


@router.get("/local-stats", response_model=LocalCacheStatsResponse)
async def local_cache_stats(
    current_user: UserResponse = Depends(get_current_user),
) -> LocalCacheStatsResponse:
    use_case = get_container().get(GetLocalCacheStatsUseCase)
    try:
        return await use_case.execute(current_user.id)
    except SnapFindError as exception:
        raise to_http_exception(exception)


@router.patch("/{object_id}", response_model=ObjectResponse)
async def rename_object(
    object_id: str,
    request: RenameObjectRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> ObjectResponse:
    use_case = get_container().get(RenameObjectUseCase)
    try:
        return await use_case.execute(current_user.id, object_id, request.object_name)
    except SnapFindError as exception:
        raise to_http_exception(exception)
