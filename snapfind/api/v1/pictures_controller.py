# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends, HTTPException, Query, status

# Local application imports
from ...application.dto.picture_dto import (
    DailyQuotaResponse,
    DeletePictureResponse,
    PictureImageRequest,
    PictureMetadataRequest,
    PictureResponse,
    PictureWithCountResponse,
    RestorePictureResponse,
    UsageStatsResponse,
)
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.pictures import (
    CheckDailyQuotaUseCase,
    DeletePictureUseCase,
    GetPictureMetadataUseCase,
    GetUsageStatsUseCase,
    ListPicturesUseCase,
    RestorePictureUseCase,
    SavePictureMetadataUseCase,
)
from ...core.exceptions import SnapFindError
from ...di.container import get_container
from .dependencies import get_current_user, to_http_exception


router = APIRouter(tags=["pictures"])


@router.get("/quota", response_model=DailyQuotaResponse)
async def check_daily_quota(
    current_user: UserResponse = Depends(get_current_user),
) -> DailyQuotaResponse:
    """Whether the camera may take another picture today"""
    use_case = get_container().get(CheckDailyQuotaUseCase)
    return await use_case.execute(current_user.id)


@router.get("/usage", response_model=UsageStatsResponse)
async def usage_stats(
    current_user: UserResponse = Depends(get_current_user),
) -> UsageStatsResponse:
    use_case = get_container().get(GetUsageStatsUseCase)
    try:
        return await use_case.execute(current_user.id)
    except SnapFindError as exception:
        raise to_http_exception(exception)


@router.get("", response_model=List[PictureWithCountResponse])
async def list_pictures(
    current_user: UserResponse = Depends(get_current_user),
) -> List[PictureWithCountResponse]:
    use_case = get_container().get(ListPicturesUseCase)
    try:
        return await use_case.execute(current_user.id)
    except SnapFindError as exception:
        raise to_http_exception(exception)


@router.get("/metadata", response_model=PictureResponse)
async def get_picture_metadata(
    image_url: str = Query(min_length=1),
    current_user: UserResponse = Depends(get_current_user),
) -> PictureResponse:
    use_case = get_container().get(GetPictureMetadataUseCase)
    try:
        picture = await use_case.execute(current_user.id, image_url)
    except SnapFindError as exception:
        raise to_http_exception(exception)
    if picture is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Picture not found")
    return picture


@router.put("/metadata", response_model=PictureResponse)
async def save_picture_metadata(
    request: PictureMetadataRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> PictureResponse:
    use_case = get_container().get(SavePictureMetadataUseCase)
    try:
        return await use_case.execute(request, current_user.id)
    except SnapFindError as exception:
        raise to_http_exception(exception)


@router.post("/delete", response_model=DeletePictureResponse)
async def delete_picture(
    request: PictureImageRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> DeletePictureResponse:
    """Soft-delete a picture and its objects; the image file is kept"""
    use_case = get_container().get(DeletePictureUseCase)
    try:
        return await use_case.execute(current_user.id, request.image_url)
    except SnapFindError as exception:
        raise to_http_exception(exception)


@router.post("/restore", response_model=RestorePictureResponse)
async def restore_picture(
    request: PictureImageRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> RestorePictureResponse:
    use_case = get_container().get(RestorePictureUseCase)
    try:
        return await use_case.execute(current_user.id, request.image_url)
    except SnapFindError as exception:
        raise to_http_exception(exception)
