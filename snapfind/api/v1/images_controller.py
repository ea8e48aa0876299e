# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends, File, Query, UploadFile, status

# Local application imports
from ...application.dto.image_dto import (
    AnalyzeImageRequest,
    AnalyzeImageResponse,
    DisplayUrlResponse,
    StoredImageResponse,
    UploadImageResponse,
)
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.detection import AnalyzeImageUseCase
from ...application.use_cases.images import (
    DeleteUserImageUseCase,
    GetDisplayUrlUseCase,
    ListUserImagesUseCase,
    UploadImageUseCase,
)
from ...core.exceptions import SnapFindError
from ...di.container import get_container
from .dependencies import get_current_user, to_http_exception


router = APIRouter(tags=["images"])


@router.post("/upload", response_model=UploadImageResponse, status_code=status.HTTP_201_CREATED)
async def upload_image(
    file: UploadFile = File(...),
    current_user: UserResponse = Depends(get_current_user),
) -> UploadImageResponse:
    """
    Store a captured image.

    Returns the storage reference to send back with objects and metadata,
    plus a signed URL valid for 24 hours.
    """
    use_case = get_container().get(UploadImageUseCase)
    data = await file.read()
    try:
        return await use_case.upload_bytes(current_user.id, data, file.filename)
    except SnapFindError as exception:
        raise to_http_exception(exception)


@router.get("", response_model=List[StoredImageResponse])
async def list_images(
    current_user: UserResponse = Depends(get_current_user),
) -> List[StoredImageResponse]:
    use_case = get_container().get(ListUserImagesUseCase)
    try:
        return await use_case.execute(current_user.id)
    except SnapFindError as exception:
        raise to_http_exception(exception)


@router.get("/display-url", response_model=DisplayUrlResponse)
async def display_url(
    image_url: str = Query(min_length=1),
    current_user: UserResponse = Depends(get_current_user),
) -> DisplayUrlResponse:
    _ = current_user
    use_case = get_container().get(GetDisplayUrlUseCase)
    try:
        return await use_case.execute(image_url)
    except SnapFindError as exception:
        raise to_http_exception(exception)


@router.post("/analyze", response_model=AnalyzeImageResponse)
async def analyze_image(
    request: AnalyzeImageRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> AnalyzeImageResponse:
    """Detected objects with positions in percent of the image size"""
    _ = current_user
    use_case = get_container().get(AnalyzeImageUseCase)
    try:
        return await use_case.execute(request.image_url)
    except SnapFindError as exception:
        raise to_http_exception(exception)


@router.delete("/{file_name}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_image(
    file_name: str,
    current_user: UserResponse = Depends(get_current_user),
) -> None:
    """Delete a stored file of the current user; picture rows are not touched"""
    use_case = get_container().get(DeleteUserImageUseCase)
    try:
        await use_case.execute(current_user.id, file_name)
    except SnapFindError as exception:
        raise to_http_exception(exception)
