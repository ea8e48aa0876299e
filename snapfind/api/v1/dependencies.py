# External package imports
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...application.dto.user_dto import UserResponse
from ...core.exceptions import (
    AuthenticationError,
    ExternalServiceError,
    LocalCacheError,
    NotFoundError,
    RemoteStoreError,
    SnapFindError,
    ValidationError,
    get_user_message,
)
from ...di.container import get_container


security_scheme = HTTPBearer(auto_error=True)

_STATUS_BY_ERROR = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (RemoteStoreError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (ExternalServiceError, status.HTTP_502_BAD_GATEWAY),
    (LocalCacheError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def to_http_exception(exception: SnapFindError) -> HTTPException:
    """Map a domain error to an HTTP error carrying its user-facing message"""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exception, error_type):
            return HTTPException(status_code=status_code, detail=get_user_message(exception))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=get_user_message(exception),
    )


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security_scheme),
) -> UserResponse:
    """
    FastAPI dependency resolving the signed-in user from the bearer token

    Raises:
        HTTPException: 401 if the token is invalid or the user is gone
    """
    container = get_container()
    get_current_user_use_case = container.get(GetCurrentUserUseCase)

    try:
        return await get_current_user_use_case.execute(credentials.credentials)
    except AuthenticationError as exception:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=exception.message,
        )
