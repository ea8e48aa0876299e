# Standard library imports
from typing import Optional

# Local application imports
from ....core.exceptions import AuthenticationError
from ....core.security import decode_jwt_token
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse


class GetCurrentUserUseCase:
    """Use case for resolving the signed-in user from a JWT"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, token: str) -> UserResponse:
        """
        Raises:
            AuthenticationError: If the token is invalid or the user is gone
        """
        try:
            payload = decode_jwt_token(token)
        except ValueError as e:
            raise AuthenticationError(f"Invalid or expired token: {e}")

        user_id: Optional[str] = payload.get("sub")
        if not user_id:
            raise AuthenticationError("Invalid authentication payload: missing user ID")

        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise AuthenticationError("User not found")

        return UserResponse(
            id=user.id or "",
            full_name=user.full_name,
            email=user.email,
        )
