# Standard library imports
from typing import Optional

# Local application imports
from ....core.security import create_jwt_token, verify_password
from ....domain.constants import UserFields
from ....domain.repositories.user_repository import UserRepository
from ...dto.auth_dto import TokenResponse, UserLoginRequest


class LoginUserUseCase:
    """Use case for authenticating a user and issuing a JWT"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserLoginRequest) -> Optional[TokenResponse]:
        """
        Returns:
            TokenResponse on success, None for unknown email or wrong password
        """
        user = await self.user_repository.find_by_email(request.email)
        if user is None:
            return None

        if not verify_password(request.password, user.hashed_password):
            return None

        token = create_jwt_token({
            "sub": user.id or "",
            UserFields.EMAIL: user.email,
        })
        return TokenResponse(access_token=token)
