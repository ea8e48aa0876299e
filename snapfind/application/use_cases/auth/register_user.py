# Local application imports
from ....core.exceptions import ValidationError
from ....core.security import hash_password
from ....domain.models.user import User
from ....domain.repositories.user_repository import UserRepository
from ...dto.auth_dto import UserRegistrationRequest
from ...dto.user_dto import UserResponse


class RegisterUserUseCase:
    """Use case for registering a new user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserRegistrationRequest) -> UserResponse:
        """
        Register a new user

        Raises:
            ValidationError: If a user with this email already exists
        """
        existing_user = await self.user_repository.find_by_email(request.email)
        if existing_user is not None:
            raise ValidationError("User with this email already exists")

        new_user = User(
            id=None,
            full_name=request.full_name,
            email=request.email,
            hashed_password=hash_password(request.password),
        )
        saved_user = await self.user_repository.save(new_user)

        return UserResponse(
            id=saved_user.id or "",
            full_name=saved_user.full_name,
            email=saved_user.email,
        )
