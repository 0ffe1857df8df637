# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.exceptions import ConflictError, InvalidInputError
from ....core.security import hash_password
from ...dto.auth_dto import SignupRequest
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new account"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: SignupRequest) -> UserResponse:
        """
        Register a new user

        Args:
            request: Signup request with username and password

        Returns:
            UserResponse with created user information (never the hash)

        Raises:
            InvalidInputError: If username or password is empty
            ConflictError: If the username is already taken
        """
        if not request.username or not request.username.strip() or not request.password:
            raise InvalidInputError("Username and password are required")

        # Check if user already exists; the store's unique index covers concurrent signups
        existing_user = await self.user_repository.find_by_username(request.username)
        if existing_user is not None:
            raise ConflictError("Username already exists")

        # Hash password
        password_hash = hash_password(request.password)

        # Save user
        saved_user = await self.user_repository.save(
            User(
                id=None,  # Will be set by repository
                username=request.username,
                password_hash=password_hash,
            )
        )
        logger.info("Registered user %s", saved_user.username)

        return UserResponse(
            id=saved_user.id or "",
            username=saved_user.username,
        )
