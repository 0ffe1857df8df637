# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.identity import Identity
from ....domain.exceptions import InvalidInputError, NotFoundError, UnauthenticatedError
from ....core.security import verify_password, create_access_token
from ...dto.auth_dto import LoginRequest, TokenResponse

logger = logging.getLogger(__name__)


class LoginUserUseCase:
    """Use case for authenticating a user and issuing an access token"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: LoginRequest) -> TokenResponse:
        """
        Authenticate user and generate access token

        Args:
            request: Login request with username and password

        Returns:
            TokenResponse carrying a signed token valid for one hour

        Raises:
            InvalidInputError: If username or password is empty
            NotFoundError: If no user has that username
            UnauthenticatedError: If the password does not match
        """
        if not request.username or not request.password:
            raise InvalidInputError("Username and password are required")

        user = await self.user_repository.find_by_username(request.username)
        if user is None:
            raise NotFoundError("User not found")

        if not verify_password(request.password, user.password_hash):
            logger.info("Failed login for user %s", user.username)
            raise UnauthenticatedError("Invalid password")

        token = create_access_token(Identity(user_id=user.id or "", username=user.username))
        logger.info("User %s logged in", user.username)
        return TokenResponse(token=token)
