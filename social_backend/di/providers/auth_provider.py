from typing import TYPE_CHECKING
from ...core.security import TokenVerifier
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AuthProvider:
    """Authentication provider - registers the token verifier and auth use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register authentication dependencies.
        Use cases are created on-demand via factories.
        """
        container.register_singleton(TokenVerifier, TokenVerifier())

        container.register_factory(
            RegisterUserUseCase,
            lambda: RegisterUserUseCase(
                user_repository=container.get(UserRepository)
            )
        )

        container.register_factory(
            LoginUserUseCase,
            lambda: LoginUserUseCase(
                user_repository=container.get(UserRepository)
            )
        )
