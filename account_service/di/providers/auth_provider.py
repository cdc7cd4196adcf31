from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...core.tokens import TokenService
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AuthProvider:
    """Registers the registration and login use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Each get() builds a fresh use case around the shared repository and
        token service.
        """
        def build_register() -> RegisterUserUseCase:
            return RegisterUserUseCase(user_repository=container.get(UserRepository))

        def build_login() -> LoginUserUseCase:
            return LoginUserUseCase(
                user_repository=container.get(UserRepository),
                token_service=container.get(TokenService),
            )

        container.register_factory(RegisterUserUseCase, build_register)
        container.register_factory(LoginUserUseCase, build_login)
