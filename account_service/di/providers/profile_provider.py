from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...core.tokens import TokenService
from ...application.use_cases.profile.get_profile import GetProfileUseCase
from ...application.use_cases.profile.update_profile import UpdateProfileUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ProfileProvider:
    """Profile use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            GetProfileUseCase,
            lambda: GetProfileUseCase(
                user_repository=container.get(UserRepository),
                token_service=container.get(TokenService),
            )
        )

        container.register_factory(
            UpdateProfileUseCase,
            lambda: UpdateProfileUseCase(
                user_repository=container.get(UserRepository),
                token_service=container.get(TokenService),
            )
        )
