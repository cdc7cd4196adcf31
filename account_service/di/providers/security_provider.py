from datetime import timedelta
from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...core.tokens import TokenService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class SecurityProvider:
    """Registers the token service built once from settings"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        settings = get_settings()
        container.register_singleton(
            TokenService,
            TokenService(
                secret_key=settings.jwt_secret_key,
                algorithm=settings.jwt_algorithm,
                ttl=timedelta(minutes=settings.access_token_expire_minutes),
            )
        )
