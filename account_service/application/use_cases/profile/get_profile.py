# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.exceptions import NotFoundError
from ....core.tokens import TokenService
from ...dto.user_dto import ProfileResponse
from ..auth.authenticate import authenticate

logger = logging.getLogger(__name__)


class GetProfileUseCase:
    """Use case for reading the authenticated caller's own profile"""

    def __init__(self, user_repository: UserRepository, token_service: TokenService) -> None:
        self.user_repository = user_repository
        self.token_service = token_service

    async def execute(self, token: str) -> ProfileResponse:
        """
        Get the caller's profile from their bearer token

        Args:
            token: Bearer token from the Authorization header

        Returns:
            ProfileResponse with full name and phone number only

        Raises:
            UnauthorizedError: If the token does not authenticate the caller
            NotFoundError: If the token subject no longer matches a user
        """
        user_id = authenticate(self.token_service, token)

        try:
            user = await self.user_repository.get_user_by_id(user_id)
        except NotFoundError:
            logger.warning(f"Profile requested for unknown user {user_id}")
            raise

        return ProfileResponse(name=user.full_name, phone_number=user.phone_number)
