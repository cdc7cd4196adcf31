# Standard library imports
import asyncio
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.exceptions import (
    InvalidCredentialsError,
    LoginRecordError,
    NotFoundError,
    PersistenceError,
)
from ....core.security import verify_password
from ....core.tokens import TokenService
from ...dto.auth_dto import UserLoginRequest, LoginResponse

logger = logging.getLogger(__name__)


class LoginUserUseCase:
    """Use case for authenticating a user and issuing a bearer token"""

    def __init__(self, user_repository: UserRepository, token_service: TokenService) -> None:
        self.user_repository = user_repository
        self.token_service = token_service

    async def execute(self, request: UserLoginRequest) -> LoginResponse:
        """
        Authenticate user and generate access token

        Args:
            request: Login request with phone number and password

        Returns:
            LoginResponse with the user ID and a signed token

        Raises:
            InvalidCredentialsError: If the phone number is unknown or the password is wrong
            LoginRecordError: If the login counter cannot be incremented
            TokenSigningError: If the token cannot be signed
        """
        try:
            user = await self.user_repository.get_user_by_phone_number(request.phone_number)
        except NotFoundError:
            logger.warning("Login rejected: unknown phone number")
            raise InvalidCredentialsError() from None

        matches = await asyncio.to_thread(verify_password, request.password, user.hashed_password)
        if not matches:
            logger.warning(f"Login rejected: wrong password for user {user.id}")
            raise InvalidCredentialsError()

        # Credentials are accepted at this point; a failure below is operational
        try:
            await self.user_repository.increment_successful_logins(user.id)
        except (NotFoundError, PersistenceError) as exception:
            logger.error(
                f"Failed to increment successful logins for user {user.id}: {exception}",
                exc_info=True,
            )
            raise LoginRecordError() from exception

        token = self.token_service.issue(user.id)
        logger.info(f"Login successful for user {user.id}")
        return LoginResponse(id=user.id, token=token)
