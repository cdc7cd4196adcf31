# Standard library imports
import asyncio
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.validators import validate_registration
from ....core.exceptions import PersistenceError, ValidationError
from ....core.security import hash_password
from ...dto.auth_dto import UserRegistrationRequest, UserRegistrationResponse

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserRegistrationRequest) -> UserRegistrationResponse:
        """
        Register a new user

        Args:
            request: Registration request with phone number, full name and password

        Returns:
            UserRegistrationResponse with the identifier assigned by the store

        Raises:
            ValidationError: If any credential rule fails (all violations listed)
            PasswordHashingError: If the password cannot be hashed
            PersistenceError: If the store rejects the new user
        """
        errors = validate_registration(request.phone_number, request.full_name, request.password)
        if errors:
            logger.warning(f"Registration rejected with {len(errors)} validation error(s)")
            raise ValidationError(errors)

        # bcrypt is CPU-bound; keep it off the event loop
        hashed_password = await asyncio.to_thread(hash_password, request.password)

        new_user = User(
            id=None,  # Will be set by repository
            phone_number=request.phone_number,
            full_name=request.full_name,
            hashed_password=hashed_password,
            successful_logins=0,
        )

        try:
            user_id = await self.user_repository.create_user(new_user)
        except PersistenceError as exception:
            logger.error(f"Failed to create user: {exception}", exc_info=True)
            raise

        logger.info(f"Registered user {user_id}")
        return UserRegistrationResponse(id=user_id)
