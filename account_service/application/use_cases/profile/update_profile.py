# Standard library imports
import logging
from typing import List

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import build_profile_patches
from ....domain.validators import validate_full_name, validate_phone_number
from ....core.exceptions import ConflictError, PersistenceError, ValidationError
from ....core.tokens import TokenService
from ...dto.user_dto import UpdateProfileRequest, MessageResponse
from ..auth.authenticate import authenticate

logger = logging.getLogger(__name__)

NO_FIELDS_MESSAGE = "No fields provided for update"
PHONE_NUMBER_TAKEN_MESSAGE = "Phone number already exists"
UPDATED_MESSAGE = "User profile updated successfully"


class UpdateProfileUseCase:
    """Use case for changing the caller's phone number and/or full name"""

    def __init__(self, user_repository: UserRepository, token_service: TokenService) -> None:
        self.user_repository = user_repository
        self.token_service = token_service

    async def execute(self, token: str, request: UpdateProfileRequest) -> MessageResponse:
        """
        Apply a partial profile update for the token's subject

        Args:
            token: Bearer token from the Authorization header
            request: Optional new phone number and full name

        Returns:
            MessageResponse acknowledging the update

        Raises:
            UnauthorizedError: If the token does not authenticate the caller
            ValidationError: If no field is supplied or a supplied field breaks a rule
            ConflictError: If the new phone number belongs to a user already
            NotFoundError: If the token subject no longer matches a user
            PersistenceError: If the store fails
        """
        user_id = authenticate(self.token_service, token)

        patches = build_profile_patches(request.phone_number, request.full_name)
        if not patches:
            raise ValidationError([NO_FIELDS_MESSAGE], message=NO_FIELDS_MESSAGE)

        errors: List[str] = []
        if request.phone_number:
            errors.extend(validate_phone_number(request.phone_number))
        if request.full_name:
            errors.extend(validate_full_name(request.full_name))
        if errors:
            logger.warning(f"Profile update for user {user_id} rejected with {len(errors)} validation error(s)")
            raise ValidationError(errors)

        if request.phone_number:
            try:
                exists = await self.user_repository.check_phone_number_exists(request.phone_number)
            except PersistenceError as exception:
                logger.error(f"Failed to check phone number for user {user_id}: {exception}", exc_info=True)
                raise
            if exists:
                logger.warning(f"Profile update for user {user_id} rejected: phone number taken")
                raise ConflictError(PHONE_NUMBER_TAKEN_MESSAGE)

        try:
            await self.user_repository.update_user_profile(user_id, patches)
        except PersistenceError as exception:
            logger.error(f"Failed to update profile for user {user_id}: {exception}", exc_info=True)
            raise

        logger.info(
            f"Updated profile for user {user_id}: {', '.join(patch.field.value for patch in patches)}"
        )
        return MessageResponse(message=UPDATED_MESSAGE)
