# External package imports
from fastapi import APIRouter, Depends

# Local application imports
from ...application.dto.user_dto import ProfileResponse, UpdateProfileRequest, MessageResponse
from ...application.use_cases.profile.get_profile import GetProfileUseCase
from ...application.use_cases.profile.update_profile import UpdateProfileUseCase
from ...di.container import get_container
from .dependencies import get_bearer_token


router = APIRouter(tags=["profile"])


@router.get("", response_model=ProfileResponse)
async def get_profile(token: str = Depends(get_bearer_token)) -> ProfileResponse:
    """
    Get the authenticated user's profile

    Args:
        token: Bearer token (from dependency)

    Returns:
        ProfileResponse with name and phone number
    """
    container = get_container()
    get_profile_use_case = container.get(GetProfileUseCase)
    return await get_profile_use_case.execute(token)


@router.put("", response_model=MessageResponse)
async def update_profile(
    request: UpdateProfileRequest,
    token: str = Depends(get_bearer_token),
) -> MessageResponse:
    """
    Update the authenticated user's phone number and/or full name

    Args:
        request: Fields to change; omitted fields stay unchanged
        token: Bearer token (from dependency)

    Returns:
        MessageResponse confirming the update
    """
    container = get_container()
    update_profile_use_case = container.get(UpdateProfileUseCase)
    return await update_profile_use_case.execute(token, request)
