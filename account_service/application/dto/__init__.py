from .auth_dto import (
    UserRegistrationRequest,
    UserRegistrationResponse,
    UserLoginRequest,
    LoginResponse,
)
from .user_dto import ProfileResponse, UpdateProfileRequest, MessageResponse

__all__ = [
    "UserRegistrationRequest",
    "UserRegistrationResponse",
    "UserLoginRequest",
    "LoginResponse",
    "ProfileResponse",
    "UpdateProfileRequest",
    "MessageResponse",
]
