from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
)
from .profile import (
    GetProfileUseCase,
    UpdateProfileUseCase,
)

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "GetProfileUseCase",
    "UpdateProfileUseCase",
]
