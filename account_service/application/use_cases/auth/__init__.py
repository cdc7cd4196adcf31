from .authenticate import authenticate
from .register_user import RegisterUserUseCase
from .login_user import LoginUserUseCase

__all__ = [
    "authenticate",
    "RegisterUserUseCase",
    "LoginUserUseCase",
]
