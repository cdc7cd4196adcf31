# External package imports
from fastapi import APIRouter, status

# Local application imports
from ...application.dto.auth_dto import (
    UserRegistrationRequest,
    UserRegistrationResponse,
    UserLoginRequest,
    LoginResponse,
)
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...di.container import get_container


router = APIRouter(tags=["authentication"])


@router.post("/register", response_model=UserRegistrationResponse, status_code=status.HTTP_201_CREATED)
async def register_user(request: UserRegistrationRequest) -> UserRegistrationResponse:
    """
    Register a new user

    Args:
        request: User registration request

    Returns:
        UserRegistrationResponse with the new user's ID
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)
    return await register_use_case.execute(request)


@router.post("/login", response_model=LoginResponse)
async def login_user(request: UserLoginRequest) -> LoginResponse:
    """
    Authenticate user and get a bearer token

    Args:
        request: User login request

    Returns:
        LoginResponse with the user's ID and token
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)
    return await login_use_case.execute(request)
