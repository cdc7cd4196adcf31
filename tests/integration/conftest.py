"""
Fixtures for API tests: the app runs against a mocked DI container.
"""
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from account_service.application.use_cases.auth.login_user import LoginUserUseCase
from account_service.application.use_cases.auth.register_user import RegisterUserUseCase
from account_service.application.use_cases.profile.get_profile import GetProfileUseCase
from account_service.application.use_cases.profile.update_profile import UpdateProfileUseCase
from account_service.core.tokens import TokenService
from account_service.di.base_container import BaseContainer
from account_service.di.providers.auth_provider import AuthProvider
from account_service.di.providers.profile_provider import ProfileProvider
from account_service.domain.repositories.user_repository import UserRepository


@pytest.fixture
def mock_register_use_case():
    return AsyncMock(spec=RegisterUserUseCase)


@pytest.fixture
def mock_login_use_case():
    return AsyncMock(spec=LoginUserUseCase)


@pytest.fixture
def mock_get_profile_use_case():
    return AsyncMock(spec=GetProfileUseCase)


@pytest.fixture
def mock_update_profile_use_case():
    return AsyncMock(spec=UpdateProfileUseCase)


@pytest.fixture
def mock_container(
    mock_register_use_case,
    mock_login_use_case,
    mock_get_profile_use_case,
    mock_update_profile_use_case,
):
    container = MagicMock()
    container.get.side_effect = lambda cls: {
        RegisterUserUseCase: mock_register_use_case,
        LoginUserUseCase: mock_login_use_case,
        GetProfileUseCase: mock_get_profile_use_case,
        UpdateProfileUseCase: mock_update_profile_use_case,
        UserRepository: AsyncMock(spec=UserRepository),
    }.get(cls, None)
    return container


def _client_for(container):
    from account_service.main import app

    with patch("account_service.main.get_container", return_value=container), \
            patch("account_service.api.v1.auth_controller.get_container", return_value=container), \
            patch("account_service.api.v1.profile_controller.get_container", return_value=container):
        with TestClient(app) as c:
            yield c


@pytest.fixture
def client(mock_container):
    """Create test client with mocked container."""
    yield from _client_for(mock_container)


@pytest.fixture
def wired_container(in_memory_user_repo, token_service):
    """Container with the real use cases over an in-memory store and a fake-clock token service."""
    container = BaseContainer()
    container.register_singleton(UserRepository, in_memory_user_repo)
    container.register_singleton(TokenService, token_service)
    AuthProvider.register(container)
    ProfileProvider.register(container)
    return container


@pytest.fixture
def wired_client(wired_container):
    yield from _client_for(wired_container)
