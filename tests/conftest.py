"""
Shared pytest fixtures for account service tests.
"""
from typing import Dict, Sequence
from unittest.mock import AsyncMock

import pytest

from account_service.core import config
from account_service.core.exceptions import ConflictError, NotFoundError, PersistenceError
from account_service.core.tokens import TokenService
from account_service.domain.models.user import User, ProfilePatch
from account_service.domain.repositories.user_repository import UserRepository

TEST_SECRET_KEY = "test_jwt_secret_key_for_testing_only_0123456789"
START_TIME = 1_700_000_000


@pytest.fixture(autouse=True)
def fast_settings(monkeypatch):
    """Use a cheap bcrypt work factor and a fresh Settings instance per test."""
    monkeypatch.setenv("BCRYPT_ROUNDS", "4")
    monkeypatch.setenv("JWT_SECRET_KEY", TEST_SECRET_KEY)
    monkeypatch.setattr(config, "_settings", None)
    yield
    monkeypatch.setattr(config, "_settings", None)


class FakeClock:
    """Callable clock whose time only moves when told to."""

    def __init__(self, now: float = START_TIME) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def secret_key():
    return TEST_SECRET_KEY


@pytest.fixture
def token_service(secret_key, clock):
    return TokenService(secret_key=secret_key, clock=clock)


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    repo = AsyncMock()
    return repo


class InMemoryUserRepository(UserRepository):
    """Dict-backed user store with the same error contract as the Mongo one."""

    def __init__(self) -> None:
        self.users: Dict[int, User] = {}
        self._next_id = 1
        self.fail_increments = False

    async def create_user(self, user: User) -> int:
        if await self.check_phone_number_exists(user.phone_number):
            raise PersistenceError("Phone number is already registered")
        user_id = self._next_id
        self._next_id += 1
        self.users[user_id] = User(
            id=user_id,
            phone_number=user.phone_number,
            full_name=user.full_name,
            hashed_password=user.hashed_password,
            successful_logins=user.successful_logins,
        )
        return user_id

    async def get_user_by_phone_number(self, phone_number: str) -> User:
        for user in self.users.values():
            if user.phone_number == phone_number:
                return user
        raise NotFoundError("User not found")

    async def get_user_by_id(self, user_id: int) -> User:
        if user_id not in self.users:
            raise NotFoundError("User not found")
        return self.users[user_id]

    async def check_phone_number_exists(self, phone_number: str) -> bool:
        return any(user.phone_number == phone_number for user in self.users.values())

    async def increment_successful_logins(self, user_id: int) -> None:
        if self.fail_increments:
            raise PersistenceError("store unavailable")
        user = await self.get_user_by_id(user_id)
        user.successful_logins += 1

    async def update_user_profile(self, user_id: int, patches: Sequence[ProfilePatch]) -> None:
        if not patches:
            raise ValueError("At least one profile patch is required")
        user = await self.get_user_by_id(user_id)
        for patch in patches:
            if patch.field.value == "phone_number":
                owner = next(
                    (u for u in self.users.values() if u.phone_number == patch.value), None
                )
                if owner is not None and owner.id != user_id:
                    raise ConflictError("Phone number already exists")
            setattr(user, patch.field.value, patch.value)


@pytest.fixture
def in_memory_user_repo():
    return InMemoryUserRepository()
