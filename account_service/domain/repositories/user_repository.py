from abc import ABC, abstractmethod
from typing import Sequence
from ..models.user import User, ProfilePatch


class UserRepository(ABC):
    """
    Repository interface - defines contract for user data access

    Implementations raise NotFoundError for lookup misses and
    PersistenceError for any other store failure.
    """

    @abstractmethod
    async def create_user(self, user: User) -> int:
        """Persist a new user and return the identifier assigned by the store"""
        pass

    @abstractmethod
    async def get_user_by_phone_number(self, phone_number: str) -> User:
        """Find user by phone number"""
        pass

    @abstractmethod
    async def get_user_by_id(self, user_id: int) -> User:
        """Find user by ID"""
        pass

    @abstractmethod
    async def check_phone_number_exists(self, phone_number: str) -> bool:
        """Tell whether any user already owns the phone number"""
        pass

    @abstractmethod
    async def increment_successful_logins(self, user_id: int) -> None:
        """Add one to the user's successful login counter"""
        pass

    @abstractmethod
    async def update_user_profile(self, user_id: int, patches: Sequence[ProfilePatch]) -> None:
        """Apply a partial profile update; patches must not be empty"""
        pass

    async def ensure_indexes(self) -> None:
        """Create store-side constraints. No-op unless the store needs it."""
        return None
