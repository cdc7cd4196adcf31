from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Binds the UserRepository interface to its MongoDB implementation"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        user_repository = MongoUserRepository(
            user_collection=container.get("user_collection"),
            counter_collection=container.get("counter_collection"),
        )
        container.register_singleton(UserRepository, user_repository)
