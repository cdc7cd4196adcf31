from typing import TYPE_CHECKING
from ...infrastructure.db.mongo_connection import (
    get_counter_collection,
    get_user_collection,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Exposes the two Mongo collections the user store needs"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        # Motor connects lazily; nothing here touches the network
        container.register_singleton("user_collection", get_user_collection())
        container.register_singleton("counter_collection", get_counter_collection())
