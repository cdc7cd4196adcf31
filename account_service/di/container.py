# Local application imports
from .base_container import BaseContainer
from .providers import (
    AuthProvider,
    DatabaseProvider,
    ProfileProvider,
    RepositoryProvider,
    SecurityProvider,
)


class DIContainer(BaseContainer):
    """
    Application container wiring the account service together.

    Providers run in dependency order: Mongo collections, then the user
    repository built on them, then the token service, then the use cases
    that consume both.
    """

    PROVIDERS = (
        DatabaseProvider,
        RepositoryProvider,
        SecurityProvider,
        AuthProvider,
        ProfileProvider,
    )

    def __init__(self) -> None:
        super().__init__()
        for provider in self.PROVIDERS:
            provider.register(self)


_container: DIContainer | None = None


def get_container() -> DIContainer:
    """Return the process-wide container, wiring it on first call"""
    global _container
    if _container is None:
        _container = DIContainer()
    return _container
