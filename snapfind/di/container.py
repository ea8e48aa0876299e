# Local application imports
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    RepositoryProvider,
    LocalCacheProvider,
    ServicesProvider,
    AuthProvider,
    ObjectsProvider,
    SyncProvider,
    PicturesProvider,
    ImagesProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.

    Registration order: database, repositories, local cache and external
    services, then the use cases that depend on them.
    """

    def __init__(self) -> None:
        super().__init__()
        self.setup()

    def setup(self) -> None:
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        LocalCacheProvider.register(self)
        ServicesProvider.register(self)

        AuthProvider.register(self)
        ObjectsProvider.register(self)
        SyncProvider.register(self)
        PicturesProvider.register(self)
        ImagesProvider.register(self)


_container: DIContainer | None = None


def get_container() -> DIContainer:
    """Get the global DI container instance (singleton pattern)"""
    global _container
    if _container is None:
        _container = DIContainer()
    return _container
