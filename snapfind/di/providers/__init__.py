from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .local_cache_provider import LocalCacheProvider
from .services_provider import ServicesProvider
from .auth_provider import AuthProvider
from .objects_provider import ObjectsProvider
from .sync_provider import SyncProvider
from .pictures_provider import PicturesProvider
from .images_provider import ImagesProvider

__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "LocalCacheProvider",
    "ServicesProvider",
    "AuthProvider",
    "ObjectsProvider",
    "SyncProvider",
    "PicturesProvider",
    "ImagesProvider",
]
