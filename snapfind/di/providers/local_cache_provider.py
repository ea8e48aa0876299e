from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...infrastructure.local.key_value_store import JsonFileKeyValueStore, KeyValueStore
from ...infrastructure.local.object_cache import LocalObjectCache

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class LocalCacheProvider:
    """
    One key-value store and one cache per process. The cache owns the write
    mutex, so every use case must share the same instance.
    """

    @staticmethod
    def register(container: "BaseContainer") -> None:
        store = JsonFileKeyValueStore(get_settings().local_cache_path)
        container.register_singleton(KeyValueStore, store)
        container.register_singleton(LocalObjectCache, LocalObjectCache(store))
