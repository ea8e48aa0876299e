"""On-device persistence: key-value store, write mutex and object cache"""

from .key_value_store import KeyValueStore, JsonFileKeyValueStore
from .mutex import BusyWaitMutex
from .object_cache import LocalObjectCache

__all__ = [
    "KeyValueStore",
    "JsonFileKeyValueStore",
    "BusyWaitMutex",
    "LocalObjectCache",
]
