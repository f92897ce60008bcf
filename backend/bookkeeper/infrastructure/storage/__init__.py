from .factory import MEMORY_URL, open_store
from .keys import StorageKeys
from .memory_store import InMemoryKeyValueStore
from .record_store import KeyValueRecordStore

__all__ = [
    "MEMORY_URL",
    "open_store",
    "StorageKeys",
    "InMemoryKeyValueStore",
    "KeyValueRecordStore",
]
