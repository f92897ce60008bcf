from .key_value_store import KeyValueStore
from .record_repository import RecordRepository

__all__ = [
    "KeyValueStore",
    "RecordRepository",
]
