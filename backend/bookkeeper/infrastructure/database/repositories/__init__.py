from .key_value_repository import SQLAlchemyKeyValueStore

__all__ = [
    "SQLAlchemyKeyValueStore",
]
