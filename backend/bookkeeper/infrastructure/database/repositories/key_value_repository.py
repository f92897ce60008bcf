"""Concrete key-value store backed by SQLAlchemy."""

import logging

from sqlalchemy import Engine

from bookkeeper.application.interfaces import KeyValueStore
from bookkeeper.infrastructure.database.base import Base
from bookkeeper.infrastructure.database.models import KeyValueEntryModel
from bookkeeper.infrastructure.database.session import create_session_factory

logger = logging.getLogger(__name__)


class SQLAlchemyKeyValueStore(KeyValueStore):
    """Implements the KeyValueStore port with one row per key in 'kv_entries'.

    Each call runs in its own short session; ``set`` and ``delete`` commit
    before returning.
    """

    def __init__(self, engine: Engine):
        super().__init__()
        self._engine = engine
        self._session_factory = create_session_factory(engine)
        Base.metadata.create_all(engine)

    def get(self, key: str) -> bytes | None:
        with self._session_factory() as session:
            model = session.get(KeyValueEntryModel, key)
            return bytes(model.value) if model else None

    def set(self, key: str, value: bytes) -> None:
        with self._session_factory.begin() as session:
            model = session.get(KeyValueEntryModel, key)
            if model is None:
                session.add(KeyValueEntryModel(key=key, value=bytes(value)))
            else:
                model.value = bytes(value)

    def delete(self, key: str) -> bool:
        with self._session_factory.begin() as session:
            model = session.get(KeyValueEntryModel, key)
            if model is None:
                return False
            session.delete(model)
            return True

    def close(self) -> None:
        self._engine.dispose()
        logger.debug("Disposed engine for %s", self._engine.url)
