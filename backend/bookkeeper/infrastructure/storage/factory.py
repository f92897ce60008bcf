"""Opens a key-value store handle from a URL."""

import logging

from bookkeeper.application.interfaces import KeyValueStore
from bookkeeper.infrastructure.database import create_store_engine
from bookkeeper.infrastructure.database.repositories import SQLAlchemyKeyValueStore
from bookkeeper.infrastructure.storage.memory_store import InMemoryKeyValueStore

logger = logging.getLogger(__name__)

MEMORY_URL = "memory://"


def open_store(url: str, echo: bool = False) -> KeyValueStore:
    """Open a store handle.

    ``memory://`` gives a fresh in-process store; any other value is treated
    as a SQLAlchemy database URL (e.g. ``sqlite:///data/bookkeeper.db``).
    """
    if url == MEMORY_URL:
        logger.debug("Opened in-memory key-value store")
        return InMemoryKeyValueStore()
    engine = create_store_engine(url, echo=echo)
    logger.info("Opened key-value store at %s", engine.url)
    return SQLAlchemyKeyValueStore(engine)
