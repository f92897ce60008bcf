"""Abstract key-value store interface (port) — the durable byte substrate."""

import threading
from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """Port for a byte-oriented key-value store — implemented in the infrastructure layer.

    A store handle is opened once and passed explicitly to every component
    that persists data. It also owns one re-entrant lock per key so that
    read-modify-write cycles on the same key can be serialized.
    """

    def __init__(self) -> None:
        self._locks: dict[str, threading.RLock] = {}
        self._locks_guard = threading.Lock()

    @abstractmethod
    def get(self, key: str) -> bytes | None:
        """Return the value stored under key, or None if absent."""
        ...

    @abstractmethod
    def set(self, key: str, value: bytes) -> None:
        """Store value under key, replacing any previous value."""
        ...

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Remove key. Returns True if it existed."""
        ...

    def close(self) -> None:
        """Release any resources held by the store."""

    def lock(self, key: str) -> threading.RLock:
        """Return the lock guarding writes to key."""
        with self._locks_guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = self._locks[key] = threading.RLock()
            return lock

    def __enter__(self) -> "KeyValueStore":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
