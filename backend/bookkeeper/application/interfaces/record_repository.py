"""Abstract repository interface (port) for user-scoped record collections."""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class RecordRepository(ABC, Generic[T]):
    """Port for per-entity-type CRUD — implemented in the infrastructure layer.

    Not-found is reported softly: ``get_by_id`` and ``update`` return None,
    ``delete`` returns False.
    """

    @abstractmethod
    def get_all(self, user_id: str) -> list[T]:
        """Return the records owned by user_id, in insertion order."""
        ...

    @abstractmethod
    def all(self) -> list[T]:
        """Return every record in the collection, regardless of owner."""
        ...

    @abstractmethod
    def get_by_id(self, record_id: str) -> T | None:
        """Retrieve a single record by id. Not scoped by owner."""
        ...

    @abstractmethod
    def create(self, fields: Mapping[str, Any]) -> T:
        """Assign id and created_at, persist the record and return it."""
        ...

    @abstractmethod
    def update(self, record_id: str, patch: Mapping[str, Any]) -> T | None:
        """Shallow-merge patch over an existing record. Returns None if not found."""
        ...

    @abstractmethod
    def delete(self, record_id: str) -> bool:
        """Delete a record. Returns True if deleted, False if not found."""
        ...

    @abstractmethod
    def replace_all(self, records: Iterable[T | Mapping[str, Any]]) -> None:
        """Overwrite the whole collection."""
        ...
