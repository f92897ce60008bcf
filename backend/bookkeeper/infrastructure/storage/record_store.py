"""Record store — typed per-entity collections over a key-value store.

Storage layout:
    <key> → UTF-8 JSON array of every record of one entity type

Every mutation reads the whole collection, changes it in memory and writes
the whole collection back. The write cycle runs under the store handle's
lock for that key, so concurrent callers in one process serialize instead
of overwriting each other's changes.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from bookkeeper.application.interfaces import KeyValueStore, RecordRepository
from bookkeeper.domain.exceptions import StoreCorruptError
from bookkeeper.domain.identifiers import generate_id, utc_now

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Set once by the store and never taken from caller-supplied fields.
_IMMUTABLE_FIELDS = frozenset({"id", "created_at"})


class KeyValueRecordStore(RecordRepository[T]):
    """Implements the RecordRepository port on top of a KeyValueStore.

    Records are dataclass entities carrying ``id`` and ``created_at``;
    pydantic handles (de)serialization, including nested items.
    """

    def __init__(self, kv: KeyValueStore, key: str, entity_cls: type[T]):
        self._kv = kv
        self._key = key
        self._entity_cls = entity_cls
        self._adapter: TypeAdapter[T] = TypeAdapter(entity_cls)
        self._list_adapter: TypeAdapter[list[T]] = TypeAdapter(list[entity_cls])  # type: ignore[valid-type]

    @property
    def key(self) -> str:
        return self._key

    # ── Persistence ─────────────────────────────────────────────────

    def _load(self) -> list[T]:
        """Read and decode the whole collection. Absent key → empty list."""
        blob = self._kv.get(self._key)
        if blob is None:
            return []
        try:
            return self._list_adapter.validate_json(blob)
        except ValidationError as exc:
            raise StoreCorruptError(
                self._key, f"{exc.error_count()} decoding error(s)"
            ) from exc

    def _save(self, records: list[T]) -> None:
        self._kv.set(self._key, self._list_adapter.dump_json(records))

    def _build(self, fields: Mapping[str, Any]) -> T:
        return self._adapter.validate_python(dict(fields))

    # ── Queries ─────────────────────────────────────────────────────

    def get_all(self, user_id: str) -> list[T]:
        return [r for r in self._load() if getattr(r, "user_id", None) == user_id]

    def all(self) -> list[T]:
        return self._load()

    def get_by_id(self, record_id: str) -> T | None:
        for record in self._load():
            if record.id == record_id:  # type: ignore[attr-defined]
                return record
        return None

    # ── Mutations ───────────────────────────────────────────────────

    def create(self, fields: Mapping[str, Any]) -> T:
        data = {k: v for k, v in fields.items() if k not in _IMMUTABLE_FIELDS}
        with self._kv.lock(self._key):
            records = self._load()
            taken = {r.id for r in records}  # type: ignore[attr-defined]
            record_id = generate_id()
            while record_id in taken:
                record_id = generate_id()
            record = self._build({**data, "id": record_id, "created_at": utc_now()})
            records.append(record)
            self._save(records)
        logger.debug("Created %s in '%s'", record_id, self._key)
        return record

    def update(self, record_id: str, patch: Mapping[str, Any]) -> T | None:
        changes = {k: v for k, v in patch.items() if k not in _IMMUTABLE_FIELDS}
        with self._kv.lock(self._key):
            records = self._load()
            for index, record in enumerate(records):
                if record.id == record_id:  # type: ignore[attr-defined]
                    break
            else:
                return None
            merged = self._adapter.dump_python(record)
            merged.update(changes)
            updated = self._build(merged)
            records[index] = updated
            self._save(records)
        logger.debug("Updated %s in '%s' (%s)", record_id, self._key, ", ".join(changes))
        return updated

    def delete(self, record_id: str) -> bool:
        with self._kv.lock(self._key):
            records = self._load()
            remaining = [r for r in records if r.id != record_id]  # type: ignore[attr-defined]
            if len(remaining) == len(records):
                return False
            self._save(remaining)
        logger.debug("Deleted %s from '%s'", record_id, self._key)
        return True

    def replace_all(self, records: Iterable[T | Mapping[str, Any]]) -> None:
        """Overwrite the collection. Plain mappings are validated into entities."""
        validated = self._list_adapter.validate_python(list(records))
        with self._kv.lock(self._key):
            self._save(validated)
        logger.debug("Replaced '%s' with %d record(s)", self._key, len(validated))
