"""Demo data seeding.

Writes the demo account and its sample clients, products, invoices,
payments and templates once. A marker key records that seeding happened,
so repeated ``initialize()`` calls leave user changes alone.
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from bookkeeper.application.interfaces import KeyValueStore, RecordRepository
from bookkeeper.application.services.user_service import hash_password
from bookkeeper.domain.invoice_totals import calculate_totals

logger = logging.getLogger(__name__)

_INITIALIZED_VALUE = b"true"


def load_seed_file(path: Path) -> dict[str, list[dict[str, Any]]]:
    """Load the seed YAML: one top-level list per collection name."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Seed file {path} must contain a mapping of collections")
    return data


def _prepare_user(row: dict[str, Any]) -> dict[str, Any]:
    row = dict(row)
    password = row.pop("password", None)
    if password is not None:
        row["password_hash"] = hash_password(password)
    return row


def _prepare_invoice(row: dict[str, Any]) -> dict[str, Any]:
    totals = calculate_totals(row.get("items", []))
    return {**row, "subtotal": totals.subtotal, "tax": totals.tax, "total": totals.total}


_PREPARERS = {
    "users": _prepare_user,
    "invoices": _prepare_invoice,
}


class SeedService:
    def __init__(
        self,
        kv: KeyValueStore,
        collections: Mapping[str, RecordRepository],
        initialized_key: str,
        reset_keys: tuple[str, ...] = (),
    ):
        self._kv = kv
        self._collections = collections
        self._initialized_key = initialized_key
        self._reset_keys = reset_keys

    def is_initialized(self) -> bool:
        return self._kv.get(self._initialized_key) is not None

    def initialize(self, seed_file: Path) -> bool:
        """Seed the store unless already done. Returns whether data was written."""
        if self.is_initialized():
            logger.debug("Demo data already present, skipping seed")
            return False

        data = load_seed_file(seed_file)
        for name, store in self._collections.items():
            prepare = _PREPARERS.get(name)
            rows = data.get(name) or []
            if prepare is not None:
                rows = [prepare(row) for row in rows]
            store.replace_all(rows)
            logger.debug("Seeded %d %s", len(rows), name)

        self._kv.set(self._initialized_key, _INITIALIZED_VALUE)
        logger.info("Seeded demo data from %s", seed_file)
        return True

    def reset(self) -> None:
        """Drop all seeded collections and the marker."""
        for key in (*self._reset_keys, self._initialized_key):
            self._kv.delete(key)
        logger.info("Cleared demo data")
