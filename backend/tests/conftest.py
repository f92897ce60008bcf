"""Shared fixtures: a fresh in-memory store and services per test."""

import pytest

from bookkeeper.infrastructure.dependencies import ServiceContainer, build_services
from bookkeeper.infrastructure.storage import InMemoryKeyValueStore, StorageKeys


@pytest.fixture
def kv() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def keys() -> StorageKeys:
    return StorageKeys.with_prefix("test_")


@pytest.fixture
def services(kv: InMemoryKeyValueStore, keys: StorageKeys) -> ServiceContainer:
    return build_services(kv, keys)
