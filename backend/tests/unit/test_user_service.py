"""Unit tests for the UserService."""

import threading

import pytest

from bookkeeper.application.schemas import UserCreate
from bookkeeper.application.services.user_service import hash_password, verify_password
from bookkeeper.domain.entities import PlanType, User
from bookkeeper.domain.exceptions import (
    AuthenticationError,
    DuplicateEntityError,
    StoreCorruptError,
)
from bookkeeper.infrastructure.storage import KeyValueRecordStore


def _register(services, email: str = "Jane@Example.com"):
    return services.users.register(
        UserCreate(name="Jane", email=email, password="secret1", business_name="Jane Co")
    )


def test_register_stores_hashed_password(services):
    user = _register(services)

    assert user.email == "jane@example.com"
    assert user.plan == PlanType.FREE
    assert user.password_hash != "secret1"
    assert verify_password("secret1", user.password_hash)


def test_register_duplicate_email(services):
    _register(services)
    with pytest.raises(DuplicateEntityError):
        _register(services, email="jane@example.com")


def test_authenticate(services):
    user = _register(services)
    assert services.users.authenticate("JANE@example.com", "secret1") == user
    with pytest.raises(AuthenticationError):
        services.users.authenticate("jane@example.com", "wrong")
    with pytest.raises(AuthenticationError):
        services.users.authenticate("nobody@example.com", "secret1")


def test_login_sets_current_user_and_logout_clears(services):
    assert services.users.get_current_user() is None
    user = _register(services)

    services.users.login("jane@example.com", "secret1")
    assert services.users.get_current_user() == user

    services.users.logout()
    assert services.users.get_current_user() is None


def test_corrupt_current_user_pointer(services, kv, keys):
    kv.set(keys.current_user, b"garbage")
    with pytest.raises(StoreCorruptError):
        services.users.get_current_user()


def test_password_hash_is_salted_bcrypt():
    first = hash_password("same")
    assert first.startswith("$2")
    assert first != hash_password("same")
    assert verify_password("same", first)
    assert not verify_password("other", first)


def test_non_bcrypt_hash_never_verifies():
    assert not verify_password("secret1", "abc$deadbeef")


def test_concurrent_registrations_keep_email_unique(services, kv, keys):
    errors: list[Exception] = []

    def worker():
        try:
            _register(services, email="race@example.com")
        except DuplicateEntityError as exc:
            errors.append(exc)

    threads = [threading.Thread(target=worker) for _ in range(5)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    users = KeyValueRecordStore(kv, keys.users, User).all()
    matching = [u for u in users if u.email == "race@example.com"]
    assert len(matching) == 1
    assert len(errors) == 4
