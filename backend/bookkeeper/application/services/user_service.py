"""Application service for accounts: registration, login and the current-user pointer."""

import logging

import bcrypt
from pydantic import TypeAdapter, ValidationError

from bookkeeper.application.interfaces import KeyValueStore, RecordRepository
from bookkeeper.application.schemas import UserCreate
from bookkeeper.domain.entities import User
from bookkeeper.domain.exceptions import (
    AuthenticationError,
    DuplicateEntityError,
    StoreCorruptError,
)

logger = logging.getLogger(__name__)

_user_adapter = TypeAdapter(User)


def hash_password(password: str) -> str:
    """Hash a plaintext password with bcrypt. Returns the hash string."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        logger.warning("Stored password hash is not a bcrypt hash")
        return False


class UserService:
    def __init__(
        self,
        repository: RecordRepository[User],
        kv: KeyValueStore,
        users_key: str,
        current_user_key: str,
    ):
        self._repository = repository
        self._kv = kv
        self._users_key = users_key
        self._current_user_key = current_user_key

    def get_by_email(self, email: str) -> User | None:
        email = email.strip().lower()
        return next((u for u in self._repository.all() if u.email == email), None)

    def register(self, data: UserCreate) -> User:
        email = data.email.strip().lower()
        password_hash = hash_password(data.password)
        # Uniqueness check and insert must see the same collection state.
        with self._kv.lock(self._users_key):
            if self.get_by_email(email) is not None:
                raise DuplicateEntityError("User", "email", email)
            user = self._repository.create(
                {
                    "name": data.name,
                    "email": email,
                    "password_hash": password_hash,
                    "business_name": data.business_name,
                    "plan": data.plan,
                }
            )
        logger.info("Registered user %s", user.id)
        return user

    def authenticate(self, email: str, password: str) -> User:
        user = self.get_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            logger.warning("Failed login for %s", email)
            raise AuthenticationError(email)
        return user

    def login(self, email: str, password: str) -> User:
        """Authenticate and remember the user as the current session."""
        user = self.authenticate(email, password)
        self.set_current_user(user)
        return user

    def logout(self) -> None:
        self.set_current_user(None)

    # ── Current-user pointer ────────────────────────────────────────

    def get_current_user(self) -> User | None:
        blob = self._kv.get(self._current_user_key)
        if blob is None:
            return None
        try:
            return _user_adapter.validate_json(blob)
        except ValidationError as exc:
            raise StoreCorruptError(self._current_user_key, "undecodable user") from exc

    def set_current_user(self, user: User | None) -> None:
        if user is None:
            self._kv.delete(self._current_user_key)
        else:
            self._kv.set(self._current_user_key, _user_adapter.dump_json(user))
