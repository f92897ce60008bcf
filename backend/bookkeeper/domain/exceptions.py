"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class StoreCorruptError(Exception):
    """Raised when a persisted collection blob cannot be decoded.

    The original decoding error is chained as ``__cause__``.
    """

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"Stored collection '{key}' is corrupt: {reason}")


class AuthenticationError(Exception):
    """Raised when credentials do not match a registered user."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Invalid credentials for '{email}'")
