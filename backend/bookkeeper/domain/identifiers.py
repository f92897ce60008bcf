"""Identifier and timestamp helpers shared by all entities."""

import secrets
import string
from datetime import datetime, timezone

_ID_ALPHABET = string.ascii_lowercase + string.digits
ID_LENGTH = 13


def generate_id(length: int = ID_LENGTH) -> str:
    """Return a short random lowercase-alphanumeric token."""
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(length))


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
