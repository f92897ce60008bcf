"""Domain entity — a registered account."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from bookkeeper.domain.identifiers import generate_id, utc_now


class PlanType(str, Enum):
    FREE = "free"
    PRO = "pro"
    BUSINESS = "business"


@dataclass
class User:
    """An account that owns clients, products, invoices, payments and templates.

    Users are the one entity without a ``user_id``; every other collection
    is scoped by the ``id`` of a User.
    """

    name: str
    email: str
    password_hash: str
    plan: PlanType = PlanType.FREE
    business_name: str | None = None
    id: str = field(default_factory=generate_id)
    created_at: datetime = field(default_factory=utc_now)
