"""Domain entity — a customer being invoiced."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from bookkeeper.domain.identifiers import generate_id, utc_now


class ClientStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


@dataclass
class Client:
    user_id: str
    name: str
    email: str = ""
    phone: str = ""
    company: str = ""
    address: str | None = None
    status: ClientStatus = ClientStatus.ACTIVE
    id: str = field(default_factory=generate_id)
    created_at: datetime = field(default_factory=utc_now)
