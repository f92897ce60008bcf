"""Domain entity — an invoice layout template."""

from dataclasses import dataclass, field
from datetime import datetime

from bookkeeper.domain.identifiers import generate_id, utc_now


@dataclass
class Template:
    user_id: str
    name: str
    description: str = ""
    is_default: bool = False
    id: str = field(default_factory=generate_id)
    created_at: datetime = field(default_factory=utc_now)
