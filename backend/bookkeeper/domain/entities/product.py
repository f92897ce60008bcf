"""Domain entity — a billable product or service."""

from dataclasses import dataclass, field
from datetime import datetime

from bookkeeper.domain.identifiers import generate_id, utc_now


@dataclass
class Product:
    user_id: str
    name: str
    price: float
    tax_rate: float = 0.0
    description: str = ""
    category: str = ""
    id: str = field(default_factory=generate_id)
    created_at: datetime = field(default_factory=utc_now)
