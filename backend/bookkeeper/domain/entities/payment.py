"""Domain entity — money received against an invoice."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum

from bookkeeper.domain.identifiers import generate_id, utc_now


class PaymentMethod(str, Enum):
    BANK_TRANSFER = "Bank Transfer"
    CREDIT_CARD = "Credit Card"
    CASH = "Cash"
    PAYPAL = "PayPal"
    OTHER = "Other"


@dataclass
class Payment:
    user_id: str
    invoice_id: str
    amount: float
    method: PaymentMethod
    date: date
    invoice_number: str = ""
    client_name: str = ""
    notes: str | None = None
    id: str = field(default_factory=generate_id)
    created_at: datetime = field(default_factory=utc_now)
