"""Domain entities — invoices and their embedded line items."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum

from bookkeeper.domain.identifiers import generate_id, utc_now


class InvoiceStatus(str, Enum):
    """Closed set of invoice states. Transitions are not constrained."""

    DRAFT = "Draft"
    PENDING = "Pending"
    PAID = "Paid"
    OVERDUE = "Overdue"


@dataclass
class InvoiceItem:
    """One billed line. Embedded in an Invoice, never stored on its own."""

    name: str
    quantity: float = 1
    price: float = 0.0
    tax_rate: float = 0.0
    product_id: str | None = None
    description: str | None = None


@dataclass
class Invoice:
    """A bill sent to a client.

    ``subtotal``, ``tax`` and ``total`` are derived from ``items`` by
    ``calculate_totals`` and are rewritten whenever the items change.
    ``client_name`` and ``client_email`` are snapshots taken when the
    invoice is created.
    """

    user_id: str
    client_id: str
    number: str
    date: date
    due_date: date
    items: list[InvoiceItem] = field(default_factory=list)
    subtotal: float = 0.0
    tax: float = 0.0
    total: float = 0.0
    status: InvoiceStatus = InvoiceStatus.DRAFT
    client_name: str = ""
    client_email: str = ""
    template_id: str | None = None
    notes: str | None = None
    id: str = field(default_factory=generate_id)
    created_at: datetime = field(default_factory=utc_now)
