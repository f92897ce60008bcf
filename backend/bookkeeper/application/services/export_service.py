"""CSV export of invoices, clients and payments.

Free-plan users get branding lines above and below the data.
"""

import csv
import io
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import asdict, is_dataclass
from datetime import date
from enum import Enum
from typing import Any

from bookkeeper.domain.entities import Client, Invoice, Payment, PlanType, User

BRANDING_TEXT = "Powered by IEOSUIA - Professional Invoicing"
BRANDING_URL = "https://ieosuia.com"

Column = tuple[str, str]  # (field key, header label)

INVOICE_COLUMNS: tuple[Column, ...] = (
    ("number", "Invoice #"),
    ("client_name", "Client"),
    ("date", "Date"),
    ("due_date", "Due Date"),
    ("subtotal", "Subtotal"),
    ("tax", "Tax"),
    ("total", "Total"),
    ("status", "Status"),
)
CLIENT_COLUMNS: tuple[Column, ...] = (
    ("name", "Name"),
    ("email", "Email"),
    ("phone", "Phone"),
    ("company", "Company"),
    ("status", "Status"),
)
PAYMENT_COLUMNS: tuple[Column, ...] = (
    ("invoice_number", "Invoice #"),
    ("client_name", "Client"),
    ("amount", "Amount"),
    ("method", "Method"),
    ("date", "Date"),
)


def is_free_plan(user: User | None) -> bool:
    return user is None or user.plan == PlanType.FREE


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def _as_row(item: Any) -> Mapping[str, Any]:
    if is_dataclass(item) and not isinstance(item, type):
        return asdict(item)
    return item


class ExportService:
    """Renders rows as fully-quoted CSV text."""

    def __init__(self, today: date | None = None):
        self._today = today

    def generate_csv(
        self,
        rows: Iterable[Any],
        columns: Sequence[Column],
        user: User | None,
        title: str | None = None,
    ) -> str:
        free = is_free_plan(user)
        buffer = io.StringIO()
        writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")

        if free:
            writer.writerow([BRANDING_TEXT])
            writer.writerow([BRANDING_URL])
            writer.writerow([])
        if title:
            generated = self._today or date.today()
            writer.writerow([title])
            writer.writerow([f"Generated: {generated.isoformat()}"])
            writer.writerow([])

        writer.writerow([label for _, label in columns])
        for item in rows:
            row = _as_row(item)
            writer.writerow([_cell(row.get(key)) for key, _ in columns])

        if free:
            writer.writerow([])
            writer.writerow([BRANDING_TEXT])
        return buffer.getvalue()

    def invoices_csv(self, invoices: Iterable[Invoice], user: User | None) -> str:
        return self.generate_csv(invoices, INVOICE_COLUMNS, user, title="Invoices")

    def clients_csv(self, clients: Iterable[Client], user: User | None) -> str:
        return self.generate_csv(clients, CLIENT_COLUMNS, user, title="Clients")

    def payments_csv(self, payments: Iterable[Payment], user: User | None) -> str:
        return self.generate_csv(payments, PAYMENT_COLUMNS, user, title="Payments")
