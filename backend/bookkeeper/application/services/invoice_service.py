"""Application service (use case) for Invoice operations.

Totals are always derived from the line items via ``calculate_totals``;
callers can change items but never the totals themselves.
"""

import logging
import re
from typing import Any

from bookkeeper.application.interfaces import RecordRepository
from bookkeeper.application.schemas import InvoiceCreate, InvoiceUpdate
from bookkeeper.domain.entities import Client, Invoice, InvoiceStatus
from bookkeeper.domain.exceptions import EntityNotFoundError
from bookkeeper.domain.invoice_totals import InvoiceTotals, calculate_totals

logger = logging.getLogger(__name__)

NUMBER_PREFIX = "INV-"
_NUMBER_RE = re.compile(rf"^{NUMBER_PREFIX}(\d+)$")


def _totals_fields(totals: InvoiceTotals) -> dict[str, float]:
    return {"subtotal": totals.subtotal, "tax": totals.tax, "total": totals.total}


class InvoiceService:
    """Orchestrates invoice CRUD logic. Depends on the repository ports (DI)."""

    def __init__(
        self,
        repository: RecordRepository[Invoice],
        clients: RecordRepository[Client],
    ):
        self._repository = repository
        self._clients = clients

    def get_invoice(self, invoice_id: str) -> Invoice:
        invoice = self._repository.get_by_id(invoice_id)
        if invoice is None:
            raise EntityNotFoundError("Invoice", invoice_id)
        return invoice

    def list_invoices(
        self,
        user_id: str,
        *,
        status: InvoiceStatus | None = None,
        client_id: str | None = None,
    ) -> list[Invoice]:
        invoices = self._repository.get_all(user_id)
        if status is not None:
            invoices = [i for i in invoices if i.status == status]
        if client_id is not None:
            invoices = [i for i in invoices if i.client_id == client_id]
        return invoices

    def next_number(self, user_id: str) -> str:
        """Return the next ``INV-NNN`` number for a user (max existing + 1)."""
        highest = 0
        for invoice in self._repository.get_all(user_id):
            match = _NUMBER_RE.match(invoice.number)
            if match:
                highest = max(highest, int(match.group(1)))
        return f"{NUMBER_PREFIX}{highest + 1:03d}"

    def create_invoice(self, user_id: str, data: InvoiceCreate) -> Invoice:
        fields = data.model_dump()
        fields.update(self._client_snapshot(data.client_id))
        fields.update(_totals_fields(calculate_totals(data.items)))
        fields["user_id"] = user_id
        fields["number"] = self.next_number(user_id)
        invoice = self._repository.create(fields)
        logger.debug("Created invoice %s (%s) total=%s", invoice.number, invoice.id, invoice.total)
        return invoice

    def update_invoice(self, invoice_id: str, data: InvoiceUpdate) -> Invoice:
        patch: dict[str, Any] = data.model_dump(exclude_unset=True, exclude_none=True)
        if data.items is not None:
            patch.update(_totals_fields(calculate_totals(data.items)))
        if data.client_id is not None:
            patch.update(self._client_snapshot(data.client_id))
        updated = self._repository.update(invoice_id, patch)
        if updated is None:
            raise EntityNotFoundError("Invoice", invoice_id)
        return updated

    def set_status(self, invoice_id: str, status: InvoiceStatus) -> Invoice:
        return self.update_invoice(invoice_id, InvoiceUpdate(status=status))

    def delete_invoice(self, invoice_id: str) -> bool:
        if not self._repository.delete(invoice_id):
            raise EntityNotFoundError("Invoice", invoice_id)
        return True

    def _client_snapshot(self, client_id: str) -> dict[str, str]:
        client = self._clients.get_by_id(client_id)
        if client is None:
            raise EntityNotFoundError("Client", client_id)
        return {"client_name": client.name, "client_email": client.email}
