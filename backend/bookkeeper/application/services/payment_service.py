"""Application service (use case) for Payment operations."""

import logging

from bookkeeper.application.interfaces import RecordRepository
from bookkeeper.application.schemas import PaymentCreate
from bookkeeper.domain.entities import Invoice, InvoiceStatus, Payment
from bookkeeper.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

# Balances within half a cent count as settled.
_SETTLED_EPSILON = 0.005


class PaymentService:
    """Records payments against invoices and keeps the Paid status in step.

    An invoice becomes Paid once its balance due reaches zero, and drops
    back to Pending when deleting a payment reopens the balance.
    """

    def __init__(
        self,
        repository: RecordRepository[Payment],
        invoices: RecordRepository[Invoice],
    ):
        self._repository = repository
        self._invoices = invoices

    def get_payment(self, payment_id: str) -> Payment:
        payment = self._repository.get_by_id(payment_id)
        if payment is None:
            raise EntityNotFoundError("Payment", payment_id)
        return payment

    def list_payments(
        self,
        user_id: str,
        *,
        invoice_id: str | None = None,
        search: str | None = None,
    ) -> list[Payment]:
        payments = self._repository.get_all(user_id)
        if invoice_id is not None:
            payments = [p for p in payments if p.invoice_id == invoice_id]
        if search:
            needle = search.lower()
            payments = [
                p for p in payments
                if needle in p.invoice_number.lower() or needle in p.client_name.lower()
            ]
        return payments

    def amount_paid(self, invoice: Invoice) -> float:
        return sum(
            p.amount
            for p in self._repository.get_all(invoice.user_id)
            if p.invoice_id == invoice.id
        )

    def balance_due(self, invoice_id: str) -> float:
        invoice = self._get_invoice(invoice_id)
        return invoice.total - self.amount_paid(invoice)

    def record_payment(self, user_id: str, data: PaymentCreate) -> Payment:
        invoice = self._get_invoice(data.invoice_id)
        payment = self._repository.create(
            {
                **data.model_dump(),
                "user_id": user_id,
                "invoice_number": invoice.number,
                "client_name": invoice.client_name,
            }
        )
        balance = invoice.total - self.amount_paid(invoice)
        if balance <= _SETTLED_EPSILON and invoice.status != InvoiceStatus.PAID:
            self._invoices.update(invoice.id, {"status": InvoiceStatus.PAID})
            logger.info("Invoice %s settled by payment %s", invoice.number, payment.id)
        return payment

    def delete_payment(self, payment_id: str) -> bool:
        payment = self.get_payment(payment_id)
        self._repository.delete(payment_id)

        invoice = self._invoices.get_by_id(payment.invoice_id)
        if invoice is not None and invoice.status == InvoiceStatus.PAID:
            if invoice.total - self.amount_paid(invoice) > _SETTLED_EPSILON:
                self._invoices.update(invoice.id, {"status": InvoiceStatus.PENDING})
                logger.info("Invoice %s reopened after deleting payment %s", invoice.number, payment_id)
        return True

    def _get_invoice(self, invoice_id: str) -> Invoice:
        invoice = self._invoices.get_by_id(invoice_id)
        if invoice is None:
            raise EntityNotFoundError("Invoice", invoice_id)
        return invoice
