"""Dashboard figures derived from a user's invoices and clients."""

from dataclasses import dataclass

from bookkeeper.application.interfaces import RecordRepository
from bookkeeper.domain.entities import Client, ClientStatus, Invoice, InvoiceStatus

_OUTSTANDING = (InvoiceStatus.PENDING, InvoiceStatus.OVERDUE)


@dataclass(frozen=True)
class DashboardStats:
    total_revenue: float
    total_invoices: int
    outstanding: float
    overdue_count: int
    active_clients: int


@dataclass(frozen=True)
class ClientStats:
    total_revenue: float
    invoice_count: int


class StatsService:
    def __init__(
        self,
        invoices: RecordRepository[Invoice],
        clients: RecordRepository[Client],
    ):
        self._invoices = invoices
        self._clients = clients

    def dashboard_stats(self, user_id: str) -> DashboardStats:
        """Revenue counts Paid invoices; outstanding counts Pending and Overdue."""
        invoices = self._invoices.get_all(user_id)
        clients = self._clients.get_all(user_id)
        return DashboardStats(
            total_revenue=sum(i.total for i in invoices if i.status == InvoiceStatus.PAID),
            total_invoices=len(invoices),
            outstanding=sum(i.total for i in invoices if i.status in _OUTSTANDING),
            overdue_count=sum(1 for i in invoices if i.status == InvoiceStatus.OVERDUE),
            active_clients=sum(1 for c in clients if c.status == ClientStatus.ACTIVE),
        )

    def client_stats(self, user_id: str, client_id: str) -> ClientStats:
        invoices = [i for i in self._invoices.get_all(user_id) if i.client_id == client_id]
        return ClientStats(
            total_revenue=sum(i.total for i in invoices if i.status == InvoiceStatus.PAID),
            invoice_count=len(invoices),
        )
