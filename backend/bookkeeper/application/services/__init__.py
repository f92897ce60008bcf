from .client_service import ClientService
from .export_service import ExportService
from .invoice_service import InvoiceService
from .payment_service import PaymentService
from .product_service import ProductService
from .seed_service import SeedService
from .stats_service import ClientStats, DashboardStats, StatsService
from .template_service import TemplateService
from .user_service import UserService

__all__ = [
    "ClientService",
    "ExportService",
    "InvoiceService",
    "PaymentService",
    "ProductService",
    "SeedService",
    "ClientStats",
    "DashboardStats",
    "StatsService",
    "TemplateService",
    "UserService",
]
