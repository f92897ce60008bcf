from .user import User, PlanType
from .client import Client, ClientStatus
from .product import Product
from .invoice import Invoice, InvoiceItem, InvoiceStatus
from .payment import Payment, PaymentMethod
from .template import Template

__all__ = [
    "User",
    "PlanType",
    "Client",
    "ClientStatus",
    "Product",
    "Invoice",
    "InvoiceItem",
    "InvoiceStatus",
    "Payment",
    "PaymentMethod",
    "Template",
]
