from .client import ClientCreate, ClientUpdate
from .invoice import InvoiceCreate, InvoiceItemSchema, InvoiceUpdate
from .payment import PaymentCreate
from .product import ProductCreate, ProductUpdate
from .template import TemplateCreate, TemplateUpdate
from .user import UserCreate, UserLogin

__all__ = [
    "ClientCreate",
    "ClientUpdate",
    "InvoiceCreate",
    "InvoiceItemSchema",
    "InvoiceUpdate",
    "PaymentCreate",
    "ProductCreate",
    "ProductUpdate",
    "TemplateCreate",
    "TemplateUpdate",
    "UserCreate",
    "UserLogin",
]
