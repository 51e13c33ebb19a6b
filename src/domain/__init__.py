from .base import BaseModel, utcnow
from .company import Company
from .client import Client
from .catalog_item import CatalogItem
from .address import AddressType, ClientAddress, InvoiceAddress
from .invoice import Invoice, InvoiceStatus
from .invoice_line import InvoiceLine
from .invoice_counter import InvoiceCounter

__all__ = [
    "BaseModel",
    "utcnow",
    "Company",
    "Client",
    "CatalogItem",
    "AddressType",
    "ClientAddress",
    "InvoiceAddress",
    "Invoice",
    "InvoiceStatus",
    "InvoiceLine",
    "InvoiceCounter",
]
