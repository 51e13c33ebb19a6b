from .company_repository import CompanyRepository
from .client_repository import ClientRepository
from .catalog_item_repository import CatalogItemRepository
from .client_address_repository import ClientAddressRepository
from .invoice_repository import InvoiceRepository
from .invoice_line_repository import InvoiceLineRepository
from .invoice_counter_repository import InvoiceCounterRepository
from .invoice_address_repository import InvoiceAddressRepository

__all__ = [
    "CompanyRepository",
    "ClientRepository",
    "CatalogItemRepository",
    "ClientAddressRepository",
    "InvoiceRepository",
    "InvoiceLineRepository",
    "InvoiceCounterRepository",
    "InvoiceAddressRepository",
]
