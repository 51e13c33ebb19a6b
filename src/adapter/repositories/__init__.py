from .company_repository import SqlAlchemyCompanyRepository
from .client_repository import SqlAlchemyClientRepository
from .catalog_item_repository import SqlAlchemyCatalogItemRepository
from .client_address_repository import SqlAlchemyClientAddressRepository
from .invoice_repository import SqlAlchemyInvoiceRepository
from .invoice_line_repository import SqlAlchemyInvoiceLineRepository
from .invoice_counter_repository import SqlAlchemyInvoiceCounterRepository
from .invoice_address_repository import SqlAlchemyInvoiceAddressRepository

__all__ = [
    "SqlAlchemyCompanyRepository",
    "SqlAlchemyClientRepository",
    "SqlAlchemyCatalogItemRepository",
    "SqlAlchemyClientAddressRepository",
    "SqlAlchemyInvoiceRepository",
    "SqlAlchemyInvoiceLineRepository",
    "SqlAlchemyInvoiceCounterRepository",
    "SqlAlchemyInvoiceAddressRepository",
]
