"""Invoicing use cases"""
from .ownership_validator import OwnershipValidator, OwnershipCheck
from .fiscal_year_sequencer import FiscalYearSequencer, AllocatedNumber
from .address_snapshot_resolver import AddressSnapshotResolver, AddressSnapshot
from .issue_invoice import IssueInvoice
from .preview_invoice_number import PreviewInvoiceNumber
from .list_invoices import ListInvoices
from .get_invoice import GetInvoice
from .render_invoice_pdf import RenderInvoicePdf
from .dtos import (
    InvoiceItemCommandDTO,
    IssueInvoiceCommandDTO,
    IssuedInvoiceDTO,
    InvoiceNumberPreviewDTO,
    ListInvoicesQueryDTO,
    InvoiceSummaryDTO,
    ListInvoicesResponseDTO,
    InvoiceLineDTO,
    InvoiceAddressDTO,
    InvoiceDetailDTO,
    InvoicePdfDTO,
)

__all__ = [
    "OwnershipValidator",
    "OwnershipCheck",
    "FiscalYearSequencer",
    "AllocatedNumber",
    "AddressSnapshotResolver",
    "AddressSnapshot",
    "IssueInvoice",
    "PreviewInvoiceNumber",
    "ListInvoices",
    "GetInvoice",
    "RenderInvoicePdf",
    "InvoiceItemCommandDTO",
    "IssueInvoiceCommandDTO",
    "IssuedInvoiceDTO",
    "InvoiceNumberPreviewDTO",
    "ListInvoicesQueryDTO",
    "InvoiceSummaryDTO",
    "ListInvoicesResponseDTO",
    "InvoiceLineDTO",
    "InvoiceAddressDTO",
    "InvoiceDetailDTO",
    "InvoicePdfDTO",
]
