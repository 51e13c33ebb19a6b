"""PDF Generation Service Interface

Defines the contract for rendering issued invoices.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional
from src.domain.address import InvoiceAddress
from src.domain.company import Company
from src.domain.invoice import Invoice
from src.domain.invoice_line import InvoiceLine


@dataclass
class InvoiceDocument:
    """Everything printed on an invoice, read from the issued records"""

    invoice: Invoice
    company: Company
    lines: List[InvoiceLine]
    billing_address: InvoiceAddress
    shipping_address: Optional[InvoiceAddress] = None
    item_names: Dict[int, str] = field(default_factory=dict)


class PdfService(ABC):
    """
    Service interface for PDF generation

    Implementations only format the document; they never query storage.
    """

    @abstractmethod
    def render_invoice(self, document: InvoiceDocument) -> bytes:
        """
        Render an issued invoice

        Args:
            document: Invoice header, lines and address snapshots

        Returns:
            PDF document as bytes
        """
        pass
