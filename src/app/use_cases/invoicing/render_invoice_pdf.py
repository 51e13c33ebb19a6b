"""RenderInvoicePdf Use Case

Renders an issued invoice to PDF from its stored records. Addresses come
from the invoice snapshots, never from the client's current addresses.
"""

import logging
from libs.result import Result, Return, Error
from src.app.repositories.catalog_item_repository import CatalogItemRepository
from src.app.repositories.company_repository import CompanyRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_line_repository import InvoiceLineRepository
from src.app.repositories.invoice_address_repository import InvoiceAddressRepository
from src.app.services.pdf_service import InvoiceDocument, PdfService
from src.domain.address import AddressType
from .dtos import InvoicePdfDTO
from .error_codes import INVOICE_NOT_FOUND, MISSING_REQUIRED_DATA

logger = logging.getLogger(__name__)


class RenderInvoicePdf:
    """
    Use Case: Render invoice PDF

    Flow:
    1. Retrieve the tenant's invoice (INVOICE_NOT_FOUND otherwise)
    2. Load company, lines, item names and address snapshots
    3. Render through the PDF service
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        invoice_line_repo: InvoiceLineRepository,
        invoice_address_repo: InvoiceAddressRepository,
        company_repo: CompanyRepository,
        item_repo: CatalogItemRepository,
        pdf_service: PdfService,
    ):
        self.invoice_repo = invoice_repo
        self.invoice_line_repo = invoice_line_repo
        self.invoice_address_repo = invoice_address_repo
        self.company_repo = company_repo
        self.item_repo = item_repo
        self.pdf_service = pdf_service

    async def execute(self, user_id: int, invoice_id: int) -> Result[InvoicePdfDTO]:
        invoice = await self.invoice_repo.get_for_user(invoice_id, user_id)
        if not invoice:
            return Return.err(
                Error(
                    code=INVOICE_NOT_FOUND,
                    message=f"Invoice with ID {invoice_id} not found",
                    reason="Invoice does not exist or belongs to another tenant",
                )
            )

        company = await self.company_repo.get_owned(invoice.company_id, user_id)
        addresses = {
            AddressType(a.type): a
            for a in await self.invoice_address_repo.get_by_invoice_id(invoice.id)
        }
        billing = addresses.get(AddressType.BILLING)
        if not company or not billing:
            return Return.err(
                Error(
                    code=MISSING_REQUIRED_DATA,
                    message="Invoice data is incomplete",
                    reason=f"company or billing snapshot missing for invoice {invoice_id}",
                )
            )

        lines = await self.invoice_line_repo.get_by_invoice_id(invoice.id)
        items = await self.item_repo.get_by_ids(line.item_id for line in lines)

        pdf_bytes = self.pdf_service.render_invoice(
            InvoiceDocument(
                invoice=invoice,
                company=company,
                lines=lines,
                billing_address=billing,
                shipping_address=addresses.get(AddressType.SHIPPING),
                item_names={item_id: item.name for item_id, item in items.items()},
            )
        )
        logger.info(f"Rendered invoice {invoice.invoice_number} ({len(pdf_bytes)} bytes)")

        filename = f"Invoice_{invoice.invoice_number.replace('/', '_')}.pdf"
        return Return.ok(
            InvoicePdfDTO(
                invoice_id=invoice.id,
                invoice_number=invoice.invoice_number,
                filename=filename,
                content=pdf_bytes,
            )
        )
