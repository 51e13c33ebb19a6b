"""GetInvoice Use Case

Returns an issued invoice with its lines and address snapshots.
"""

from datetime import date
from typing import Callable, Optional
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_line_repository import InvoiceLineRepository
from src.app.repositories.invoice_address_repository import InvoiceAddressRepository
from src.domain.address import AddressType, InvoiceAddress
from .dtos import InvoiceAddressDTO, InvoiceDetailDTO, InvoiceLineDTO
from .error_codes import INVOICE_NOT_FOUND
from .list_invoices import to_summary_dto


def to_address_dto(address: Optional[InvoiceAddress]) -> Optional[InvoiceAddressDTO]:
    if address is None:
        return None
    return InvoiceAddressDTO(
        type=AddressType(address.type).value,
        name=address.name,
        line1=address.line1,
        line2=address.line2,
        city=address.city,
        state=address.state,
        postal_code=address.postal_code,
        country=address.country,
        phone=address.phone,
        gst_number=address.gst_number,
    )


class GetInvoice:
    """
    Use Case: Fetch one invoice of the requesting tenant

    Invoices of other tenants are reported as not found.
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        invoice_line_repo: InvoiceLineRepository,
        invoice_address_repo: InvoiceAddressRepository,
        today: Callable[[], date] = date.today,
    ):
        self.invoice_repo = invoice_repo
        self.invoice_line_repo = invoice_line_repo
        self.invoice_address_repo = invoice_address_repo
        self.today = today

    async def execute(self, user_id: int, invoice_id: int) -> Result[InvoiceDetailDTO]:
        invoice = await self.invoice_repo.get_for_user(invoice_id, user_id)
        if not invoice:
            return Return.err(
                Error(
                    code=INVOICE_NOT_FOUND,
                    message=f"Invoice with ID {invoice_id} not found",
                    reason="Invoice does not exist or belongs to another tenant",
                )
            )

        lines = await self.invoice_line_repo.get_by_invoice_id(invoice.id)
        addresses = {
            AddressType(a.type): a
            for a in await self.invoice_address_repo.get_by_invoice_id(invoice.id)
        }

        summary = to_summary_dto(invoice, self.today())
        return Return.ok(
            InvoiceDetailDTO(
                **summary.model_dump(),
                fiscal_year=invoice.fiscal_year,
                notes=invoice.notes,
                items=[
                    InvoiceLineDTO(
                        id=line.id,
                        item_id=line.item_id,
                        qty=line.qty,
                        rate=line.rate,
                        discount=line.discount,
                        tax_rate=line.tax_rate,
                        line_total=line.line_total,
                    )
                    for line in lines
                ],
                billing_address=to_address_dto(addresses.get(AddressType.BILLING)),
                shipping_address=to_address_dto(addresses.get(AddressType.SHIPPING)),
            )
        )
