"""ListInvoices Use Case

Tenant-scoped invoice listing with optional filters and pagination.
"""

from datetime import date
from typing import Callable
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.invoice import Invoice, InvoiceStatus
from .dtos import InvoiceSummaryDTO, ListInvoicesQueryDTO, ListInvoicesResponseDTO
from .error_codes import VALIDATION_ERROR

DEFAULT_LIMIT = 10
MAX_LIMIT = 100


def to_summary_dto(invoice: Invoice, today: date) -> InvoiceSummaryDTO:
    return InvoiceSummaryDTO(
        id=invoice.id,
        company_id=invoice.company_id,
        client_id=invoice.client_id,
        invoice_number=invoice.invoice_number,
        invoice_date=invoice.invoice_date,
        due_date=invoice.due_date,
        subtotal=invoice.subtotal,
        tax=invoice.tax,
        total=invoice.total,
        paid_amount=invoice.paid_amount,
        remaining_amount=invoice.remaining_amount,
        status=InvoiceStatus(invoice.status).value,
        is_overdue=invoice.is_overdue(today),
        days_overdue=invoice.days_overdue(today),
        created_at=invoice.created_at,
    )


class ListInvoices:
    """
    Use Case: List a tenant's invoices

    Business Rules:
    1. Only invoices issued by the requesting tenant are returned
    2. limit <= 0 falls back to the default; limit is capped at max_limit
    3. Negative offsets are treated as 0
    4. Overdue flags are computed against today's date
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        today: Callable[[], date] = date.today,
        default_limit: int = DEFAULT_LIMIT,
        max_limit: int = MAX_LIMIT,
    ):
        self.invoice_repo = invoice_repo
        self.today = today
        self.default_limit = default_limit
        self.max_limit = max_limit

    async def execute(self, query: ListInvoicesQueryDTO) -> Result[ListInvoicesResponseDTO]:
        status = None
        if query.status:
            try:
                status = InvoiceStatus(query.status)
            except ValueError:
                return Return.err(
                    Error(
                        code=VALIDATION_ERROR,
                        message=f"Unknown invoice status '{query.status}'",
                        reason="status filter must be one of "
                               + ", ".join(s.value for s in InvoiceStatus),
                    )
                )

        limit = query.limit if query.limit > 0 else self.default_limit
        limit = min(limit, self.max_limit)
        offset = max(query.offset, 0)

        invoices = await self.invoice_repo.list_for_user(
            user_id=query.user_id,
            company_id=query.company_id,
            client_id=query.client_id,
            status=status,
            limit=limit,
            offset=offset,
        )

        today = self.today()
        return Return.ok(
            ListInvoicesResponseDTO(
                data=[to_summary_dto(invoice, today) for invoice in invoices],
                limit=limit,
                offset=offset,
            )
        )
