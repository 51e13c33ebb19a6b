"""PreviewInvoiceNumber Use Case

Shows the number the next invoice of a company would probably receive.
"""

from datetime import date
from typing import Callable
from libs.result import Result, Return, Error
from src.app.repositories.company_repository import CompanyRepository
from .dtos import InvoiceNumberPreviewDTO
from .error_codes import AUTHORIZATION_ERROR
from .fiscal_year_sequencer import FiscalYearSequencer


class PreviewInvoiceNumber:
    """
    Use Case: Preview the next invoice number (read only)

    The preview reads the counter without locking it, so a concurrent
    issuance may take the previewed number first. Display only.
    """

    def __init__(
        self,
        company_repo: CompanyRepository,
        sequencer: FiscalYearSequencer,
        today: Callable[[], date] = date.today,
    ):
        self.company_repo = company_repo
        self.sequencer = sequencer
        self.today = today

    async def execute(self, user_id: int, company_id: int) -> Result[InvoiceNumberPreviewDTO]:
        company = await self.company_repo.get_owned(company_id, user_id)
        if not company:
            return Return.err(
                Error(
                    code=AUTHORIZATION_ERROR,
                    message="Unauthorized company access",
                    reason=f"company {company_id} is not owned by user {user_id}",
                    details={"company_id": company_id},
                )
            )

        preview = await self.sequencer.preview(company_id, self.today())

        return Return.ok(
            InvoiceNumberPreviewDTO(
                company_id=company_id,
                fiscal_year=preview.fiscal_year,
                preview=preview.invoice_number,
            )
        )
