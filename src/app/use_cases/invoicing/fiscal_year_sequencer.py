"""Fiscal-year invoice number allocation."""

from dataclasses import dataclass
from datetime import date
from src.app.repositories.invoice_counter_repository import InvoiceCounterRepository
from src.domain.fiscal_year import fiscal_year_for, format_invoice_number


@dataclass(frozen=True)
class AllocatedNumber:
    fiscal_year: str
    sequence: int

    @property
    def invoice_number(self) -> str:
        return format_invoice_number(self.fiscal_year, self.sequence)


class FiscalYearSequencer:
    """
    Allocates INV/{fiscal_year}/{sequence} numbers per company

    allocate() must be called inside the issuance transaction: the counter
    increment commits or rolls back together with the invoice, so failed
    issuances leave no gap. preview() never writes.
    """

    def __init__(self, counter_repo: InvoiceCounterRepository):
        self.counter_repo = counter_repo

    async def allocate(self, company_id: int, invoice_date: date) -> AllocatedNumber:
        fiscal_year = fiscal_year_for(invoice_date)
        sequence = await self.counter_repo.allocate_next_number(company_id, fiscal_year)
        return AllocatedNumber(fiscal_year=fiscal_year, sequence=sequence)

    async def preview(self, company_id: int, on_date: date) -> AllocatedNumber:
        fiscal_year = fiscal_year_for(on_date)
        current = await self.counter_repo.get_current_number(company_id, fiscal_year)
        return AllocatedNumber(fiscal_year=fiscal_year, sequence=(current or 0) + 1)
