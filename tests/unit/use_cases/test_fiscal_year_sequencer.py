"""Unit tests for FiscalYearSequencer"""

import pytest
from datetime import date
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.invoicing.fiscal_year_sequencer import FiscalYearSequencer


@pytest.fixture
def counter_repo():
    repo = MagicMock()
    repo.allocate_next_number = AsyncMock(return_value=1)
    repo.get_current_number = AsyncMock(return_value=None)
    return repo


@pytest.mark.asyncio
class TestFiscalYearSequencer:

    async def test_allocate_uses_invoice_date_fiscal_year(self, counter_repo):
        counter_repo.allocate_next_number = AsyncMock(return_value=17)
        sequencer = FiscalYearSequencer(counter_repo)

        allocated = await sequencer.allocate(3, date(2025, 3, 31))

        counter_repo.allocate_next_number.assert_awaited_once_with(3, "FY24-25")
        assert allocated.invoice_number == "INV/FY24-25/0017"

    async def test_allocate_april_first_starts_new_year(self, counter_repo):
        sequencer = FiscalYearSequencer(counter_repo)

        allocated = await sequencer.allocate(3, date(2025, 4, 1))

        assert allocated.fiscal_year == "FY25-26"
        assert allocated.invoice_number == "INV/FY25-26/0001"

    async def test_preview_without_counter(self, counter_repo):
        sequencer = FiscalYearSequencer(counter_repo)

        preview = await sequencer.preview(3, date(2024, 6, 1))

        assert preview.invoice_number == "INV/FY24-25/0001"
        counter_repo.allocate_next_number.assert_not_called()

    async def test_preview_after_existing_invoices(self, counter_repo):
        counter_repo.get_current_number = AsyncMock(return_value=41)
        sequencer = FiscalYearSequencer(counter_repo)

        preview = await sequencer.preview(3, date(2024, 6, 1))

        assert preview.invoice_number == "INV/FY24-25/0042"
