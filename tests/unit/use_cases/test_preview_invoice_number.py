"""Unit tests for PreviewInvoiceNumber use case"""

import pytest
from datetime import date
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.invoicing.fiscal_year_sequencer import FiscalYearSequencer
from src.app.use_cases.invoicing.preview_invoice_number import PreviewInvoiceNumber
from src.domain.company import Company


@pytest.fixture
def company_repo():
    repo = MagicMock()
    repo.get_owned = AsyncMock(return_value=Company(id=1, user_id=7, name="Acme"))
    return repo


@pytest.fixture
def counter_repo():
    repo = MagicMock()
    repo.get_current_number = AsyncMock(return_value=9)
    repo.allocate_next_number = AsyncMock()
    return repo


@pytest.mark.asyncio
class TestPreviewInvoiceNumber:

    async def test_preview_next_number(self, company_repo, counter_repo):
        use_case = PreviewInvoiceNumber(
            company_repo, FiscalYearSequencer(counter_repo), today=lambda: date(2025, 2, 10)
        )

        result = await use_case.execute(7, 1)

        assert result.is_ok()
        assert result.value.preview == "INV/FY24-25/0010"
        assert result.value.fiscal_year == "FY24-25"
        counter_repo.get_current_number.assert_awaited_once_with(1, "FY24-25")
        counter_repo.allocate_next_number.assert_not_called()

    async def test_preview_rejects_foreign_company(self, company_repo, counter_repo):
        company_repo.get_owned = AsyncMock(return_value=None)
        use_case = PreviewInvoiceNumber(company_repo, FiscalYearSequencer(counter_repo))

        result = await use_case.execute(8, 1)

        assert result.is_err()
        assert result.error.code == "AUTHORIZATION_ERROR"
        counter_repo.get_current_number.assert_not_called()
