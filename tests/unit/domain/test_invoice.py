"""Unit tests for Invoice overdue helpers"""

from datetime import date
from decimal import Decimal

from src.domain.invoice import Invoice, InvoiceStatus


def _invoice(due: date, status: InvoiceStatus = InvoiceStatus.DRAFT) -> Invoice:
    return Invoice(
        id=1,
        company_id=1,
        user_id=7,
        client_id=2,
        invoice_number="INV/FY24-25/0001",
        fiscal_year="FY24-25",
        invoice_date=date(2024, 4, 1),
        due_date=due,
        subtotal=Decimal("100.00"),
        tax=Decimal("10.00"),
        total=Decimal("110.00"),
        status=status,
        paid_amount=Decimal("0"),
        remaining_amount=Decimal("110.00"),
    )


class TestInvoiceOverdue:

    def test_not_overdue_on_due_date(self):
        invoice = _invoice(date(2024, 4, 30))

        assert invoice.is_overdue(date(2024, 4, 30)) is False
        assert invoice.days_overdue(date(2024, 4, 30)) == 0

    def test_overdue_after_due_date(self):
        invoice = _invoice(date(2024, 4, 30))

        assert invoice.is_overdue(date(2024, 5, 10)) is True
        assert invoice.days_overdue(date(2024, 5, 10)) == 10

    def test_paid_invoice_is_never_overdue(self):
        invoice = _invoice(date(2024, 4, 30), status=InvoiceStatus.PAID)

        assert invoice.is_overdue(date(2024, 6, 1)) is False
