"""Unit tests for ReportLabPdfService"""

from datetime import date
from decimal import Decimal

from src.adapter.services.pdf_service import ReportLabPdfService
from src.app.services.pdf_service import InvoiceDocument
from src.domain.address import AddressType, InvoiceAddress
from src.domain.company import Company
from src.domain.invoice import Invoice
from src.domain.invoice_line import InvoiceLine


def _document(shipping: bool = True, notes: str = None) -> InvoiceDocument:
    invoice = Invoice(
        id=42,
        company_id=1,
        user_id=7,
        client_id=5,
        invoice_number="INV/FY24-25/0001",
        fiscal_year="FY24-25",
        invoice_date=date(2024, 4, 1),
        due_date=date(2024, 4, 30),
        subtotal=Decimal("250.00"),
        tax=Decimal("25.00"),
        total=Decimal("275.00"),
        paid_amount=Decimal("0"),
        remaining_amount=Decimal("275.00"),
        notes=notes,
    )
    return InvoiceDocument(
        invoice=invoice,
        company=Company(
            id=1, user_id=7, name="Acme Pvt Ltd", address="12 MG Road",
            city="Pune", state="MH", pincode="411001", gst="27ABCDE1234F1Z5",
        ),
        lines=[
            InvoiceLine(
                id=1, invoice_id=42, item_id=3, qty=3,
                rate=Decimal("100.00"), discount=Decimal("50.00"),
                tax_rate=Decimal("10"), line_total=Decimal("275.00"),
            )
        ],
        billing_address=InvoiceAddress(
            invoice_id=42, type=AddressType.BILLING, name="Globex", line1="1 Bill St",
            city="Mumbai", postal_code="400001",
        ),
        shipping_address=(
            InvoiceAddress(invoice_id=42, type=AddressType.SHIPPING, line1="2 Ship Rd")
            if shipping else None
        ),
        item_names={3: "Consulting hour"},
    )


class TestReportLabPdfService:

    def test_renders_pdf_bytes(self):
        pdf = ReportLabPdfService().render_invoice(_document(notes="Payable by bank transfer"))

        assert isinstance(pdf, bytes)
        assert pdf.startswith(b"%PDF")
        assert len(pdf) > 500

    def test_renders_without_shipping_address(self):
        pdf = ReportLabPdfService().render_invoice(_document(shipping=False))

        assert pdf.startswith(b"%PDF")
