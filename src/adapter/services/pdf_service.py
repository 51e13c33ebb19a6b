"""ReportLab PDF Generation Service Implementation

Implements invoice rendering using ReportLab library.
"""

from io import BytesIO
from xml.sax.saxutils import escape
from typing import List, Optional

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import (
    SimpleDocTemplate,
    Table,
    TableStyle,
    Paragraph,
    Spacer,
)

from src.app.services.pdf_service import InvoiceDocument, PdfService
from src.domain.address import InvoiceAddress
from src.domain.company import Company
from src.domain.invoice import InvoiceStatus


def _address_lines(address: InvoiceAddress) -> List[str]:
    locality = ", ".join(
        part for part in (address.city, address.state, address.postal_code) if part
    )
    lines = [address.name, address.line1, address.line2, locality, address.country]
    if address.phone:
        lines.append(f"Phone: {address.phone}")
    if address.gst_number:
        lines.append(f"GSTIN: {address.gst_number}")
    return [line for line in lines if line]


def _company_lines(company: Company) -> List[str]:
    locality = ", ".join(part for part in (company.city, company.state, company.pincode) if part)
    lines = [company.address, locality]
    if company.phone:
        lines.append(f"Phone: {company.phone}")
    if company.gst:
        lines.append(f"GSTIN: {company.gst}")
    return [line for line in lines if line]


class ReportLabPdfService(PdfService):
    """
    ReportLab implementation of PdfService

    Generates A4 tax invoices from the issued invoice records.
    """

    def render_invoice(self, document: InvoiceDocument) -> bytes:
        invoice = document.invoice
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=20 * mm,
            leftMargin=20 * mm,
            topMargin=20 * mm,
            bottomMargin=20 * mm,
            title=invoice.invoice_number,
        )

        styles = getSampleStyleSheet()
        elements = []

        title_style = ParagraphStyle(
            "TitleStyle",
            parent=styles["Heading1"],
            fontSize=22,
            spaceAfter=6,
            textColor=colors.HexColor("#2C3E50"),
        )
        header_style = ParagraphStyle(
            "HeaderStyle",
            parent=styles["Normal"],
            fontSize=9,
            textColor=colors.HexColor("#7F8C8D"),
        )
        normal_style = ParagraphStyle(
            "NormalStyle",
            parent=styles["Normal"],
            fontSize=10,
        )
        bold_style = ParagraphStyle(
            "BoldStyle",
            parent=styles["Normal"],
            fontSize=10,
            fontName="Helvetica-Bold",
        )

        # Issuer
        elements.append(Paragraph(document.company.name, title_style))
        for line in _company_lines(document.company):
            elements.append(Paragraph(line, header_style))
        elements.append(Spacer(1, 8 * mm))

        # Invoice details
        invoice_info = [
            ["Invoice Number:", invoice.invoice_number],
            ["Invoice Date:", invoice.invoice_date.strftime("%Y-%m-%d")],
            ["Due Date:", invoice.due_date.strftime("%Y-%m-%d")],
            ["Status:", InvoiceStatus(invoice.status).value.upper()],
        ]
        invoice_table = Table(invoice_info, colWidths=[40 * mm, 100 * mm])
        invoice_table.setStyle(
            TableStyle(
                [
                    ("FONTNAME", (0, 0), (0, -1), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), 10),
                    ("TEXTCOLOR", (0, 0), (0, -1), colors.HexColor("#7F8C8D")),
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
                ]
            )
        )
        elements.append(invoice_table)
        elements.append(Spacer(1, 8 * mm))

        # Bill To / Ship To from the issued snapshots
        elements.append(self._address_block(
            document.billing_address, document.shipping_address, bold_style, normal_style
        ))
        elements.append(Spacer(1, 8 * mm))

        # Line items
        line_data = [["Item", "Qty", "Rate", "Discount", "Tax %", "Total"]]
        for line in document.lines:
            line_data.append(
                [
                    document.item_names.get(line.item_id, f"Item #{line.item_id}"),
                    str(line.qty),
                    f"{line.rate:,.2f}",
                    f"{line.discount:,.2f}",
                    f"{line.tax_rate:g}",
                    f"{line.line_total:,.2f}",
                ]
            )

        line_table = Table(
            line_data, colWidths=[60 * mm, 15 * mm, 25 * mm, 25 * mm, 15 * mm, 30 * mm]
        )
        line_table.setStyle(
            TableStyle(
                [
                    ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#2C3E50")),
                    ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, 0), 10),
                    ("ALIGN", (0, 0), (-1, 0), "CENTER"),
                    ("FONTSIZE", (0, 1), (-1, -1), 9),
                    ("ALIGN", (1, 1), (-1, -1), "RIGHT"),
                    ("GRID", (0, 0), (-1, -1), 0.5, colors.HexColor("#BDC3C7")),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
                    ("TOPPADDING", (0, 0), (-1, -1), 6),
                    (
                        "ROWBACKGROUNDS",
                        (0, 1),
                        (-1, -1),
                        [colors.white, colors.HexColor("#F8F9F9")],
                    ),
                ]
            )
        )
        elements.append(line_table)
        elements.append(Spacer(1, 5 * mm))

        # Totals
        total_data = [
            ["", "Subtotal:", f"{invoice.subtotal:,.2f}"],
            ["", "Tax:", f"{invoice.tax:,.2f}"],
            ["", "Total:", f"{invoice.total:,.2f}"],
        ]
        total_table = Table(total_data, colWidths=[110 * mm, 30 * mm, 30 * mm])
        total_table.setStyle(
            TableStyle(
                [
                    ("FONTNAME", (1, 2), (-1, 2), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), 10),
                    ("ALIGN", (1, 0), (-1, -1), "RIGHT"),
                    ("LINEABOVE", (1, 2), (-1, 2), 1.5, colors.HexColor("#2C3E50")),
                    ("TOPPADDING", (0, 0), (-1, -1), 4),
                ]
            )
        )
        elements.append(total_table)

        if invoice.notes:
            elements.append(Spacer(1, 10 * mm))
            elements.append(Paragraph(escape(invoice.notes), normal_style))

        doc.build(elements)
        pdf_bytes = buffer.getvalue()
        buffer.close()

        return pdf_bytes

    def _address_block(
        self,
        billing: InvoiceAddress,
        shipping: Optional[InvoiceAddress],
        bold_style: ParagraphStyle,
        normal_style: ParagraphStyle,
    ) -> Table:
        billing_cell = [Paragraph("Bill To:", bold_style)]
        billing_cell += [Paragraph(line, normal_style) for line in _address_lines(billing)]

        shipping_cell = []
        if shipping is not None:
            shipping_cell = [Paragraph("Ship To:", bold_style)]
            shipping_cell += [Paragraph(line, normal_style) for line in _address_lines(shipping)]

        block = Table([[billing_cell, shipping_cell]], colWidths=[85 * mm, 85 * mm])
        block.setStyle(TableStyle([("VALIGN", (0, 0), (-1, -1), "TOP")]))
        return block
