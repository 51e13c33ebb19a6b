"""Data Transfer Objects for Invoicing Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field


class InvoiceItemCommandDTO(BaseModel):
    """
    One requested invoice line

    Negative quantities, rates, discounts and tax rates are rejected here.
    """

    item_id: int = Field(
        ...,
        description="Catalog item ID (must belong to the invoicing company)"
    )

    qty: int = Field(
        ...,
        ge=1,
        description="Quantity (>= 1)"
    )

    rate: Decimal = Field(
        ...,
        ge=0,
        description="Price per unit"
    )

    discount: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        description="Flat discount on the line"
    )

    tax_rate: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        le=100,
        description="Tax rate in percent"
    )


class IssueInvoiceCommandDTO(BaseModel):
    """
    Command DTO for issuing an invoice

    Used as input to IssueInvoice use case. Dates are kept as the raw
    YYYY-MM-DD strings; parsing them is part of the issuance workflow.
    """

    user_id: int = Field(
        ...,
        description="Requesting tenant (user) ID"
    )

    company_id: int = Field(
        ...,
        description="Issuing company ID"
    )

    client_id: int = Field(
        ...,
        description="Invoiced client ID"
    )

    invoice_date: str = Field(
        ...,
        description="Invoice date (YYYY-MM-DD)"
    )

    due_date: str = Field(
        ...,
        description="Due date (YYYY-MM-DD)"
    )

    items: List[InvoiceItemCommandDTO] = Field(
        default_factory=list,
        description="Requested line items"
    )

    notes: Optional[str] = Field(
        default=None,
        description="Free text printed on the invoice"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "user_id": 7,
                "company_id": 1,
                "client_id": 12,
                "invoice_date": "2024-04-01",
                "due_date": "2024-04-30",
                "items": [
                    {"item_id": 3, "qty": 3, "rate": "100.00", "discount": "50.00", "tax_rate": "10"}
                ],
            }
        }


class IssuedInvoiceDTO(BaseModel):
    """Response DTO for a committed invoice"""

    invoice_id: int = Field(..., description="Invoice ID")
    invoice_number: str = Field(..., description="Allocated invoice number")
    fiscal_year: str = Field(..., description="Fiscal year label")
    subtotal: Decimal = Field(..., description="Sum of line amounts after discount")
    tax: Decimal = Field(..., description="Sum of line taxes")
    total: Decimal = Field(..., description="subtotal + tax")

    class Config:
        json_schema_extra = {
            "example": {
                "invoice_id": 42,
                "invoice_number": "INV/FY24-25/0001",
                "fiscal_year": "FY24-25",
                "subtotal": "250.00",
                "tax": "25.00",
                "total": "275.00",
            }
        }


class InvoiceNumberPreviewDTO(BaseModel):
    """Advisory next invoice number; may be taken by a concurrent issuance"""

    company_id: int
    fiscal_year: str
    preview: str


class ListInvoicesQueryDTO(BaseModel):
    user_id: int
    company_id: Optional[int] = None
    client_id: Optional[int] = None
    status: Optional[str] = None
    limit: int = 10
    offset: int = 0


class InvoiceSummaryDTO(BaseModel):
    id: int
    company_id: int
    client_id: int
    invoice_number: str
    invoice_date: date
    due_date: date
    subtotal: Decimal
    tax: Decimal
    total: Decimal
    paid_amount: Decimal
    remaining_amount: Decimal
    status: str
    is_overdue: bool
    days_overdue: int
    created_at: datetime


class ListInvoicesResponseDTO(BaseModel):
    data: List[InvoiceSummaryDTO]
    limit: int
    offset: int


class InvoiceLineDTO(BaseModel):
    id: int
    item_id: int
    qty: int
    rate: Decimal
    discount: Decimal
    tax_rate: Decimal
    line_total: Decimal


class InvoiceAddressDTO(BaseModel):
    type: str
    name: Optional[str] = None
    line1: str
    line2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    phone: Optional[str] = None
    gst_number: Optional[str] = None


class InvoiceDetailDTO(InvoiceSummaryDTO):
    """Invoice header with its lines and issued address snapshots"""

    fiscal_year: str
    notes: Optional[str] = None
    items: List[InvoiceLineDTO]
    billing_address: Optional[InvoiceAddressDTO] = None
    shipping_address: Optional[InvoiceAddressDTO] = None


class InvoicePdfDTO(BaseModel):
    invoice_id: int
    invoice_number: str
    filename: str
    content: bytes
