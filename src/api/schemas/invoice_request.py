"""Request schemas for the invoice API"""

from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field


class InvoiceItemRequestSchema(BaseModel):
    item_id: int = Field(..., description="Catalog item ID")
    qty: int = Field(..., ge=1, description="Quantity (>= 1)")
    rate: Decimal = Field(..., ge=0, description="Price per unit")
    discount: Decimal = Field(default=Decimal("0"), ge=0, description="Flat line discount")
    tax_rate: Decimal = Field(default=Decimal("0"), ge=0, le=100, description="Tax rate in percent")


class IssueInvoiceRequestSchema(BaseModel):
    """Schema for POST /invoices; the tenant comes from the X-User-Id header"""

    company_id: int = Field(..., description="Issuing company ID")
    client_id: int = Field(..., description="Invoiced client ID")
    invoice_date: str = Field(..., description="Invoice date (YYYY-MM-DD)")
    due_date: str = Field(..., description="Due date (YYYY-MM-DD)")
    items: List[InvoiceItemRequestSchema] = Field(default_factory=list)
    notes: Optional[str] = Field(default=None, max_length=2000)

    class Config:
        json_schema_extra = {
            "example": {
                "company_id": 1,
                "client_id": 12,
                "invoice_date": "2024-04-01",
                "due_date": "2024-04-30",
                "items": [
                    {"item_id": 3, "qty": 3, "rate": "100.00", "discount": "50.00", "tax_rate": "10"}
                ],
                "notes": "Thank you for your business",
            }
        }
