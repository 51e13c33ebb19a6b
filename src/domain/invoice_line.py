"""Invoice Line Domain Entity

Tracks individual line items within an invoice.
"""

from datetime import datetime
from decimal import Decimal
from sqlmodel import Field, Column, Index
from sqlalchemy import BigInteger, ForeignKey, Integer, Numeric
from src.domain.base import BaseModel, IdType, utcnow, timestamp_column


class InvoiceLine(BaseModel, table=True):
    """
    Invoice Line - One catalog item billed on an invoice

    Domain Rules:
    - Each line item belongs to exactly one invoice
    - line_total = (rate * qty - discount) * (1 + tax_rate / 100)
    - Immutable once inserted
    """

    __tablename__ = "invoice_items"
    __table_args__ = (
        Index('ix_invoice_items_invoice_id', 'invoice_id'),
    )

    id: int = Field(
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique invoice line identifier (auto-increment)"
    )

    invoice_id: int = Field(
        sa_column=Column(BigInteger, ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to Invoice"
    )

    item_id: int = Field(
        sa_column=Column(BigInteger, ForeignKey("items.id"), nullable=False),
        description="Catalog item billed on this line"
    )

    qty: int = Field(
        sa_column=Column(Integer, nullable=False),
        description="Quantity"
    )

    rate: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Price per unit"
    )

    discount: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Flat discount on the line"
    )

    tax_rate: Decimal = Field(
        sa_column=Column(Numeric(7, 3), nullable=False),
        description="Tax rate in percent"
    )

    line_total: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Tax-inclusive line total"
    )

    created_at: datetime = Field(
        default_factory=utcnow,
        sa_column=timestamp_column(),
        description="Line item creation timestamp"
    )
