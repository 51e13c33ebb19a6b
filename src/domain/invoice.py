"""Invoice Domain Entity

Header record of an issued invoice.
"""

from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import BigInteger, ForeignKey, Numeric, String, Date, UniqueConstraint
from src.domain.base import BaseModel, IdType, utcnow, timestamp_column


class InvoiceStatus(str, Enum):
    """Invoice status types"""
    DRAFT = "draft"
    ISSUED = "issued"
    PAID = "paid"
    CANCELLED = "cancelled"


class Invoice(BaseModel, table=True):
    """
    Invoice - Invoice issued by a company to one of its clients

    Domain Rules:
    - invoice_number is unique within a company
    - total = subtotal + tax
    - Created as draft with paid_amount = 0 and remaining_amount = total
    - Header, lines and address snapshots are written in one transaction
    """

    __tablename__ = "invoices"
    __table_args__ = (
        UniqueConstraint('company_id', 'invoice_number', name='uq_invoices_company_number'),
        Index('ix_invoices_user_id', 'user_id'),
        Index('ix_invoices_client_id', 'client_id'),
        Index('ix_invoices_status', 'status'),
    )

    id: int = Field(
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique invoice identifier (auto-increment)"
    )

    company_id: int = Field(
        sa_column=Column(BigInteger, ForeignKey("companies.id"), nullable=False),
        description="Issuing company"
    )

    user_id: int = Field(
        sa_column=Column(BigInteger, nullable=False),
        description="Tenant (user) that issued the invoice"
    )

    client_id: int = Field(
        sa_column=Column(BigInteger, ForeignKey("clients.id"), nullable=False),
        description="Invoiced client"
    )

    invoice_number: str = Field(
        sa_column=Column(String(50), nullable=False),
        description="Invoice number, unique per company (e.g., INV/FY24-25/0001)"
    )

    fiscal_year: str = Field(
        sa_column=Column(String(10), nullable=False),
        description="Fiscal year label the number was allocated in (e.g., FY24-25)"
    )

    invoice_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Invoice date"
    )

    due_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Payment due date"
    )

    subtotal: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Sum of line amounts after discount, before tax"
    )

    tax: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Sum of line taxes"
    )

    total: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="subtotal + tax"
    )

    status: InvoiceStatus = Field(
        default=InvoiceStatus.DRAFT,
        description="Invoice status (draft, issued, paid, cancelled)"
    )

    paid_amount: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Amount paid so far"
    )

    remaining_amount: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="total - paid_amount"
    )

    notes: Optional[str] = Field(
        default=None,
        description="Free text printed on the invoice"
    )

    created_at: datetime = Field(
        default_factory=utcnow,
        sa_column=timestamp_column(),
        description="Invoice creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utcnow,
        sa_column=timestamp_column(),
        description="Last update timestamp"
    )

    def days_overdue(self, today: date) -> int:
        """Days past due date, 0 when not yet due"""
        return max(0, (today - self.due_date).days)

    def is_overdue(self, today: date) -> bool:
        return today > self.due_date and self.status != InvoiceStatus.PAID
