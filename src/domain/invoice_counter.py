"""Invoice Counter Domain Entity

One row per (company, fiscal year) holding the last allocated invoice
sequence number. The row is the serialization point for concurrent
issuance: it is only ever changed by an atomic upsert-and-increment.
"""

from datetime import datetime
from sqlmodel import Field, Column
from sqlalchemy import BigInteger, CheckConstraint, ForeignKey, Integer, String
from src.domain.base import BaseModel, utcnow, timestamp_column


class InvoiceCounter(BaseModel, table=True):
    """
    Invoice Counter - Per company, per fiscal year invoice sequence

    Domain Rules:
    - Created lazily with next_number = 1 on the first invoice of a year
    - next_number only ever increases by one per successful allocation
    """

    __tablename__ = "invoice_counters"
    __table_args__ = (
        CheckConstraint('next_number > 0', name='next_number_positive'),
    )

    company_id: int = Field(
        sa_column=Column(BigInteger, ForeignKey("companies.id"), primary_key=True),
        description="Company the sequence belongs to"
    )

    fiscal_year: str = Field(
        sa_column=Column(String(10), primary_key=True),
        description="Fiscal year label (e.g., FY24-25)"
    )

    next_number: int = Field(
        sa_column=Column(Integer, nullable=False, default=1),
        description="Last allocated sequence number"
    )

    created_at: datetime = Field(
        default_factory=utcnow,
        sa_column=timestamp_column(),
        description="Counter creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utcnow,
        sa_column=timestamp_column(),
        description="Last allocation timestamp"
    )
