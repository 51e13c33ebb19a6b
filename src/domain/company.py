"""Company Domain Entity

A tenant-owned company that issues invoices. Managed by the company CRUD
collaborator; read only from the invoicing side.
"""

from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import BigInteger, String
from src.domain.base import BaseModel, IdType


class Company(BaseModel, table=True):
    """
    Company - Invoice issuer owned by a tenant (user)

    Domain Rules:
    - A company belongs to exactly one tenant (user_id)
    - Invoice numbers are sequenced per company and fiscal year
    """

    __tablename__ = "companies"
    __table_args__ = (
        Index('ix_companies_user_id', 'user_id'),
    )

    id: int = Field(
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique company identifier (auto-increment)"
    )

    user_id: int = Field(
        sa_column=Column(BigInteger, nullable=False),
        description="Owning tenant (user) ID"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Legal company name"
    )

    address: Optional[str] = Field(default=None, description="Street address")
    city: Optional[str] = Field(default=None, description="City")
    state: Optional[str] = Field(default=None, description="State")
    pincode: Optional[str] = Field(default=None, description="Postal code")
    phone: Optional[str] = Field(default=None, description="Contact phone")
    gst: Optional[str] = Field(default=None, description="GST registration number")
