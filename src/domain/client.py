"""Client Domain Entity

A customer of a company. Read only from the invoicing side.
"""

from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import BigInteger, ForeignKey, String
from src.domain.base import BaseModel, IdType


class Client(BaseModel, table=True):
    """
    Client - Invoice recipient scoped to one company

    Domain Rules:
    - A client belongs to exactly one company (company_id) and tenant (user_id)
    - Invoices may only be issued to clients of the issuing company
    """

    __tablename__ = "clients"
    __table_args__ = (
        Index('ix_clients_company_id', 'company_id'),
    )

    id: int = Field(
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique client identifier (auto-increment)"
    )

    user_id: int = Field(
        sa_column=Column(BigInteger, nullable=False),
        description="Owning tenant (user) ID"
    )

    company_id: int = Field(
        sa_column=Column(BigInteger, ForeignKey("companies.id"), nullable=False),
        description="Company this client belongs to"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Client display name"
    )

    email: Optional[str] = Field(default=None, description="Contact email")
    phone: Optional[str] = Field(default=None, description="Contact phone")
