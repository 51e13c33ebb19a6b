"""Catalog Item Domain Entity

A product or service in a company's catalog. Invoice lines reference it.
"""

from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import BigInteger, ForeignKey, Numeric, String
from src.domain.base import BaseModel, IdType


class CatalogItem(BaseModel, table=True):
    """
    Catalog Item - Sellable item scoped to one company

    Domain Rules:
    - An item belongs to exactly one company (company_id) and tenant (user_id)
    - Only items of the issuing company may appear on its invoices
    """

    __tablename__ = "items"
    __table_args__ = (
        Index('ix_items_company_id', 'company_id'),
    )

    id: int = Field(
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique item identifier (auto-increment)"
    )

    user_id: int = Field(
        sa_column=Column(BigInteger, nullable=False),
        description="Owning tenant (user) ID"
    )

    company_id: int = Field(
        sa_column=Column(BigInteger, ForeignKey("companies.id"), nullable=False),
        description="Company this item belongs to"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Item name shown on invoices"
    )

    sku: Optional[str] = Field(default=None, description="Stock keeping unit")
    unit: Optional[str] = Field(default=None, description="Unit of measure")

    price: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Default selling price"
    )

    tax_rate: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(7, 3), nullable=False),
        description="Default tax rate in percent"
    )
