"""Address Domain Entities

ClientAddress is the live, editable address of a client. InvoiceAddress is
the snapshot copied onto an invoice when it is issued; later edits to the
client's address never reach it.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import BigInteger, ForeignKey, String, UniqueConstraint
from src.domain.base import BaseModel, IdType, utcnow, timestamp_column


class AddressType(str, Enum):
    """Address kinds"""
    BILLING = "billing"
    SHIPPING = "shipping"


class ClientAddress(BaseModel, table=True):
    """
    Client Address - Current billing or shipping address of a client

    Domain Rules:
    - At most one address per (client_id, type)
    - Owned by the client management collaborator
    """

    __tablename__ = "client_addresses"
    __table_args__ = (
        UniqueConstraint('client_id', 'type', name='uq_client_addresses_client_type'),
    )

    id: int = Field(
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique address identifier (auto-increment)"
    )

    client_id: int = Field(
        sa_column=Column(BigInteger, ForeignKey("clients.id"), nullable=False),
        description="Client this address belongs to"
    )

    type: AddressType = Field(
        sa_column=Column(String(16), nullable=False),
        description="Address kind (billing, shipping)"
    )

    name: Optional[str] = None
    line1: str = Field(sa_column=Column(String(255), nullable=False))
    line2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    gst_number: Optional[str] = None

    updated_at: datetime = Field(
        default_factory=utcnow,
        sa_column=timestamp_column(),
        description="Last update timestamp"
    )


class InvoiceAddress(BaseModel, table=True):
    """
    Invoice Address - Immutable address snapshot taken at issuance

    Domain Rules:
    - Created in the same transaction as its invoice
    - Billing snapshot is mandatory, shipping is optional
    - Never updated after insert
    """

    __tablename__ = "invoice_addresses"
    __table_args__ = (
        Index('ix_invoice_addresses_invoice_id', 'invoice_id'),
        UniqueConstraint('invoice_id', 'type', name='uq_invoice_addresses_invoice_type'),
    )

    id: int = Field(
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique snapshot identifier (auto-increment)"
    )

    invoice_id: int = Field(
        sa_column=Column(BigInteger, ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to Invoice"
    )

    type: AddressType = Field(
        sa_column=Column(String(16), nullable=False),
        description="Address kind (billing, shipping)"
    )

    name: Optional[str] = None
    line1: str = Field(sa_column=Column(String(255), nullable=False))
    line2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    phone: Optional[str] = None
    gst_number: Optional[str] = None

    created_at: datetime = Field(
        default_factory=utcnow,
        sa_column=timestamp_column(),
        description="Snapshot creation timestamp"
    )

    @classmethod
    def snapshot_of(cls, address: ClientAddress) -> "InvoiceAddress":
        """Copy the printable fields of a live client address"""
        return cls(
            type=AddressType(address.type),
            name=address.name,
            line1=address.line1,
            line2=address.line2,
            city=address.city,
            state=address.state,
            postal_code=address.postal_code,
            country=address.country,
            phone=address.phone,
            gst_number=address.gst_number,
        )
