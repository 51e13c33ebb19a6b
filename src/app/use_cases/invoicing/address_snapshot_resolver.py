"""Copies a client's live addresses into invoice snapshots."""

from dataclasses import dataclass
from typing import List, Optional
from libs.result import Result, Return, Error
from src.app.repositories.client_address_repository import ClientAddressRepository
from src.domain.address import AddressType, InvoiceAddress
from .error_codes import MISSING_REQUIRED_DATA


@dataclass(frozen=True)
class AddressSnapshot:
    billing: InvoiceAddress
    shipping: Optional[InvoiceAddress] = None

    def for_invoice(self, invoice_id: int) -> List[InvoiceAddress]:
        """Snapshot rows ready to insert for the given invoice"""
        rows = [self.billing] if self.shipping is None else [self.billing, self.shipping]
        for row in rows:
            row.invoice_id = invoice_id
        return rows


class AddressSnapshotResolver:
    """
    Resolves the client's billing (required) and shipping (optional) address

    Returns detached copies; nothing here writes.
    """

    def __init__(self, client_address_repo: ClientAddressRepository):
        self.client_address_repo = client_address_repo

    async def resolve(self, client_id: int) -> Result[AddressSnapshot]:
        billing = await self.client_address_repo.get_for_client(client_id, AddressType.BILLING)
        if not billing:
            return Return.err(
                Error(
                    code=MISSING_REQUIRED_DATA,
                    message="Client billing address is required",
                    reason=f"no billing address on file for client {client_id}",
                    details={"client_id": client_id},
                )
            )

        shipping = await self.client_address_repo.get_for_client(client_id, AddressType.SHIPPING)

        return Return.ok(
            AddressSnapshot(
                billing=InvoiceAddress.snapshot_of(billing),
                shipping=InvoiceAddress.snapshot_of(shipping) if shipping else None,
            )
        )
