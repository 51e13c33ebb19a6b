"""Invoice Address Repository Interface"""

from abc import ABC, abstractmethod
from typing import List
from src.domain.address import InvoiceAddress


class InvoiceAddressRepository(ABC):
    """Insert-only store for invoice address snapshots"""

    @abstractmethod
    async def create_many(self, addresses: List[InvoiceAddress]) -> List[InvoiceAddress]:
        """Insert snapshots within the current transaction"""
        pass

    @abstractmethod
    async def get_by_invoice_id(self, invoice_id: int) -> List[InvoiceAddress]:
        """Retrieve the snapshots stored for an invoice"""
        pass
