"""Invoice Repository Interface

Defines the contract for invoice persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain.invoice import Invoice, InvoiceStatus


class InvoiceRepository(ABC):
    """
    Repository interface for Invoice persistence

    Invoices are inserted once by the issuance transaction; reads are
    always scoped to the owning tenant.
    """

    @abstractmethod
    async def create(self, invoice: Invoice) -> Invoice:
        """
        Insert a new invoice header within the current transaction

        Args:
            invoice: Invoice entity to persist

        Returns:
            Created Invoice with generated ID
        """
        pass

    @abstractmethod
    async def get_by_id(self, invoice_id: int) -> Optional[Invoice]:
        """
        Retrieve invoice by ID

        Args:
            invoice_id: Invoice ID

        Returns:
            Invoice if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_for_user(self, invoice_id: int, user_id: int) -> Optional[Invoice]:
        """
        Retrieve invoice by ID if it was issued by the given tenant

        Args:
            invoice_id: Invoice ID
            user_id: Tenant (user) ID

        Returns:
            Invoice if found and owned, None otherwise
        """
        pass

    @abstractmethod
    async def list_for_user(
        self,
        user_id: int,
        company_id: Optional[int] = None,
        client_id: Optional[int] = None,
        status: Optional[InvoiceStatus] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Invoice]:
        """
        Retrieve a tenant's invoices, newest invoice date first

        Args:
            user_id: Tenant (user) ID
            company_id: Optional filter by issuing company
            client_id: Optional filter by client
            status: Optional filter by status
            limit: Maximum number of invoices to return
            offset: Offset for pagination

        Returns:
            List of invoices
        """
        pass
