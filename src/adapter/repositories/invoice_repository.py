"""SQLAlchemy Invoice Repository Implementation

Implements invoice persistence using SQLAlchemy async session.
"""

from typing import Optional, List
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.invoice import Invoice, InvoiceStatus


class SqlAlchemyInvoiceRepository(InvoiceRepository):
    """
    SQLAlchemy implementation of InvoiceRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, invoice: Invoice) -> Invoice:
        """
        Insert a new invoice header

        Note:
            Flushes to obtain the ID; the caller's unit of work commits
        """
        self.session.add(invoice)
        await self.session.flush()
        await self.session.refresh(invoice)
        return invoice

    async def get_by_id(self, invoice_id: int) -> Optional[Invoice]:
        statement = select(Invoice).where(Invoice.id == invoice_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_for_user(self, invoice_id: int, user_id: int) -> Optional[Invoice]:
        statement = (
            select(Invoice)
            .where(Invoice.id == invoice_id)
            .where(Invoice.user_id == user_id)
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

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
        Retrieve a tenant's invoices

        Each optional filter adds one bound predicate to the query.
        """
        statement = select(Invoice).where(Invoice.user_id == user_id)

        if company_id is not None:
            statement = statement.where(Invoice.company_id == company_id)

        if client_id is not None:
            statement = statement.where(Invoice.client_id == client_id)

        if status:
            statement = statement.where(Invoice.status == status)

        statement = statement.order_by(Invoice.invoice_date.desc(), Invoice.id.desc())
        statement = statement.limit(limit).offset(offset)

        result = await self.session.execute(statement)
        return list(result.scalars().all())
