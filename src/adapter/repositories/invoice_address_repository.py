"""SQLAlchemy Invoice Address Repository Implementation"""

from typing import List
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_address_repository import InvoiceAddressRepository
from src.domain.address import InvoiceAddress


class SqlAlchemyInvoiceAddressRepository(InvoiceAddressRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_many(self, addresses: List[InvoiceAddress]) -> List[InvoiceAddress]:
        self.session.add_all(addresses)
        await self.session.flush()
        return addresses

    async def get_by_invoice_id(self, invoice_id: int) -> List[InvoiceAddress]:
        statement = (
            select(InvoiceAddress)
            .where(InvoiceAddress.invoice_id == invoice_id)
            .order_by(InvoiceAddress.id)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())
