"""SQLAlchemy Client Address Repository Implementation"""

from typing import Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.client_address_repository import ClientAddressRepository
from src.domain.address import AddressType, ClientAddress


class SqlAlchemyClientAddressRepository(ClientAddressRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_for_client(
        self, client_id: int, address_type: AddressType
    ) -> Optional[ClientAddress]:
        statement = (
            select(ClientAddress)
            .where(ClientAddress.client_id == client_id)
            .where(ClientAddress.type == address_type.value)
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()
