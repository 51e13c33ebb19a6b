"""SQLAlchemy Catalog Item Repository Implementation"""

from typing import Dict, Iterable
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.catalog_item_repository import CatalogItemRepository
from src.domain.catalog_item import CatalogItem


class SqlAlchemyCatalogItemRepository(CatalogItemRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_ids(self, item_ids: Iterable[int]) -> Dict[int, CatalogItem]:
        unique_ids = set(item_ids)
        if not unique_ids:
            return {}
        statement = select(CatalogItem).where(CatalogItem.id.in_(unique_ids))
        result = await self.session.execute(statement)
        return {item.id: item for item in result.scalars().all()}
