"""SQLAlchemy Company Repository Implementation"""

from typing import Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.company_repository import CompanyRepository
from src.domain.company import Company


class SqlAlchemyCompanyRepository(CompanyRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_owned(self, company_id: int, user_id: int) -> Optional[Company]:
        statement = (
            select(Company)
            .where(Company.id == company_id)
            .where(Company.user_id == user_id)
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()
