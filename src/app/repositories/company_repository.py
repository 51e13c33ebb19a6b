"""Company Repository Interface"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.company import Company


class CompanyRepository(ABC):
    """Read access to companies for ownership checks and rendering"""

    @abstractmethod
    async def get_owned(self, company_id: int, user_id: int) -> Optional[Company]:
        """
        Retrieve a company if it is owned by the given tenant

        Args:
            company_id: Company ID
            user_id: Tenant (user) ID

        Returns:
            Company if it exists and belongs to user_id, None otherwise
        """
        pass
