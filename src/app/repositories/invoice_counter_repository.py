"""Invoice Counter Repository Interface

Defines the contract for per (company, fiscal year) invoice sequences.
"""

from abc import ABC, abstractmethod
from typing import Optional


class InvoiceCounterRepository(ABC):
    """
    Repository interface for InvoiceCounter rows

    allocate_next_number is the only write path. It must be a single atomic
    upsert-and-increment that locks the counter row until the enclosing
    transaction ends, so concurrent allocations for the same company and
    fiscal year are strictly ordered. Never read-then-write.
    """

    @abstractmethod
    async def allocate_next_number(self, company_id: int, fiscal_year: str) -> int:
        """
        Create the counter at 1 or increment it, returning the new value

        Args:
            company_id: Company ID
            fiscal_year: Fiscal year label (e.g., FY24-25)

        Returns:
            Allocated sequence number (>= 1)
        """
        pass

    @abstractmethod
    async def get_current_number(self, company_id: int, fiscal_year: str) -> Optional[int]:
        """
        Read the last allocated number without locking or mutating

        Returns:
            Last allocated number, None if no invoice exists for that year
        """
        pass
