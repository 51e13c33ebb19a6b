"""SQLAlchemy implementation of InvoiceCounterRepository

Allocates invoice sequence numbers with a single
INSERT ... ON CONFLICT DO UPDATE ... RETURNING statement. On PostgreSQL the
conflicting row stays locked until the enclosing transaction ends, so
concurrent issuers for the same company and fiscal year queue behind each
other. On SQLite the engine opens every transaction with BEGIN IMMEDIATE
(see src.depends), which serializes writers on the database lock instead.
"""

import logging
from typing import Optional
from sqlalchemy import text
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_counter_repository import InvoiceCounterRepository
from src.domain.base import utcnow
from src.domain.invoice_counter import InvoiceCounter

logger = logging.getLogger(__name__)

_UPSERT_BUILDERS = {
    "postgresql": postgresql_insert,
    "sqlite": sqlite_insert,
}


class SqlAlchemyInvoiceCounterRepository(InvoiceCounterRepository):
    """
    SQLAlchemy implementation of InvoiceCounterRepository

    Features:
    - Atomic upsert-and-increment, no read-then-write window
    - Increment is part of the caller's transaction and rolls back with it
    - Optional lock wait limit (PostgreSQL lock_timeout)
    """

    def __init__(self, session: AsyncSession, lock_timeout_seconds: Optional[float] = None):
        self.session = session
        self.lock_timeout_seconds = lock_timeout_seconds

    async def allocate_next_number(self, company_id: int, fiscal_year: str) -> int:
        """
        Create the counter at 1 or increment it, returning the new value

        Note:
            Must run inside the issuance transaction; does not commit
        """
        dialect = self.session.get_bind().dialect.name
        build_insert = _UPSERT_BUILDERS.get(dialect)
        if build_insert is None:
            raise NotImplementedError(f"Invoice counters are not supported on {dialect}")

        if dialect == "postgresql" and self.lock_timeout_seconds:
            timeout_ms = int(self.lock_timeout_seconds * 1000)
            await self.session.execute(text(f"SET LOCAL lock_timeout = '{timeout_ms}ms'"))

        counters = InvoiceCounter.__table__
        now = utcnow()
        statement = (
            build_insert(counters)
            .values(
                company_id=company_id,
                fiscal_year=fiscal_year,
                next_number=1,
                created_at=now,
                updated_at=now,
            )
            .on_conflict_do_update(
                index_elements=[counters.c.company_id, counters.c.fiscal_year],
                set_={
                    "next_number": counters.c.next_number + 1,
                    "updated_at": now,
                },
            )
            .returning(counters.c.next_number)
        )

        result = await self.session.execute(statement)
        allocated = result.scalar_one()
        logger.debug(
            f"Allocated invoice sequence {allocated} for company {company_id} in {fiscal_year}"
        )
        return allocated

    async def get_current_number(self, company_id: int, fiscal_year: str) -> Optional[int]:
        statement = (
            select(InvoiceCounter.next_number)
            .where(InvoiceCounter.company_id == company_id)
            .where(InvoiceCounter.fiscal_year == fiscal_year)
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()
