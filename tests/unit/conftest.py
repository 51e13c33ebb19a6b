import pytest
from unittest.mock import AsyncMock
from src.app.services.unit_of_work import UnitOfWork


class StubUnitOfWork(UnitOfWork):
    async def commit(self):
        pass

    async def rollback(self):
        pass


@pytest.fixture
def mock_uow():
    """Unit of work whose commit/rollback are mocks; leaving `async with` rolls back"""
    uow = StubUnitOfWork()
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow
