from datetime import date
from decimal import Decimal

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import src.domain  # noqa: F401  registers every table on SQLModel.metadata
from src.adapter.repositories import (
    SqlAlchemyCatalogItemRepository,
    SqlAlchemyClientAddressRepository,
    SqlAlchemyClientRepository,
    SqlAlchemyCompanyRepository,
    SqlAlchemyInvoiceAddressRepository,
    SqlAlchemyInvoiceCounterRepository,
    SqlAlchemyInvoiceLineRepository,
    SqlAlchemyInvoiceRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.invoicing import (
    AddressSnapshotResolver,
    FiscalYearSequencer,
    InvoiceItemCommandDTO,
    IssueInvoice,
    IssueInvoiceCommandDTO,
    OwnershipValidator,
)
from src.depends import build_engine, get_session
from src.domain import AddressType, CatalogItem, Client, ClientAddress, Company


@pytest_asyncio.fixture(scope="function")
async def engine(tmp_path):
    """File-backed SQLite database, so concurrent sessions really contend"""
    db_path = tmp_path / "invoicing_test.db"
    engine = build_engine(f"sqlite+aiosqlite:///{db_path}", lock_timeout_seconds=30)

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    """Create a new database session for each test"""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def seed(db_session):
    """Insert a company with one client and two catalog items for a tenant"""

    async def _seed(
        user_id: int = 7,
        company_name: str = "Acme Pvt Ltd",
        with_billing: bool = True,
        with_shipping: bool = False,
    ) -> dict:
        company = Company(user_id=user_id, name=company_name, city="Pune", state="MH")
        db_session.add(company)
        await db_session.flush()

        client = Client(user_id=user_id, company_id=company.id, name="Globex", email="ap@globex.test")
        db_session.add(client)
        await db_session.flush()

        items = [
            CatalogItem(user_id=user_id, company_id=company.id, name="Consulting hour",
                        price=Decimal("100.00"), tax_rate=Decimal("10")),
            CatalogItem(user_id=user_id, company_id=company.id, name="Travel",
                        price=Decimal("40.00"), tax_rate=Decimal("0")),
        ]
        db_session.add_all(items)

        if with_billing:
            db_session.add(ClientAddress(
                client_id=client.id, type=AddressType.BILLING, name="Globex",
                line1="1 Bill St", city="Mumbai", postal_code="400001", country="IN",
                gst_number="27ABCDE1234F1Z5",
            ))
        if with_shipping:
            db_session.add(ClientAddress(
                client_id=client.id, type=AddressType.SHIPPING, line1="2 Ship Rd", city="Thane",
            ))

        await db_session.commit()
        return {
            "user_id": user_id,
            "company_id": company.id,
            "client_id": client.id,
            "item_ids": [item.id for item in items],
        }

    return _seed


def build_issue_invoice(session: AsyncSession) -> IssueInvoice:
    return IssueInvoice(
        SqlAlchemyUnitOfWork(session),
        OwnershipValidator(
            SqlAlchemyCompanyRepository(session),
            SqlAlchemyClientRepository(session),
            SqlAlchemyCatalogItemRepository(session),
        ),
        FiscalYearSequencer(SqlAlchemyInvoiceCounterRepository(session)),
        AddressSnapshotResolver(SqlAlchemyClientAddressRepository(session)),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceLineRepository(session),
        SqlAlchemyInvoiceAddressRepository(session),
    )


@pytest_asyncio.fixture
async def issue(session_factory):
    """Issue one invoice in its own session, the way one request would"""

    async def _issue(tenant: dict, invoice_date: date = date(2024, 4, 1), **overrides):
        values = dict(
            user_id=tenant["user_id"],
            company_id=tenant["company_id"],
            client_id=tenant["client_id"],
            invoice_date=invoice_date.isoformat(),
            due_date=invoice_date.isoformat(),
            items=[
                InvoiceItemCommandDTO(
                    item_id=tenant["item_ids"][0], qty=3, rate=Decimal("100"),
                    discount=Decimal("50"), tax_rate=Decimal("10"),
                )
            ],
        )
        values.update(overrides)
        async with session_factory() as session:
            return await build_issue_invoice(session).execute(IssueInvoiceCommandDTO(**values))

    return _issue


@pytest_asyncio.fixture
async def client(session_factory):
    """Create test client; each request gets its own session"""
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def issue_invoice_builder():
    """IssueInvoice wired to a caller-supplied session"""
    return build_issue_invoice
