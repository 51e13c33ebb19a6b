"""Integration tests for invoice issuance against SQLite

Tests cover:
- End-to-end issuance with totals, lines and address snapshots
- Per-company, per-fiscal-year numbering and the April 1 boundary
- Full rollback when the billing address is missing
- Ownership isolation between sibling companies of one tenant
"""

import pytest
from datetime import date
from decimal import Decimal

from sqlalchemy import func
from sqlmodel import select

from src.app.use_cases.invoicing import InvoiceItemCommandDTO, IssueInvoiceCommandDTO
from src.domain import (
    AddressType,
    ClientAddress,
    Invoice,
    InvoiceAddress,
    InvoiceCounter,
    InvoiceLine,
)


async def _count(session_factory, model) -> int:
    async with session_factory() as session:
        result = await session.execute(select(func.count()).select_from(model))
        return result.scalar_one()


@pytest.mark.asyncio
class TestIssueInvoiceIntegration:

    async def test_issue_invoice_end_to_end(self, seed, issue, session_factory):
        """
        Given: A tenant with company, client, items, billing and shipping addresses
        When: An invoice with one line is issued
        Then: Header, line and both snapshots are committed with the first number
        """
        tenant = await seed(with_shipping=True)

        result = await issue(tenant, notes="Net 30")

        assert result.is_ok(), result.error
        issued = result.value
        assert issued.invoice_number == "INV/FY24-25/0001"
        assert issued.total == Decimal("275.00")

        async with session_factory() as session:
            invoice = (await session.execute(
                select(Invoice).where(Invoice.id == issued.invoice_id)
            )).scalar_one()
            lines = (await session.execute(
                select(InvoiceLine).where(InvoiceLine.invoice_id == issued.invoice_id)
            )).scalars().all()
            snapshots = (await session.execute(
                select(InvoiceAddress).where(InvoiceAddress.invoice_id == issued.invoice_id)
            )).scalars().all()

        assert invoice.subtotal == Decimal("250.00")
        assert invoice.tax == Decimal("25.00")
        assert invoice.total == invoice.subtotal + invoice.tax
        assert invoice.remaining_amount == invoice.total
        assert invoice.paid_amount == Decimal("0")
        assert invoice.notes == "Net 30"
        assert invoice.created_at is not None
        assert len(lines) == 1
        assert lines[0].line_total == Decimal("275.00")
        assert sorted(AddressType(s.type) for s in snapshots) == [AddressType.BILLING, AddressType.SHIPPING]

    async def test_numbers_are_sequential_per_company(self, seed, issue):
        first_company = await seed(company_name="Acme")
        second_company = await seed(company_name="Initech")

        numbers = [(await issue(first_company)).value.invoice_number for _ in range(3)]
        other = (await issue(second_company)).value.invoice_number

        assert numbers == ["INV/FY24-25/0001", "INV/FY24-25/0002", "INV/FY24-25/0003"]
        assert other == "INV/FY24-25/0001"

    async def test_fiscal_year_boundary(self, seed, issue):
        tenant = await seed()

        march = await issue(tenant, invoice_date=date(2025, 3, 31))
        april = await issue(tenant, invoice_date=date(2025, 4, 1))
        back_dated = await issue(tenant, invoice_date=date(2025, 3, 15))

        assert march.value.invoice_number == "INV/FY24-25/0001"
        assert april.value.invoice_number == "INV/FY25-26/0001"
        assert back_dated.value.invoice_number == "INV/FY24-25/0002"

    async def test_missing_billing_address_rolls_back_everything(
        self, seed, issue, session_factory
    ):
        """
        Given: A client without a billing address
        When: Issuance reaches the snapshot step
        Then: No invoice, line, snapshot or counter row survives
        """
        tenant = await seed(with_billing=False)

        result = await issue(tenant)

        assert result.is_err()
        assert result.error.code == "MISSING_REQUIRED_DATA"
        assert await _count(session_factory, Invoice) == 0
        assert await _count(session_factory, InvoiceLine) == 0
        assert await _count(session_factory, InvoiceAddress) == 0
        assert await _count(session_factory, InvoiceCounter) == 0

        async with session_factory() as session:
            session.add(ClientAddress(
                client_id=tenant["client_id"], type=AddressType.BILLING, line1="1 Bill St",
            ))
            await session.commit()

        retry = await issue(tenant)

        assert retry.is_ok()
        assert retry.value.invoice_number == "INV/FY24-25/0001"

    async def test_sibling_company_client_and_item_rejected(self, seed, issue, session_factory):
        acme = await seed(company_name="Acme")
        initech = await seed(company_name="Initech")

        foreign_client = await issue({**acme, "client_id": initech["client_id"]})
        foreign_item = await issue(
            acme,
            items=[
                InvoiceItemCommandDTO(item_id=acme["item_ids"][0], qty=1, rate=Decimal("10")),
                InvoiceItemCommandDTO(item_id=initech["item_ids"][1], qty=1, rate=Decimal("10")),
            ],
        )

        assert foreign_client.error.code == "VALIDATION_ERROR"
        assert foreign_client.error.details == {"client_id": initech["client_id"]}
        assert foreign_item.error.code == "VALIDATION_ERROR"
        assert foreign_item.error.details == {"item_id": initech["item_ids"][1]}
        assert await _count(session_factory, Invoice) == 0

    async def test_other_tenant_company_is_unauthorized(self, seed, issue, session_factory):
        tenant = await seed(user_id=7)

        result = await issue({**tenant, "user_id": 8})

        assert result.error.code == "AUTHORIZATION_ERROR"
        assert await _count(session_factory, InvoiceCounter) == 0


@pytest.mark.asyncio
class TestIssueInvoiceReleasesTransaction:
    """Rejected requests must not leave the session (and the SQLite write lock) held"""

    async def test_date_error_ends_transaction(
        self, seed, issue, session_factory, issue_invoice_builder
    ):
        tenant = await seed()

        async with session_factory() as session:
            result = await issue_invoice_builder(session).execute(
                IssueInvoiceCommandDTO(
                    user_id=tenant["user_id"],
                    company_id=tenant["company_id"],
                    client_id=tenant["client_id"],
                    invoice_date="2024-04-01",
                    due_date="not-a-date",
                    items=[InvoiceItemCommandDTO(item_id=tenant["item_ids"][0], qty=1, rate=Decimal("10"))],
                )
            )

            assert result.error.code == "VALIDATION_ERROR"
            assert session.in_transaction() is False

            # another writer gets through while this session is still open
            other = await issue(tenant)
            assert other.is_ok()

    async def test_ownership_error_ends_transaction(
        self, seed, issue, session_factory, issue_invoice_builder
    ):
        tenant = await seed(user_id=7)

        async with session_factory() as session:
            result = await issue_invoice_builder(session).execute(
                IssueInvoiceCommandDTO(
                    user_id=8,
                    company_id=tenant["company_id"],
                    client_id=tenant["client_id"],
                    invoice_date="2024-04-01",
                    due_date="2024-04-30",
                    items=[InvoiceItemCommandDTO(item_id=tenant["item_ids"][0], qty=1, rate=Decimal("10"))],
                )
            )

            assert result.error.code == "AUTHORIZATION_ERROR"
            assert session.in_transaction() is False

            other = await issue(tenant)
            assert other.is_ok()
