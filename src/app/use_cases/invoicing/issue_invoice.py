"""IssueInvoice Use Case

Validates, prices, numbers and persists an invoice as one atomic unit.
"""

import logging
import re
from datetime import date, datetime
from decimal import Decimal
from typing import Tuple
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_line_repository import InvoiceLineRepository
from src.app.repositories.invoice_address_repository import InvoiceAddressRepository
from src.domain.invoice import Invoice, InvoiceStatus
from src.domain.invoice_line import InvoiceLine
from src.domain.invoice_totals import InvalidLineItemError, InvoiceTotals, calculate_totals
from .address_snapshot_resolver import AddressSnapshotResolver
from .dtos import IssueInvoiceCommandDTO, IssuedInvoiceDTO
from .error_codes import TRANSACTION_ERROR, VALIDATION_ERROR
from .fiscal_year_sequencer import FiscalYearSequencer
from .ownership_validator import OwnershipValidator

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"
# strptime alone accepts unpadded fields such as 2024-4-1
DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


def _validation_error(message: str, reason: str, **details) -> Error:
    return Error(code=VALIDATION_ERROR, message=message, reason=reason, details=details)


class IssueInvoice:
    """
    Use Case: Issue an invoice

    Business Rules:
    1. Company, client and items must pass the ownership chain
    2. Line totals are tax inclusive; total = subtotal + tax
    3. Invoice number is allocated per company and fiscal year, never reused
    4. Billing address snapshot is mandatory, shipping snapshot optional
    5. Header, lines, snapshots and the counter increment commit together
       or not at all; nothing is retried

    Flow:
    1. Validating: ownership chain (no writes)
    2. Computing: line totals and date parsing (no writes)
    3. Sequencing: allocate the next number (counter row locked)
    4. Persisting: insert header and lines
    5. SnapshottingAddresses: copy billing/shipping addresses
    6. Commit, or roll back everything from step 3 on
    """

    def __init__(
        self,
        uow: UnitOfWork,
        ownership_validator: OwnershipValidator,
        sequencer: FiscalYearSequencer,
        address_resolver: AddressSnapshotResolver,
        invoice_repo: InvoiceRepository,
        invoice_line_repo: InvoiceLineRepository,
        invoice_address_repo: InvoiceAddressRepository,
    ):
        self.uow = uow
        self.ownership_validator = ownership_validator
        self.sequencer = sequencer
        self.address_resolver = address_resolver
        self.invoice_repo = invoice_repo
        self.invoice_line_repo = invoice_line_repo
        self.invoice_address_repo = invoice_address_repo

    async def execute(self, command: IssueInvoiceCommandDTO) -> Result[IssuedInvoiceDTO]:
        """
        Execute invoice issuance

        The whole workflow runs inside the unit of work: leaving it without a
        commit rolls back, so no path returns with the session's transaction
        (and on SQLite the database write lock) still held.

        Args:
            command: IssueInvoiceCommandDTO with tenant, company, client, dates, items

        Returns:
            Result[IssuedInvoiceDTO]: invoice id, number and fiscal year, or error
        """
        async with self.uow:
            return await self._issue(command)

    async def _issue(self, command: IssueInvoiceCommandDTO) -> Result[IssuedInvoiceDTO]:
        if not command.items:
            return Return.err(
                _validation_error(
                    "Invoice must contain at least one item",
                    "empty item list",
                )
            )

        # Step 1: Validating
        ownership = await self.ownership_validator.validate(
            user_id=command.user_id,
            company_id=command.company_id,
            client_id=command.client_id,
            item_ids=[item.item_id for item in command.items],
        )
        if ownership.is_err():
            logger.info(
                f"Invoice request rejected for company {command.company_id}: "
                f"{ownership.error.code} {ownership.error.reason}"
            )
            return ownership

        # Step 2: Computing
        try:
            totals = calculate_totals(
                (item.rate, item.qty, item.discount, item.tax_rate) for item in command.items
            )
        except InvalidLineItemError as e:
            return Return.err(_validation_error("Invalid line item", str(e)))

        dates = self._parse_dates(command)
        if dates.is_err():
            return dates
        invoice_date, due_date = dates.value

        # Steps 3-6: one transaction
        try:
            allocated = await self.sequencer.allocate(command.company_id, invoice_date)

            invoice = await self.invoice_repo.create(
                Invoice(
                    company_id=command.company_id,
                    user_id=command.user_id,
                    client_id=command.client_id,
                    invoice_number=allocated.invoice_number,
                    fiscal_year=allocated.fiscal_year,
                    invoice_date=invoice_date,
                    due_date=due_date,
                    subtotal=totals.subtotal,
                    tax=totals.tax,
                    total=totals.total,
                    status=InvoiceStatus.DRAFT,
                    paid_amount=Decimal("0"),
                    remaining_amount=totals.total,
                    notes=command.notes,
                )
            )
            invoice_id = invoice.id

            await self.invoice_line_repo.create_many(
                self._build_lines(invoice_id, command, totals)
            )

            snapshot = await self.address_resolver.resolve(command.client_id)
            if snapshot.is_err():
                logger.warning(
                    f"Rolling back invoice {allocated.invoice_number} for company "
                    f"{command.company_id}: {snapshot.error.reason}"
                )
                return snapshot

            await self.invoice_address_repo.create_many(snapshot.value.for_invoice(invoice_id))

            await self.uow.commit()

        except Exception as e:
            logger.error(
                f"Invoice issuance failed for company {command.company_id}, rolling back: {e}"
            )
            return Return.err(
                Error(
                    code=TRANSACTION_ERROR,
                    message="Failed to issue invoice",
                    reason=str(e),
                )
            )

        logger.info(
            f"Issued invoice {allocated.invoice_number} (id={invoice_id}) "
            f"for company {command.company_id}, total {totals.total}"
        )

        return Return.ok(
            IssuedInvoiceDTO(
                invoice_id=invoice_id,
                invoice_number=allocated.invoice_number,
                fiscal_year=allocated.fiscal_year,
                subtotal=totals.subtotal,
                tax=totals.tax,
                total=totals.total,
            )
        )

    def _parse_dates(self, command: IssueInvoiceCommandDTO) -> Result[Tuple[date, date]]:
        parsed = {}
        for field_name in ("invoice_date", "due_date"):
            raw = getattr(command, field_name)
            try:
                if not DATE_PATTERN.fullmatch(raw):
                    raise ValueError(f"{raw!r} is not zero-padded YYYY-MM-DD")
                parsed[field_name] = datetime.strptime(raw, DATE_FORMAT).date()
            except (TypeError, ValueError):
                return Return.err(
                    _validation_error(
                        f"Invalid {field_name} (YYYY-MM-DD)",
                        f"unparsable {field_name}: {raw!r}",
                        field=field_name,
                    )
                )

        if parsed["due_date"] < parsed["invoice_date"]:
            return Return.err(
                _validation_error(
                    "due_date must not be before invoice_date",
                    f"due_date {parsed['due_date']} < invoice_date {parsed['invoice_date']}",
                    field="due_date",
                )
            )

        return Return.ok((parsed["invoice_date"], parsed["due_date"]))

    def _build_lines(
        self, invoice_id: int, command: IssueInvoiceCommandDTO, totals: InvoiceTotals
    ) -> list:
        return [
            InvoiceLine(
                invoice_id=invoice_id,
                item_id=item.item_id,
                qty=item.qty,
                rate=item.rate,
                discount=item.discount,
                tax_rate=item.tax_rate,
                line_total=amounts.total,
            )
            for item, amounts in zip(command.items, totals.lines)
        ]
