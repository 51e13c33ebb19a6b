"""Invoice API Routes

FastAPI routes for issuing and reading invoices.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.api.error import ClientError
from src.api.schemas.invoice_request import IssueInvoiceRequestSchema
from src.app.use_cases.invoicing import (
    AddressSnapshotResolver,
    FiscalYearSequencer,
    GetInvoice,
    InvoiceDetailDTO,
    InvoiceItemCommandDTO,
    InvoiceNumberPreviewDTO,
    IssueInvoice,
    IssueInvoiceCommandDTO,
    IssuedInvoiceDTO,
    ListInvoices,
    ListInvoicesQueryDTO,
    ListInvoicesResponseDTO,
    OwnershipValidator,
    PreviewInvoiceNumber,
    RenderInvoicePdf,
)
from src.app.use_cases.invoicing.error_codes import (
    AUTHORIZATION_ERROR,
    INVOICE_NOT_FOUND,
    MISSING_REQUIRED_DATA,
    TRANSACTION_ERROR,
    VALIDATION_ERROR,
)
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
from src.adapter.services.pdf_service import ReportLabPdfService
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_current_user_id, get_session

router = APIRouter(prefix="/invoices", tags=["Invoices"])

ERROR_STATUS = {
    AUTHORIZATION_ERROR: status.HTTP_403_FORBIDDEN,
    VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    MISSING_REQUIRED_DATA: status.HTTP_422_UNPROCESSABLE_ENTITY,
    INVOICE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    TRANSACTION_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _raise_for(error):
    raise ClientError(error, status_code=ERROR_STATUS.get(error.code, status.HTTP_400_BAD_REQUEST))


def _sequencer(session: AsyncSession) -> FiscalYearSequencer:
    return FiscalYearSequencer(
        SqlAlchemyInvoiceCounterRepository(
            session, lock_timeout_seconds=ApplicationConfig.INVOICE_LOCK_TIMEOUT_SECONDS
        )
    )


@router.post(
    "",
    response_model=IssuedInvoiceDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        403: {
            "description": "Company not owned by the requesting user",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "AUTHORIZATION_ERROR",
                            "message": "Unauthorized company access",
                            "details": {"company_id": 1},
                        }
                    }
                }
            }
        },
        400: {
            "description": "Invalid client, item, amount or date",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "VALIDATION_ERROR",
                            "message": "Invalid item for this company",
                            "details": {"item_id": 3},
                        }
                    }
                }
            }
        },
        422: {
            "description": "Client has no billing address",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "MISSING_REQUIRED_DATA",
                            "message": "Client billing address is required",
                        }
                    }
                }
            }
        },
    }
)
async def issue_invoice(
    request: IssueInvoiceRequestSchema,
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
):
    """
    Issue an invoice with a server-generated, per-company sequential number.

    **Request body:**
    - `company_id`, `client_id` (required)
    - `invoice_date`, `due_date` (required): YYYY-MM-DD, due date not before invoice date
    - `items` (required, non-empty): `item_id`, `qty`, `rate`, `discount`, `tax_rate`
    - `notes` (optional)

    **Returns:**
    - 201: Invoice committed; number is `INV/FY{yy}-{yy}/{nnnn}`
    - 400: Validation error
    - 403: Company not owned by the caller
    - 422: Client billing address missing
    - 500: Transaction failed and was rolled back
    """
    uow = SqlAlchemyUnitOfWork(session)

    command = IssueInvoiceCommandDTO(
        user_id=user_id,
        company_id=request.company_id,
        client_id=request.client_id,
        invoice_date=request.invoice_date,
        due_date=request.due_date,
        items=[InvoiceItemCommandDTO(**item.model_dump()) for item in request.items],
        notes=request.notes,
    )

    use_case = IssueInvoice(
        uow,
        OwnershipValidator(
            SqlAlchemyCompanyRepository(session),
            SqlAlchemyClientRepository(session),
            SqlAlchemyCatalogItemRepository(session),
        ),
        _sequencer(session),
        AddressSnapshotResolver(SqlAlchemyClientAddressRepository(session)),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceLineRepository(session),
        SqlAlchemyInvoiceAddressRepository(session),
    )
    result = await use_case.execute(command)

    if result.is_err():
        _raise_for(result.error)

    return result.value


@router.get("", response_model=ListInvoicesResponseDTO)
async def list_invoices(
    company_id: Optional[int] = Query(default=None),
    client_id: Optional[int] = Query(default=None),
    status_filter: Optional[str] = Query(default=None, alias="status"),
    limit: int = Query(default=ApplicationConfig.LIST_DEFAULT_LIMIT),
    offset: int = Query(default=0),
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
):
    """
    List the caller's invoices, newest invoice date first.

    **Query parameters:**
    - `company_id`, `client_id`, `status` (optional filters)
    - `limit` (default 10, max 100), `offset`
    """
    use_case = ListInvoices(
        SqlAlchemyInvoiceRepository(session),
        default_limit=ApplicationConfig.LIST_DEFAULT_LIMIT,
        max_limit=ApplicationConfig.LIST_MAX_LIMIT,
    )
    result = await use_case.execute(
        ListInvoicesQueryDTO(
            user_id=user_id,
            company_id=company_id,
            client_id=client_id,
            status=status_filter,
            limit=limit,
            offset=offset,
        )
    )

    if result.is_err():
        _raise_for(result.error)

    return result.value


@router.get("/number-preview", response_model=InvoiceNumberPreviewDTO)
async def preview_invoice_number(
    company_id: int = Query(...),
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
):
    """
    Show the number the next invoice would likely receive.

    Display only: a concurrent issuance may take this number first.
    """
    use_case = PreviewInvoiceNumber(SqlAlchemyCompanyRepository(session), _sequencer(session))
    result = await use_case.execute(user_id, company_id)

    if result.is_err():
        _raise_for(result.error)

    return result.value


@router.get("/{invoice_id}", response_model=InvoiceDetailDTO)
async def get_invoice(
    invoice_id: int,
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
):
    """Invoice header, line items and the issued address snapshots."""
    use_case = GetInvoice(
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceLineRepository(session),
        SqlAlchemyInvoiceAddressRepository(session),
    )
    result = await use_case.execute(user_id, invoice_id)

    if result.is_err():
        _raise_for(result.error)

    return result.value


@router.get(
    "/{invoice_id}/pdf",
    responses={
        200: {
            "content": {"application/pdf": {}},
            "description": "PDF document"
        },
        404: {
            "description": "Invoice not found",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "INVOICE_NOT_FOUND",
                            "message": "Invoice with ID 123 not found"
                        }
                    }
                }
            }
        },
    }
)
async def download_invoice_pdf(
    invoice_id: int,
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
):
    """Download the invoice as a PDF attachment."""
    use_case = RenderInvoicePdf(
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceLineRepository(session),
        SqlAlchemyInvoiceAddressRepository(session),
        SqlAlchemyCompanyRepository(session),
        SqlAlchemyCatalogItemRepository(session),
        ReportLabPdfService(),
    )
    result = await use_case.execute(user_id, invoice_id)

    if result.is_err():
        _raise_for(result.error)

    pdf = result.value
    return Response(
        content=pdf.content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{pdf.filename}"'},
    )
