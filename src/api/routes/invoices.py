"""Invoice API Routes

FastAPI routes for purchase bills and sales invoices.
"""

import base64
from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.app.use_cases.invoices import (
    CreateInvoice,
    DeleteInvoice,
    GetInvoice,
    ListInvoices,
    GenerateInvoicePdf,
    CreateInvoiceCommandDTO,
    InvoiceResponseDTO,
    ListInvoicesQueryDTO,
    ListInvoicesResponseDTO,
    DeleteInvoiceCommandDTO,
    DeleteInvoiceResponseDTO,
    InvoicePdfResponseDTO,
)
from src.adapter.repositories import (
    SqlAlchemyPartyRepository,
    SqlAlchemyPartyLedgerRepository,
    SqlAlchemyInvoiceRepository,
    SqlAlchemyInvoiceLineRepository,
    SqlAlchemyPaymentRepository,
    SqlAlchemyActivityLogRepository,
)
from src.adapter.services.pdf_service import ReportLabPdfService
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.domain.invoice import DocumentType, PaymentStatus
from src.depends import get_session
from src.api.error import ClientError

router = APIRouter(prefix="/invoices", tags=["Invoices"])


@router.post(
    "",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        404: {
            "description": "Party not found",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "PARTY_NOT_FOUND",
                            "message": "provider 123 not found"
                        }
                    }
                }
            }
        }
    }
)
async def create_invoice(
    request: CreateInvoiceCommandDTO,
    session: AsyncSession = Depends(get_session)
):
    """
    Create a purchase bill (provider) or sales invoice (client).

    The party's balance grows by the unpaid part of the total.

    **Returns:**
    - 201: Invoice created, with its lines and the party's new balance
    - 400: Invalid amounts
    - 404: Party not found
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = CreateInvoice(
        uow,
        SqlAlchemyPartyRepository(session),
        SqlAlchemyPartyLedgerRepository(session),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceLineRepository(session),
    )
    result = await use_case.execute(request)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("", response_model=ListInvoicesResponseDTO)
async def list_invoices(
    tenant_id: str = Query(..., min_length=1),
    document_type: Optional[DocumentType] = Query(None),
    party_id: Optional[str] = Query(None),
    payment_status: Optional[PaymentStatus] = Query(None),
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    session: AsyncSession = Depends(get_session)
):
    """List a tenant's invoices, newest first."""
    query = ListInvoicesQueryDTO(
        tenant_id=tenant_id,
        document_type=document_type,
        party_id=party_id,
        payment_status=payment_status,
        limit=limit,
        offset=offset,
    )
    result = await ListInvoices(SqlAlchemyInvoiceRepository(session)).execute(query)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("/{invoice_id}", response_model=InvoiceResponseDTO)
async def get_invoice(
    invoice_id: str,
    session: AsyncSession = Depends(get_session)
):
    use_case = GetInvoice(SqlAlchemyInvoiceRepository(session), SqlAlchemyInvoiceLineRepository(session))
    result = await use_case.execute(invoice_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.delete("/{invoice_id}", response_model=DeleteInvoiceResponseDTO)
async def delete_invoice(
    invoice_id: str,
    actor: Optional[str] = Query(None, description="Who performed the delete"),
    session: AsyncSession = Depends(get_session)
):
    """
    Delete an invoice together with its lines and payments.

    The party's balance is reduced by the invoice's remaining due amount.

    **Returns:**
    - 200: Invoice deleted
    - 404: Invoice not found
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = DeleteInvoice(
        uow,
        SqlAlchemyPartyRepository(session),
        SqlAlchemyPartyLedgerRepository(session),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceLineRepository(session),
        SqlAlchemyPaymentRepository(session),
        SqlAlchemyActivityLogRepository(session),
    )
    result = await use_case.execute(DeleteInvoiceCommandDTO(invoice_id=invoice_id, actor=actor))

    if result.is_err():
        raise ClientError(result.error)

    return result.value


def _pdf_use_case(session: AsyncSession) -> GenerateInvoicePdf:
    return GenerateInvoicePdf(
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceLineRepository(session),
        SqlAlchemyPartyRepository(session),
        ReportLabPdfService(),
        company_name=ApplicationConfig.COMPANY_NAME,
        company_address=ApplicationConfig.COMPANY_ADDRESS,
        currency_symbol=ApplicationConfig.CURRENCY_SYMBOL,
    )


@router.get("/{invoice_id}/pdf", response_model=InvoicePdfResponseDTO)
async def get_invoice_pdf(
    invoice_id: str,
    session: AsyncSession = Depends(get_session)
):
    """Render the invoice as a PDF, returned base64-encoded."""
    result = await _pdf_use_case(session).execute(invoice_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get(
    "/{invoice_id}/pdf/download",
    responses={
        200: {
            "content": {"application/pdf": {}},
            "description": "PDF document"
        }
    }
)
async def download_invoice_pdf(
    invoice_id: str,
    session: AsyncSession = Depends(get_session)
):
    """Render the invoice as a PDF file download."""
    result = await _pdf_use_case(session).execute(invoice_id)

    if result.is_err():
        raise ClientError(result.error)

    pdf_bytes = base64.b64decode(result.value.pdf_base64)

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"attachment; filename={result.value.invoice_number}.pdf"
        }
    )
