"""Payment API Routes

FastAPI routes for client collections and provider payments.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.payment_request import RecordPaymentRequestSchema, EditPaymentRequestSchema
from src.app.use_cases.payments import (
    RecordPayment,
    EditPayment,
    DeletePayment,
    ListPayments,
    RecordPaymentCommandDTO,
    EditPaymentCommandDTO,
    DeletePaymentCommandDTO,
    PaymentResponseDTO,
    DeletePaymentResponseDTO,
    ListPaymentsQueryDTO,
    ListPaymentsResponseDTO,
)
from src.adapter.repositories import (
    SqlAlchemyPartyRepository,
    SqlAlchemyPartyLedgerRepository,
    SqlAlchemyInvoiceRepository,
    SqlAlchemyPaymentRepository,
    SqlAlchemyActivityLogRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.domain.payment import PaymentType
from src.depends import get_session
from src.api.error import ClientError

router = APIRouter(prefix="/payments", tags=["Payments"])


@router.post(
    "",
    response_model=PaymentResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {
            "description": "Validation error",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "VALIDATION_ERROR",
                            "message": "body.amount: Value error, Amount must be at least 10"
                        }
                    }
                }
            }
        }
    }
)
async def record_payment(
    request: RecordPaymentRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Record a client collection or a provider payment.

    When `invoice_id` is given the payment is applied to that invoice; the
    party's balance always drops by the amount (never below zero).

    **Returns:**
    - 201: Payment recorded
    - 400: Invalid request or invoice/party mismatch
    - 404: Party or invoice not found
    """
    uow = SqlAlchemyUnitOfWork(session)

    command = RecordPaymentCommandDTO(
        tenant_id=request.tenant_id,
        payment_type=request.payment_type,
        party_id=request.party_id,
        invoice_id=request.invoice_id,
        amount=request.amount,
        payment_method=request.payment_method,
        payment_date=request.payment_date,
        handled_by=request.handled_by,
        remarks=request.remarks,
    )

    use_case = RecordPayment(
        uow,
        SqlAlchemyPartyRepository(session),
        SqlAlchemyPartyLedgerRepository(session),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyPaymentRepository(session),
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("", response_model=ListPaymentsResponseDTO)
async def list_payments(
    tenant_id: str = Query(..., min_length=1),
    payment_type: Optional[PaymentType] = Query(None),
    party_id: Optional[str] = Query(None),
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    session: AsyncSession = Depends(get_session)
):
    query = ListPaymentsQueryDTO(
        tenant_id=tenant_id,
        payment_type=payment_type,
        party_id=party_id,
        limit=limit,
        offset=offset,
    )
    result = await ListPayments(SqlAlchemyPaymentRepository(session)).execute(query)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.patch("/{payment_id}", response_model=PaymentResponseDTO)
async def edit_payment(
    payment_id: str,
    request: EditPaymentRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Edit a payment.

    A changed amount moves the invoice's paid/due split and the party's
    balance by the difference.
    """
    uow = SqlAlchemyUnitOfWork(session)
    command = EditPaymentCommandDTO(payment_id=payment_id, **request.model_dump())

    use_case = EditPayment(
        uow,
        SqlAlchemyPartyRepository(session),
        SqlAlchemyPartyLedgerRepository(session),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyPaymentRepository(session),
        SqlAlchemyActivityLogRepository(session),
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.delete("/{payment_id}", response_model=DeletePaymentResponseDTO)
async def delete_payment(
    payment_id: str,
    actor: Optional[str] = Query(None, description="Who performed the delete"),
    session: AsyncSession = Depends(get_session)
):
    """
    Delete a payment, reversing its effect on the invoice and party balance.
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = DeletePayment(
        uow,
        SqlAlchemyPartyRepository(session),
        SqlAlchemyPartyLedgerRepository(session),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyPaymentRepository(session),
        SqlAlchemyActivityLogRepository(session),
    )
    result = await use_case.execute(DeletePaymentCommandDTO(payment_id=payment_id, actor=actor))

    if result.is_err():
        raise ClientError(result.error)

    return result.value
