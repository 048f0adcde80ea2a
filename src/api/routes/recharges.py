"""Customer Recharge API Routes

FastAPI routes for renewing customers and moving recharges through the
due / pending_manual / completed / rejected lifecycle.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.api.schemas.recharge_request import (
    MarkRechargePaidRequestSchema,
    VerifyRechargeRequestSchema,
    RejectRechargeRequestSchema,
)
from src.app.services.wallet_service import WalletService
from src.app.use_cases.recharges import (
    RechargeCustomer,
    BulkRechargeCustomers,
    MarkRechargePaid,
    VerifyManualRecharge,
    RejectManualRecharge,
    ListRecharges,
    RechargeCustomerCommandDTO,
    BulkRechargeCommandDTO,
    MarkRechargePaidCommandDTO,
    VerifyManualRechargeCommandDTO,
    RejectManualRechargeCommandDTO,
    RechargeResponseDTO,
    BulkRechargeResponseDTO,
    ListRechargesQueryDTO,
    ListRechargesResponseDTO,
)
from src.adapter.repositories import (
    SqlAlchemyPartyRepository,
    SqlAlchemyPartyLedgerRepository,
    SqlAlchemyCustomerRechargeRepository,
    SqlAlchemyCustomerPaymentRepository,
    SqlAlchemyActivityLogRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.domain.customer_recharge import RechargeStatus
from src.depends import get_session, get_wallet_service
from src.api.error import ClientError

router = APIRouter(prefix="/recharges", tags=["Recharges"])


def _recharge_customer(session: AsyncSession, uow: SqlAlchemyUnitOfWork) -> RechargeCustomer:
    return RechargeCustomer(
        uow,
        SqlAlchemyPartyRepository(session),
        SqlAlchemyPartyLedgerRepository(session),
        SqlAlchemyCustomerRechargeRepository(session),
        SqlAlchemyCustomerPaymentRepository(session),
        default_validity_days=ApplicationConfig.DEFAULT_VALIDITY_DAYS,
    )


@router.post("", response_model=RechargeResponseDTO, status_code=status.HTTP_201_CREATED)
async def recharge_customer(
    request: RechargeCustomerCommandDTO,
    session: AsyncSession = Depends(get_session)
):
    """
    Renew a customer's service.

    - `payment_method: "due"` extends service on credit (status `due`)
    - `manual: true` records a payment awaiting verification (status `pending_manual`)
    - anything else completes immediately
    """
    uow = SqlAlchemyUnitOfWork(session)
    result = await _recharge_customer(session, uow).execute(request)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.post("/bulk", response_model=BulkRechargeResponseDTO)
async def bulk_recharge_customers(
    request: BulkRechargeCommandDTO,
    session: AsyncSession = Depends(get_session)
):
    """Renew several customers; each item succeeds or fails on its own."""
    uow = SqlAlchemyUnitOfWork(session)
    use_case = BulkRechargeCustomers(uow, _recharge_customer(session, uow))
    result = await use_case.execute(request)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("", response_model=ListRechargesResponseDTO)
async def list_recharges(
    tenant_id: str = Query(..., min_length=1),
    customer_id: Optional[str] = Query(None),
    status: Optional[RechargeStatus] = Query(None),
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    session: AsyncSession = Depends(get_session)
):
    query = ListRechargesQueryDTO(
        tenant_id=tenant_id,
        customer_id=customer_id,
        status=status,
        limit=limit,
        offset=offset,
    )
    result = await ListRecharges(SqlAlchemyCustomerRechargeRepository(session)).execute(query)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.post("/{recharge_id}/mark-paid", response_model=RechargeResponseDTO)
async def mark_recharge_paid(
    recharge_id: str,
    request: MarkRechargePaidRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Collect a `due` recharge.

    **Returns:**
    - 200: Recharge completed, customer due reduced
    - 404: Recharge not found
    - 409: Recharge is not in `due` status
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = MarkRechargePaid(
        uow,
        SqlAlchemyPartyRepository(session),
        SqlAlchemyPartyLedgerRepository(session),
        SqlAlchemyCustomerRechargeRepository(session),
        SqlAlchemyCustomerPaymentRepository(session),
        SqlAlchemyActivityLogRepository(session),
    )
    command = MarkRechargePaidCommandDTO(recharge_id=recharge_id, **request.model_dump())
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.post("/{recharge_id}/verify", response_model=RechargeResponseDTO)
async def verify_manual_recharge(
    recharge_id: str,
    request: VerifyRechargeRequestSchema,
    session: AsyncSession = Depends(get_session),
    wallet_service: WalletService = Depends(get_wallet_service),
):
    """
    Verify a `pending_manual` recharge.

    Any wallet amount recorded in the recharge notes is debited from the
    customer's wallet first; a failed debit leaves the recharge pending.
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = VerifyManualRecharge(
        uow,
        SqlAlchemyPartyRepository(session),
        SqlAlchemyPartyLedgerRepository(session),
        SqlAlchemyCustomerRechargeRepository(session),
        SqlAlchemyCustomerPaymentRepository(session),
        SqlAlchemyActivityLogRepository(session),
        wallet_service,
        currency_symbol=ApplicationConfig.CURRENCY_SYMBOL,
    )
    command = VerifyManualRechargeCommandDTO(recharge_id=recharge_id, **request.model_dump())
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.post("/{recharge_id}/reject", response_model=RechargeResponseDTO)
async def reject_manual_recharge(
    recharge_id: str,
    request: RejectRechargeRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """Reject a `pending_manual` recharge. A reason is required."""
    uow = SqlAlchemyUnitOfWork(session)
    use_case = RejectManualRecharge(
        uow,
        SqlAlchemyCustomerRechargeRepository(session),
        SqlAlchemyActivityLogRepository(session),
    )
    command = RejectManualRechargeCommandDTO(recharge_id=recharge_id, **request.model_dump())
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value
