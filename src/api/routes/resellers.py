"""Reseller API Routes

FastAPI routes for reseller top-ups, parent/sub-reseller transfers and
reseller-paid customer recharges.
"""

from fastapi import APIRouter, Depends, Query
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.api.schemas.reseller_request import (
    TransferRequestSchema,
    TopUpRequestSchema,
    ResellerRechargeRequestSchema,
)
from src.app.use_cases.resellers import (
    FundSubReseller,
    DeductSubReseller,
    TopUpReseller,
    RechargeCustomerFromReseller,
    ListResellerTransactions,
    TransferCommandDTO,
    TopUpResellerCommandDTO,
    ResellerRechargeCustomerCommandDTO,
    ResellerTransactionDTO,
    TransferResponseDTO,
    ListResellerTransactionsResponseDTO,
    ResellerRechargeCustomerResponseDTO,
)
from src.adapter.repositories import (
    SqlAlchemyPartyRepository,
    SqlAlchemyPartyLedgerRepository,
    SqlAlchemyResellerTransactionRepository,
    SqlAlchemyCustomerRechargeRepository,
    SqlAlchemyCustomerPaymentRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.api.error import ClientError

router = APIRouter(prefix="/resellers", tags=["Resellers"])


@router.post(
    "/{reseller_id}/fund",
    response_model=TransferResponseDTO,
    responses={
        402: {
            "description": "Insufficient balance",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "INSUFFICIENT_BALANCE",
                            "message": "Insufficient balance. Required: 300.00, Available: 100.00"
                        }
                    }
                }
            }
        },
        403: {"description": "Reseller is not allowed to transfer balance"},
    }
)
async def fund_sub_reseller(
    reseller_id: str,
    request: TransferRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Move balance from a reseller to one of its sub-resellers.

    **Returns:**
    - 200: Both balances updated, one transaction row per side
    - 402: Reseller balance too low
    - 403: Reseller cannot transfer balance
    - 404: Reseller or sub-reseller not found
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = FundSubReseller(
        uow,
        SqlAlchemyPartyRepository(session),
        SqlAlchemyPartyLedgerRepository(session),
        SqlAlchemyResellerTransactionRepository(session),
    )
    command = TransferCommandDTO(reseller_id=reseller_id, **request.model_dump())
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.post("/{reseller_id}/deduct", response_model=TransferResponseDTO)
async def deduct_sub_reseller(
    reseller_id: str,
    request: TransferRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """Pull balance back from a sub-reseller to its parent."""
    uow = SqlAlchemyUnitOfWork(session)
    use_case = DeductSubReseller(
        uow,
        SqlAlchemyPartyRepository(session),
        SqlAlchemyPartyLedgerRepository(session),
        SqlAlchemyResellerTransactionRepository(session),
    )
    command = TransferCommandDTO(reseller_id=reseller_id, **request.model_dump())
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.post("/{reseller_id}/top-up", response_model=ResellerTransactionDTO)
async def top_up_reseller(
    reseller_id: str,
    request: TopUpRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    uow = SqlAlchemyUnitOfWork(session)
    use_case = TopUpReseller(
        uow,
        SqlAlchemyPartyRepository(session),
        SqlAlchemyPartyLedgerRepository(session),
        SqlAlchemyResellerTransactionRepository(session),
    )
    command = TopUpResellerCommandDTO(reseller_id=reseller_id, **request.model_dump())
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.post("/{reseller_id}/recharge-customer", response_model=ResellerRechargeCustomerResponseDTO)
async def recharge_customer_from_reseller(
    reseller_id: str,
    request: ResellerRechargeRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Renew a customer and charge the reseller balance for it.

    **Returns:**
    - 200: Recharge completed, reseller debited
    - 402: Reseller balance too low
    - 403: Reseller cannot recharge customers
    - 404: Reseller or customer not found
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = RechargeCustomerFromReseller(
        uow,
        SqlAlchemyPartyRepository(session),
        SqlAlchemyPartyLedgerRepository(session),
        SqlAlchemyResellerTransactionRepository(session),
        SqlAlchemyCustomerRechargeRepository(session),
        SqlAlchemyCustomerPaymentRepository(session),
        default_validity_days=ApplicationConfig.DEFAULT_VALIDITY_DAYS,
    )
    command = ResellerRechargeCustomerCommandDTO(reseller_id=reseller_id, **request.model_dump())
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("/{reseller_id}/transactions", response_model=ListResellerTransactionsResponseDTO)
async def list_reseller_transactions(
    reseller_id: str,
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    session: AsyncSession = Depends(get_session)
):
    use_case = ListResellerTransactions(
        SqlAlchemyPartyRepository(session),
        SqlAlchemyResellerTransactionRepository(session),
    )
    result = await use_case.execute(reseller_id, limit=limit, offset=offset)

    if result.is_err():
        raise ClientError(result.error)

    return result.value
