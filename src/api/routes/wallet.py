"""Customer Wallet API Routes"""

from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.wallet_request import WalletTransactionRequestSchema
from src.app.use_cases.wallet import (
    RecordWalletTransaction,
    ListWalletTransactions,
    RecordWalletTransactionCommandDTO,
    WalletTransactionDTO,
    ListWalletTransactionsResponseDTO,
)
from src.adapter.repositories import SqlAlchemyPartyRepository, SqlAlchemyWalletTransactionRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.api.error import ClientError

router = APIRouter(prefix="/wallet", tags=["Wallet"])


@router.post(
    "/{customer_id}/transactions",
    response_model=WalletTransactionDTO,
    status_code=status.HTTP_201_CREATED,
)
async def record_wallet_transaction(
    customer_id: str,
    request: WalletTransactionRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Top up, credit a bonus to, or withdraw from a customer's wallet.

    **Returns:**
    - 201: Wallet updated
    - 402: Withdrawal larger than the wallet balance
    - 404: Customer not found
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = RecordWalletTransaction(
        uow,
        SqlAlchemyPartyRepository(session),
        SqlAlchemyWalletTransactionRepository(session),
    )
    command = RecordWalletTransactionCommandDTO(customer_id=customer_id, **request.model_dump())
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("/{customer_id}/transactions", response_model=ListWalletTransactionsResponseDTO)
async def list_wallet_transactions(
    customer_id: str,
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    session: AsyncSession = Depends(get_session)
):
    use_case = ListWalletTransactions(
        SqlAlchemyPartyRepository(session),
        SqlAlchemyWalletTransactionRepository(session),
    )
    result = await use_case.execute(customer_id, limit=limit, offset=offset)

    if result.is_err():
        raise ClientError(result.error)

    return result.value
