"""Party API Routes

FastAPI routes for providers, clients, resellers and customers.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.use_cases.parties import (
    CreateParty,
    GetPartyBalance,
    ListPartyLedger,
    CreatePartyCommandDTO,
    PartyResponseDTO,
    PartyBalanceResponseDTO,
    ListPartyLedgerResponseDTO,
)
from src.adapter.repositories import SqlAlchemyPartyRepository, SqlAlchemyPartyLedgerRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.domain.party import PartyKind
from src.depends import get_session
from src.api.error import ClientError

router = APIRouter(prefix="/parties", tags=["Parties"])


@router.post("", response_model=PartyResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_party(
    request: CreatePartyCommandDTO,
    session: AsyncSession = Depends(get_session)
):
    """
    Create a provider, client, reseller or customer.

    A non-zero `opening_balance` is recorded as the party's first ledger entry.
    Sub-resellers are created by passing `parent_id`.
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = CreateParty(uow, SqlAlchemyPartyRepository(session), SqlAlchemyPartyLedgerRepository(session))
    result = await use_case.execute(request)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("/{kind}/{party_id}/balance", response_model=PartyBalanceResponseDTO)
async def get_party_balance(
    kind: PartyKind,
    party_id: str,
    session: AsyncSession = Depends(get_session)
):
    """
    Get a party's cached balance alongside its ledger sum.

    **Returns:**
    - 200: Balance retrieved
    - 404: Party not found
    """
    use_case = GetPartyBalance(SqlAlchemyPartyRepository(session), SqlAlchemyPartyLedgerRepository(session))
    result = await use_case.execute(kind, party_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("/{kind}/{party_id}/ledger", response_model=ListPartyLedgerResponseDTO)
async def list_party_ledger(
    kind: PartyKind,
    party_id: str,
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    session: AsyncSession = Depends(get_session)
):
    """List a party's balance ledger, newest first."""
    use_case = ListPartyLedger(SqlAlchemyPartyRepository(session), SqlAlchemyPartyLedgerRepository(session))
    result = await use_case.execute(kind, party_id, limit=limit, offset=offset)

    if result.is_err():
        raise ClientError(result.error)

    return result.value
