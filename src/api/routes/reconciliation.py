"""Reconciliation API Routes

On-demand run of the balance reconciliation the worker performs on a schedule.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.use_cases.reconciliation import ReconcileBalances, ReconciliationReportDTO
from src.adapter.repositories import (
    SqlAlchemyPartyRepository,
    SqlAlchemyPartyLedgerRepository,
    SqlAlchemyInvoiceRepository,
)
from src.depends import get_session
from src.api.error import ClientError

router = APIRouter(prefix="/reconciliation", tags=["Reconciliation"])


@router.get("", response_model=ReconciliationReportDTO)
async def reconcile_balances(
    tenant_id: Optional[str] = Query(None, description="Restrict the check to one tenant"),
    session: AsyncSession = Depends(get_session)
):
    """
    Compare every cached balance with its ledger and every invoice's due
    amount and status with its totals. Read-only.
    """
    use_case = ReconcileBalances(
        SqlAlchemyPartyRepository(session),
        SqlAlchemyPartyLedgerRepository(session),
        SqlAlchemyInvoiceRepository(session),
    )
    result = await use_case.execute(tenant_id=tenant_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value
