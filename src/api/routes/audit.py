"""Audit API Routes"""

from fastapi import APIRouter, Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.use_cases.audit import GetAuditTrail, AuditTrailResponseDTO
from src.adapter.repositories import SqlAlchemyActivityLogRepository
from src.depends import get_session
from src.api.error import ClientError

router = APIRouter(prefix="/audit", tags=["Audit"])


@router.get("/{entity_type}/{entity_id}", response_model=AuditTrailResponseDTO)
async def get_audit_trail(
    entity_type: str,
    entity_id: str,
    session: AsyncSession = Depends(get_session)
):
    """
    Who edited, deleted, verified or rejected a payment, invoice or recharge.

    `entity_type` is one of `payment`, `invoice`, `customer_recharge`.
    """
    result = await GetAuditTrail(SqlAlchemyActivityLogRepository(session)).execute(entity_type, entity_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value
