"""GetAuditTrail Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.repositories.activity_log_repository import ActivityLogRepository
from .dtos import ActivityLogDTO, AuditTrailResponseDTO

logger = logging.getLogger(__name__)

AUDITED_ENTITY_TYPES = ("payment", "invoice", "customer_recharge")


class GetAuditTrail:
    """Reads back what ActivityLog.record() wrote for one entity"""

    def __init__(self, activity_log_repo: ActivityLogRepository):
        self.activity_log_repo = activity_log_repo

    async def execute(self, entity_type: str, entity_id: str) -> Result[AuditTrailResponseDTO]:
        if entity_type not in AUDITED_ENTITY_TYPES:
            return Return.err(
                Error(
                    code="INVALID_ENTITY_TYPE",
                    message=f"entity_type must be one of {', '.join(AUDITED_ENTITY_TYPES)}",
                )
            )

        try:
            logs = await self.activity_log_repo.get_by_entity(entity_type, entity_id)
        except Exception as e:
            logger.error(f"Failed to read audit trail of {entity_type} {entity_id}: {e}")
            return Return.err(
                Error(code="GET_AUDIT_TRAIL_FAILED", message="Failed to read audit trail", reason=str(e))
            )

        return Return.ok(
            AuditTrailResponseDTO(
                entity_type=entity_type,
                entity_id=entity_id,
                entries=[
                    ActivityLogDTO(
                        id=log.id,
                        tenant_id=log.tenant_id,
                        actor=log.actor,
                        action=log.action,
                        details=log.details,
                        created_at=log.created_at,
                    )
                    for log in logs
                ],
            )
        )
