"""RejectManualRecharge Use Case

Declines a customer-submitted manual payment (pending_manual -> rejected).
No balance changes.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_recharge_repository import CustomerRechargeRepository
from src.app.repositories.activity_log_repository import ActivityLogRepository
from src.domain.activity_log import ActivityLog
from src.domain.customer_recharge import RechargeStatus
from .dtos import RejectManualRechargeCommandDTO, RechargeResponseDTO
from .mappers import to_recharge_response

logger = logging.getLogger(__name__)


class RejectManualRecharge:
    """
    Use Case: Reject a manual recharge payment

    Business Rules:
    1. A non-empty reason is required
    2. Only recharges in status pending_manual can be rejected
    3. The reason is kept in rejection_reason and appended to the notes
    """

    def __init__(
        self,
        uow: UnitOfWork,
        recharge_repo: CustomerRechargeRepository,
        activity_log_repo: ActivityLogRepository,
    ):
        self.uow = uow
        self.recharge_repo = recharge_repo
        self.activity_log_repo = activity_log_repo

    async def execute(self, command: RejectManualRechargeCommandDTO) -> Result[RechargeResponseDTO]:
        try:
            reason = (command.reason or "").strip()
            if not reason:
                return Return.err(
                    Error(
                        code="REJECTION_REASON_REQUIRED",
                        message="A rejection reason is required",
                    )
                )

            recharge = await self.recharge_repo.get_by_id(command.recharge_id, for_update=True)

            if not recharge:
                return Return.err(
                    Error(code="RECHARGE_NOT_FOUND", message=f"Recharge {command.recharge_id} not found")
                )

            if recharge.status != RechargeStatus.PENDING_MANUAL:
                return Return.err(
                    Error(
                        code="INVALID_RECHARGE_STATE",
                        message=f"Recharge {recharge.id} is {recharge.status.value}, expected pending_manual",
                    )
                )

            recharge.status = RechargeStatus.REJECTED
            recharge.rejection_reason = reason
            recharge.notes = f"{recharge.notes} | Rejected: {reason}" if recharge.notes else f"Rejected: {reason}"
            recharge.paid_by = command.paid_by
            recharge.paid_by_name = command.paid_by_name
            recharge = await self.recharge_repo.update(recharge)

            await self.activity_log_repo.create(
                ActivityLog.record(
                    tenant_id=recharge.tenant_id,
                    action="reject_recharge",
                    entity_type="customer_recharge",
                    entity_id=recharge.id,
                    actor=command.paid_by_name or command.paid_by,
                    details={"reason": reason},
                )
            )

            await self.uow.commit()

            logger.info(f"Rejected manual recharge {recharge.id}: {reason}")
            return Return.ok(to_recharge_response(recharge))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to reject recharge {command.recharge_id}: {e}")
            return Return.err(
                Error(
                    code="REJECT_RECHARGE_FAILED",
                    message="Failed to reject manual recharge",
                    reason=str(e),
                )
            )
