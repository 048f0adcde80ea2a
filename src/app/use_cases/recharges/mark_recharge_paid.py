"""MarkRechargePaid Use Case

Collects payment for a recharge that was granted on credit (due -> completed).
"""

import logging
from datetime import datetime
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.party_repository import PartyRepository
from src.app.repositories.party_ledger_repository import PartyLedgerRepository
from src.app.repositories.customer_recharge_repository import CustomerRechargeRepository
from src.app.repositories.customer_payment_repository import CustomerPaymentRepository
from src.app.repositories.activity_log_repository import ActivityLogRepository
from src.app.use_cases.balance_posting import post_balance_change
from src.domain.activity_log import ActivityLog
from src.domain.base import money
from src.domain.customer_payment import CustomerPayment
from src.domain.customer_recharge import RechargeStatus, DUE_PAYMENT_METHOD
from src.domain.party import PartyKind
from src.domain.party_ledger_entry import LedgerEntryType
from .dtos import MarkRechargePaidCommandDTO, RechargeResponseDTO
from .mappers import to_recharge_response

logger = logging.getLogger(__name__)


class MarkRechargePaid:
    """
    Use Case: Mark a due recharge as paid

    Business Rules:
    1. Only recharges in status due can be marked paid
    2. The collection method must be a real method (not "due")
    3. original_payment_method keeps "due", payment_method takes the collection method
    4. Customer due_amount = max(0, due_amount - amount)
    """

    def __init__(
        self,
        uow: UnitOfWork,
        party_repo: PartyRepository,
        ledger_repo: PartyLedgerRepository,
        recharge_repo: CustomerRechargeRepository,
        customer_payment_repo: CustomerPaymentRepository,
        activity_log_repo: ActivityLogRepository,
    ):
        self.uow = uow
        self.party_repo = party_repo
        self.ledger_repo = ledger_repo
        self.recharge_repo = recharge_repo
        self.customer_payment_repo = customer_payment_repo
        self.activity_log_repo = activity_log_repo

    async def execute(self, command: MarkRechargePaidCommandDTO) -> Result[RechargeResponseDTO]:
        try:
            payment_method = (command.payment_method or "").strip()
            if not payment_method or payment_method == DUE_PAYMENT_METHOD:
                return Return.err(
                    Error(
                        code="INVALID_PAYMENT_METHOD",
                        message="A collection payment method is required",
                        reason=f"payment_method must be set and cannot be '{DUE_PAYMENT_METHOD}'",
                    )
                )

            recharge = await self.recharge_repo.get_by_id(command.recharge_id, for_update=True)

            if not recharge:
                return Return.err(
                    Error(code="RECHARGE_NOT_FOUND", message=f"Recharge {command.recharge_id} not found")
                )

            if recharge.status != RechargeStatus.DUE:
                return Return.err(
                    Error(
                        code="INVALID_RECHARGE_STATE",
                        message=f"Recharge {recharge.id} is {recharge.status.value}, expected due",
                    )
                )

            customer = await self.party_repo.get_by_id(
                PartyKind.CUSTOMER, recharge.customer_id, for_update=True
            )

            paid_at = datetime.utcnow()
            recharge.status = RechargeStatus.COMPLETED
            recharge.payment_method = payment_method
            recharge.original_payment_method = DUE_PAYMENT_METHOD
            recharge.paid_at = paid_at
            recharge.paid_by = command.paid_by
            recharge.paid_by_name = command.paid_by_name
            if command.transaction_id:
                recharge.transaction_id = command.transaction_id
            recharge = await self.recharge_repo.update(recharge)

            if customer:
                await post_balance_change(
                    self.party_repo,
                    self.ledger_repo,
                    customer,
                    -money(recharge.amount),
                    LedgerEntryType.RECHARGE_PAID,
                    reference_type="customer_recharge",
                    reference_id=recharge.id,
                )
                await self.customer_payment_repo.create(
                    CustomerPayment(
                        tenant_id=recharge.tenant_id,
                        customer_id=customer.id,
                        recharge_id=recharge.id,
                        amount=recharge.amount,
                        payment_method=payment_method,
                        transaction_id=recharge.transaction_id,
                        notes="Due recharge collected",
                        payment_date=paid_at,
                    )
                )

            await self.activity_log_repo.create(
                ActivityLog.record(
                    tenant_id=recharge.tenant_id,
                    action="mark_recharge_paid",
                    entity_type="customer_recharge",
                    entity_id=recharge.id,
                    actor=command.paid_by_name or command.paid_by,
                    details={"amount": recharge.amount, "payment_method": payment_method},
                )
            )

            await self.uow.commit()

            logger.info(f"Recharge {recharge.id} marked paid via {payment_method}")
            return Return.ok(to_recharge_response(recharge, customer))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to mark recharge {command.recharge_id} paid: {e}")
            return Return.err(
                Error(
                    code="MARK_RECHARGE_PAID_FAILED",
                    message="Failed to mark recharge as paid",
                    reason=str(e),
                )
            )
