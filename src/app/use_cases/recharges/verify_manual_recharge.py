"""VerifyManualRecharge Use Case

Approves a customer-submitted manual payment (pending_manual -> completed),
debiting any wallet contribution recorded in the recharge notes.
"""

import logging
from datetime import datetime
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.wallet_service import WalletService
from src.app.repositories.party_repository import PartyRepository
from src.app.repositories.party_ledger_repository import PartyLedgerRepository
from src.app.repositories.customer_recharge_repository import CustomerRechargeRepository
from src.app.repositories.customer_payment_repository import CustomerPaymentRepository
from src.app.repositories.activity_log_repository import ActivityLogRepository
from src.app.use_cases.balance_posting import post_balance_change
from src.domain.activity_log import ActivityLog
from src.domain.base import money
from src.domain.customer_payment import CustomerPayment
from src.domain.customer_recharge import RechargeStatus, parse_wallet_amount
from src.domain.party import PartyKind, CustomerStatus
from src.domain.party_ledger_entry import LedgerEntryType
from .dtos import VerifyManualRechargeCommandDTO, RechargeResponseDTO
from .mappers import to_recharge_response

logger = logging.getLogger(__name__)

WALLET_DEBIT_NOTE = "Wallet used for verified manual payment"


class VerifyManualRecharge:
    """
    Use Case: Verify a manual recharge payment

    Business Rules:
    1. Only recharges in status pending_manual can be verified
    2. A wallet contribution "(Wallet: ৳W)" in the notes is debited first;
       a failed debit aborts the verification with nothing changed
    3. Customer: expiry = recharge.new_expiry, status active,
       last_payment_date today, due_amount cleared
    4. A payment history row is written; its notes flag package changes
       and wallet contributions

    Flow:
    1. Lock recharge and validate state
    2. Lock customer
    3. Debit wallet contribution (if any)
    4. Complete recharge and update customer
    5. Write payment history and audit entry
    6. Commit transaction
    """

    def __init__(
        self,
        uow: UnitOfWork,
        party_repo: PartyRepository,
        ledger_repo: PartyLedgerRepository,
        recharge_repo: CustomerRechargeRepository,
        customer_payment_repo: CustomerPaymentRepository,
        activity_log_repo: ActivityLogRepository,
        wallet_service: WalletService,
        currency_symbol: str = "৳",
    ):
        self.uow = uow
        self.party_repo = party_repo
        self.ledger_repo = ledger_repo
        self.recharge_repo = recharge_repo
        self.customer_payment_repo = customer_payment_repo
        self.activity_log_repo = activity_log_repo
        self.wallet_service = wallet_service
        self.currency_symbol = currency_symbol

    async def execute(self, command: VerifyManualRechargeCommandDTO) -> Result[RechargeResponseDTO]:
        try:
            # Step 1: Lock recharge
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

            # Step 2: Lock customer
            customer = await self.party_repo.get_by_id(
                PartyKind.CUSTOMER, recharge.customer_id, for_update=True
            )

            if not customer:
                return Return.err(
                    Error(code="CUSTOMER_NOT_FOUND", message=f"Customer {recharge.customer_id} not found")
                )

            # Step 3: Wallet contribution
            wallet_amount = parse_wallet_amount(recharge.notes)
            if wallet_amount > 0:
                try:
                    debit = await self.wallet_service.debit(
                        customer.id,
                        wallet_amount,
                        WALLET_DEBIT_NOTE,
                        reference_id=recharge.id,
                    )
                except Exception as e:
                    logger.error(f"Wallet debit of {wallet_amount} for recharge {command.recharge_id} raised: {e}")
                    await self.uow.rollback()
                    return Return.err(
                        Error(
                            code="WALLET_DEBIT_FAILED",
                            message="Failed to deduct wallet balance",
                            reason=str(e),
                        )
                    )

                if not debit.success:
                    logger.warning(
                        f"Wallet debit of {wallet_amount} for recharge {command.recharge_id} refused: {debit.error}"
                    )
                    await self.uow.rollback()
                    return Return.err(
                        Error(
                            code="WALLET_DEBIT_FAILED",
                            message="Failed to deduct wallet balance",
                            reason=debit.error,
                        )
                    )

            # Step 4: Complete recharge and renew customer
            now = datetime.utcnow()
            recharge.status = RechargeStatus.COMPLETED
            recharge.paid_at = now
            recharge.paid_by = command.paid_by
            recharge.paid_by_name = command.paid_by_name
            recharge = await self.recharge_repo.update(recharge)

            customer.expiry_date = recharge.new_expiry
            customer.status = CustomerStatus.ACTIVE
            customer.last_payment_date = now.date()
            await self.party_repo.update(customer)
            await post_balance_change(
                self.party_repo,
                self.ledger_repo,
                customer,
                -money(customer.due_amount),
                LedgerEntryType.RECHARGE_SETTLED,
                reference_type="customer_recharge",
                reference_id=recharge.id,
            )

            # Step 5: Payment history and audit
            await self.customer_payment_repo.create(
                CustomerPayment(
                    tenant_id=recharge.tenant_id,
                    customer_id=customer.id,
                    recharge_id=recharge.id,
                    amount=recharge.amount,
                    payment_method=recharge.payment_method,
                    transaction_id=recharge.transaction_id,
                    notes=self._payment_notes(recharge.notes, recharge.is_package_change(), wallet_amount),
                    payment_date=now,
                )
            )
            await self.activity_log_repo.create(
                ActivityLog.record(
                    tenant_id=recharge.tenant_id,
                    action="verify_recharge",
                    entity_type="customer_recharge",
                    entity_id=recharge.id,
                    actor=command.paid_by_name or command.paid_by,
                    details={"amount": recharge.amount, "wallet_amount": wallet_amount},
                )
            )

            # Step 6: Commit transaction
            await self.uow.commit()

            logger.info(
                f"Verified manual recharge {recharge.id} for customer {customer.id} "
                f"(wallet={wallet_amount})"
            )

            return Return.ok(
                to_recharge_response(
                    recharge,
                    customer,
                    wallet_amount_used=wallet_amount if wallet_amount > 0 else None,
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to verify recharge {command.recharge_id}: {e}")
            return Return.err(
                Error(
                    code="VERIFY_RECHARGE_FAILED",
                    message="Failed to verify manual recharge",
                    reason=str(e),
                )
            )

    def _payment_notes(self, notes, is_package_change, wallet_amount) -> str:
        text = "Manual payment verified"
        if is_package_change:
            text += " (Package Change)"
        if wallet_amount > 0:
            text += f" (Wallet: {self.currency_symbol}{wallet_amount})"
        return f"{text}: {notes or ''}"
