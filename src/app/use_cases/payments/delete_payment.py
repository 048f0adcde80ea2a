"""DeletePayment Use Case

Removes a payment and reverses its effect on the invoice and party balance.
"""

import logging
from decimal import Decimal
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.party_repository import PartyRepository
from src.app.repositories.party_ledger_repository import PartyLedgerRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.payment_repository import PaymentRepository
from src.app.repositories.activity_log_repository import ActivityLogRepository
from src.app.use_cases.balance_posting import post_balance_change
from src.domain.activity_log import ActivityLog
from src.domain.base import money
from src.domain.party import balance_of
from src.domain.party_ledger_entry import LedgerEntryType
from .dtos import DeletePaymentCommandDTO, DeletePaymentResponseDTO

logger = logging.getLogger(__name__)


class DeletePayment:
    """
    Use Case: Delete a payment

    Business Rules:
    1. Invoice: paid = max(0, paid - amount), due and status re-derived
    2. Party: balance += the amount the payment actually took off it (its
       ledger entries), so a payment that hit the zero floor is not over-reversed
    3. A delete_payment audit entry is written

    Flow:
    1. Lock payment, invoice and party
    2. Reverse amount on invoice and party
    3. Delete payment, write audit entry
    4. Commit transaction
    """

    def __init__(
        self,
        uow: UnitOfWork,
        party_repo: PartyRepository,
        ledger_repo: PartyLedgerRepository,
        invoice_repo: InvoiceRepository,
        payment_repo: PaymentRepository,
        activity_log_repo: ActivityLogRepository,
    ):
        self.uow = uow
        self.party_repo = party_repo
        self.ledger_repo = ledger_repo
        self.invoice_repo = invoice_repo
        self.payment_repo = payment_repo
        self.activity_log_repo = activity_log_repo

    async def execute(self, command: DeletePaymentCommandDTO) -> Result[DeletePaymentResponseDTO]:
        try:
            # Step 1: Lock rows
            payment = await self.payment_repo.get_by_id(command.payment_id, for_update=True)

            if not payment:
                return Return.err(
                    Error(
                        code="PAYMENT_NOT_FOUND",
                        message=f"Payment {command.payment_id} not found",
                    )
                )

            invoice = None
            if payment.invoice_id:
                invoice = await self.invoice_repo.get_by_id(payment.invoice_id, for_update=True)
            party = await self.party_repo.get_by_id(payment.party_kind, payment.party_id, for_update=True)

            amount = money(payment.amount)
            applied = -money(await self.ledger_repo.get_sum_by_reference("payment", payment.id))
            reversal = min(amount, max(Decimal("0"), applied))

            # Step 2: Reverse on invoice and party
            if invoice:
                invoice.apply_payment(-amount)
                await self.invoice_repo.update(invoice)
            if party:
                await post_balance_change(
                    self.party_repo,
                    self.ledger_repo,
                    party,
                    reversal,
                    LedgerEntryType.PAYMENT_REVERSED,
                    reference_type="payment",
                    reference_id=payment.id,
                )

            # Step 3: Delete and audit
            await self.payment_repo.delete(payment)
            await self.activity_log_repo.create(
                ActivityLog.record(
                    tenant_id=payment.tenant_id,
                    action="delete_payment",
                    entity_type="payment",
                    entity_id=payment.id,
                    actor=command.actor,
                    details={
                        "payment_number": payment.payment_number,
                        "payment_type": payment.payment_type.value,
                        "amount": amount,
                        "invoice_id": payment.invoice_id,
                        "party_id": payment.party_id,
                    },
                )
            )

            # Step 4: Commit transaction
            await self.uow.commit()

            logger.info(f"Deleted payment {payment.payment_number} ({amount})")

            return Return.ok(
                DeletePaymentResponseDTO(
                    payment_id=payment.id,
                    payment_number=payment.payment_number,
                    amount=amount,
                    invoice_id=payment.invoice_id,
                    invoice_paid_amount=invoice.paid_amount if invoice else None,
                    invoice_due_amount=invoice.due_amount if invoice else None,
                    invoice_payment_status=invoice.payment_status.value if invoice else None,
                    party_balance=balance_of(party) if party else None,
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to delete payment {command.payment_id}: {e}")
            return Return.err(
                Error(
                    code="DELETE_PAYMENT_FAILED",
                    message="Failed to delete payment",
                    reason=str(e),
                )
            )
