"""EditPayment Use Case

Changes a recorded payment and re-applies the amount difference to the
linked invoice and the party balance.
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
from src.domain.party_ledger_entry import LedgerEntryType
from .dtos import EditPaymentCommandDTO, PaymentResponseDTO
from .mappers import to_payment_response

logger = logging.getLogger(__name__)


class EditPayment:
    """
    Use Case: Edit a payment

    Business Rules:
    1. delta = new amount - old amount (old = previous_amount hint or stored amount)
    2. delta == 0: only descriptive fields change, invoice and party untouched
    3. Invoice: paid += delta, due and status re-derived
    4. Party: balance = max(0, balance - delta); a reduction first gives back
       the part of the payment that the zero floor never took off the balance
    5. Every edit writes an update_payment audit entry

    Flow:
    1. Lock payment, invoice and party
    2. Compute delta and update payment fields
    3. Re-apply delta to invoice and party
    4. Write audit entry
    5. Commit transaction
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

    async def execute(self, command: EditPaymentCommandDTO) -> Result[PaymentResponseDTO]:
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

            # What the payment actually took off the party balance so far
            applied = -money(await self.ledger_repo.get_sum_by_reference("payment", payment.id))
            unapplied = max(Decimal("0"), money(payment.amount) - applied)

            # Step 2: Compute delta and update fields
            old_amount = money(
                command.previous_amount if command.previous_amount is not None else payment.amount
            )
            new_amount = money(command.amount) if command.amount is not None else money(payment.amount)
            delta = new_amount - old_amount

            payment.amount = new_amount
            if command.payment_method is not None:
                payment.payment_method = command.payment_method
            if command.payment_date is not None:
                payment.payment_date = command.payment_date
            if command.handled_by is not None:
                payment.handled_by = command.handled_by
            if command.remarks is not None:
                payment.remarks = command.remarks
            payment = await self.payment_repo.update(payment)

            # Step 3: Re-apply the difference
            if delta != 0:
                if invoice:
                    invoice.apply_payment(delta)
                    await self.invoice_repo.update(invoice)
                party_delta = -delta
                if delta < 0:
                    party_delta = max(Decimal("0"), -delta - unapplied)
                if party and party_delta != 0:
                    await post_balance_change(
                        self.party_repo,
                        self.ledger_repo,
                        party,
                        party_delta,
                        LedgerEntryType.PAYMENT_ADJUSTED,
                        reference_type="payment",
                        reference_id=payment.id,
                    )

            # Step 4: Audit
            await self.activity_log_repo.create(
                ActivityLog.record(
                    tenant_id=payment.tenant_id,
                    action="update_payment",
                    entity_type="payment",
                    entity_id=payment.id,
                    actor=command.actor,
                    details={
                        "payment_number": payment.payment_number,
                        "payment_type": payment.payment_type.value,
                        "old_amount": old_amount,
                        "new_amount": new_amount,
                        "payment_method": payment.payment_method,
                        "invoice_id": payment.invoice_id,
                    },
                )
            )

            # Step 5: Commit transaction
            await self.uow.commit()

            logger.info(
                f"Edited payment {payment.payment_number}: {old_amount} -> {new_amount} (delta={delta})"
            )

            return Return.ok(to_payment_response(payment, invoice, party))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to edit payment {command.payment_id}: {e}")
            return Return.err(
                Error(
                    code="EDIT_PAYMENT_FAILED",
                    message="Failed to edit payment",
                    reason=str(e),
                )
            )
