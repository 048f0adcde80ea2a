"""RecordPayment Use Case

Applies a collection (from a client) or provider payment to an invoice and
the party's running balance.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.party_repository import PartyRepository
from src.app.repositories.party_ledger_repository import PartyLedgerRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.payment_repository import PaymentRepository
from src.app.use_cases.balance_posting import post_balance_change
from src.domain.base import generate_document_number, money
from src.domain.party_ledger_entry import LedgerEntryType
from src.domain.payment import (
    Payment,
    PAYMENT_PREFIXES,
    PAYMENT_PARTY_KINDS,
    PAYMENT_DOCUMENT_TYPES,
)
from .dtos import RecordPaymentCommandDTO, PaymentResponseDTO
from .mappers import to_payment_response

logger = logging.getLogger(__name__)


class RecordPayment:
    """
    Use Case: Record a payment

    Business Rules:
    1. Collections belong to clients, provider payments to providers
    2. A linked invoice must belong to the same party and match the payment direction
    3. Invoice: paid += amount, due = max(0, total - paid), status re-derived
    4. Party: balance = max(0, balance - amount)
    5. All rows are written in one transaction

    Flow:
    1. Lock party (SELECT FOR UPDATE)
    2. Lock and validate linked invoice
    3. Insert payment with a unique payment number
    4. Apply amount to the invoice
    5. Post amount to the party ledger
    6. Commit transaction
    """

    def __init__(
        self,
        uow: UnitOfWork,
        party_repo: PartyRepository,
        ledger_repo: PartyLedgerRepository,
        invoice_repo: InvoiceRepository,
        payment_repo: PaymentRepository,
    ):
        self.uow = uow
        self.party_repo = party_repo
        self.ledger_repo = ledger_repo
        self.invoice_repo = invoice_repo
        self.payment_repo = payment_repo

    async def execute(self, command: RecordPaymentCommandDTO) -> Result[PaymentResponseDTO]:
        """
        Execute payment recording

        Args:
            command: RecordPaymentCommandDTO with party, optional invoice and amount

        Returns:
            Result[PaymentResponseDTO]: Payment with resulting invoice and party state
        """
        try:
            amount = money(command.amount)

            # Step 1: Lock party
            party_kind = PAYMENT_PARTY_KINDS[command.payment_type]
            party = await self.party_repo.get_by_id(party_kind, command.party_id, for_update=True)

            if not party or party.tenant_id != command.tenant_id:
                return Return.err(
                    Error(
                        code="PARTY_NOT_FOUND",
                        message=f"{party_kind.value.capitalize()} {command.party_id} not found",
                    )
                )

            # Step 2: Lock linked invoice
            invoice = None
            if command.invoice_id:
                invoice = await self.invoice_repo.get_by_id(command.invoice_id, for_update=True)

                if not invoice:
                    return Return.err(
                        Error(
                            code="INVOICE_NOT_FOUND",
                            message=f"Invoice {command.invoice_id} not found",
                        )
                    )

                if (
                    invoice.party_id != party.id
                    or invoice.document_type != PAYMENT_DOCUMENT_TYPES[command.payment_type]
                ):
                    return Return.err(
                        Error(
                            code="INVOICE_PARTY_MISMATCH",
                            message=f"Invoice {invoice.invoice_number} does not belong to "
                                    f"{party_kind.value} {party.id}",
                            reason="A payment can only be applied to an invoice of the same party",
                        )
                    )

            # Step 3: Insert payment
            payment = await self.payment_repo.create(
                Payment(
                    tenant_id=command.tenant_id,
                    payment_type=command.payment_type,
                    payment_number=generate_document_number(PAYMENT_PREFIXES[command.payment_type]),
                    invoice_id=invoice.id if invoice else None,
                    party_kind=party_kind,
                    party_id=party.id,
                    amount=amount,
                    payment_method=command.payment_method,
                    payment_date=command.payment_date,
                    handled_by=command.handled_by,
                    remarks=command.remarks,
                )
            )

            # Step 4: Apply to invoice
            if invoice:
                invoice.apply_payment(amount)
                await self.invoice_repo.update(invoice)

            # Step 5: Reduce party balance
            await post_balance_change(
                self.party_repo,
                self.ledger_repo,
                party,
                -amount,
                LedgerEntryType.PAYMENT_APPLIED,
                reference_type="payment",
                reference_id=payment.id,
            )

            # Step 6: Commit transaction
            await self.uow.commit()

            logger.info(
                f"Recorded {payment.payment_type.value} {payment.payment_number} "
                f"of {amount} for {party_kind.value} {party.id}"
            )

            return Return.ok(to_payment_response(payment, invoice, party))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to record payment for party {command.party_id}: {e}")
            return Return.err(
                Error(
                    code="RECORD_PAYMENT_FAILED",
                    message="Failed to record payment",
                    reason=str(e),
                )
            )
