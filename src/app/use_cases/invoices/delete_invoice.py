"""DeleteInvoice Use Case

Removes an invoice together with its lines and payments, and takes the
still-unpaid part back out of the party balance.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.party_repository import PartyRepository
from src.app.repositories.party_ledger_repository import PartyLedgerRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_line_repository import InvoiceLineRepository
from src.app.repositories.payment_repository import PaymentRepository
from src.app.repositories.activity_log_repository import ActivityLogRepository
from src.app.use_cases.balance_posting import post_balance_change
from src.domain.activity_log import ActivityLog
from src.domain.base import money
from src.domain.party import balance_of
from src.domain.party_ledger_entry import LedgerEntryType
from .dtos import DeleteInvoiceCommandDTO, DeleteInvoiceResponseDTO

logger = logging.getLogger(__name__)


class DeleteInvoice:
    """
    Use Case: Delete an invoice

    Business Rules:
    1. Payments applied to the invoice are deleted with it
    2. The party balance is reduced by the invoice's current due amount
       (payments already reduced it by the paid part)
    3. An audit entry is written

    Flow:
    1. Lock invoice and party
    2. Delete payments and lines
    3. Reverse due amount on the party
    4. Delete invoice, write audit entry
    5. Commit transaction
    """

    def __init__(
        self,
        uow: UnitOfWork,
        party_repo: PartyRepository,
        ledger_repo: PartyLedgerRepository,
        invoice_repo: InvoiceRepository,
        invoice_line_repo: InvoiceLineRepository,
        payment_repo: PaymentRepository,
        activity_log_repo: ActivityLogRepository,
    ):
        self.uow = uow
        self.party_repo = party_repo
        self.ledger_repo = ledger_repo
        self.invoice_repo = invoice_repo
        self.invoice_line_repo = invoice_line_repo
        self.payment_repo = payment_repo
        self.activity_log_repo = activity_log_repo

    async def execute(self, command: DeleteInvoiceCommandDTO) -> Result[DeleteInvoiceResponseDTO]:
        try:
            # Step 1: Lock invoice and party
            invoice = await self.invoice_repo.get_by_id(command.invoice_id, for_update=True)

            if not invoice:
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message=f"Invoice {command.invoice_id} not found",
                    )
                )

            party = await self.party_repo.get_by_id(invoice.party_kind, invoice.party_id, for_update=True)

            # Step 2: Delete payments and lines
            payments = await self.payment_repo.get_by_invoice_id(invoice.id)
            for payment in payments:
                await self.payment_repo.delete(payment)
            await self.invoice_line_repo.delete_by_invoice_id(invoice.id)

            # Step 3: Reverse the unpaid part
            reversed_amount = money(0)
            if party is not None and invoice.due_amount > 0:
                entry = await post_balance_change(
                    self.party_repo,
                    self.ledger_repo,
                    party,
                    -money(invoice.due_amount),
                    LedgerEntryType.INVOICE_DELETED,
                    reference_type="invoice",
                    reference_id=invoice.id,
                )
                if entry is not None:
                    reversed_amount = -entry.amount

            # Step 4: Delete invoice and audit
            await self.invoice_repo.delete(invoice)
            await self.activity_log_repo.create(
                ActivityLog.record(
                    tenant_id=invoice.tenant_id,
                    action="delete_invoice",
                    entity_type="invoice",
                    entity_id=invoice.id,
                    actor=command.actor,
                    details={
                        "invoice_number": invoice.invoice_number,
                        "document_type": invoice.document_type.value,
                        "party_id": invoice.party_id,
                        "total_amount": invoice.total_amount,
                        "paid_amount": invoice.paid_amount,
                        "due_amount": invoice.due_amount,
                        "deleted_payments": [p.payment_number for p in payments],
                    },
                )
            )

            # Step 5: Commit transaction
            await self.uow.commit()

            logger.info(
                f"Deleted {invoice.document_type.value} {invoice.invoice_number} "
                f"({len(payments)} payments, reversed {reversed_amount})"
            )

            return Return.ok(
                DeleteInvoiceResponseDTO(
                    invoice_id=invoice.id,
                    invoice_number=invoice.invoice_number,
                    deleted_payments=len(payments),
                    balance_reversed=reversed_amount,
                    party_balance=balance_of(party) if party is not None else money(0),
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to delete invoice {command.invoice_id}: {e}")
            return Return.err(
                Error(
                    code="DELETE_INVOICE_FAILED",
                    message="Failed to delete invoice",
                    reason=str(e),
                )
            )
