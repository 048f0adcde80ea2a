"""CreateInvoice Use Case

Creates a purchase bill (provider) or sales invoice (client) with line items
and raises the party's payable/receivable by the unpaid part.
"""

import logging
from decimal import Decimal
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.party_repository import PartyRepository
from src.app.repositories.party_ledger_repository import PartyLedgerRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_line_repository import InvoiceLineRepository
from src.app.use_cases.balance_posting import post_balance_change
from src.domain.base import generate_document_number, money
from src.domain.invoice import Invoice, DOCUMENT_PREFIXES, DOCUMENT_PARTY_KINDS
from src.domain.invoice_line import InvoiceLine, compute_line_amounts
from src.domain.party import balance_of
from src.domain.party_ledger_entry import LedgerEntryType
from .dtos import CreateInvoiceCommandDTO, InvoiceResponseDTO
from .mappers import to_invoice_response

logger = logging.getLogger(__name__)


class CreateInvoice:
    """
    Use Case: Create purchase bill / sales invoice

    Business Rules:
    1. Bills belong to providers, invoices belong to clients
    2. Totals default to the sum of the line items
    3. total = subtotal + vat - discount, and 0 <= paid <= total
    4. due = total - paid is added to the party balance
    5. Party row is locked while its balance is rewritten

    Flow:
    1. Lock party (SELECT FOR UPDATE)
    2. Compute line and invoice totals
    3. Insert invoice with a unique document number
    4. Insert line items
    5. Post due amount to the party ledger
    6. Commit transaction
    """

    def __init__(
        self,
        uow: UnitOfWork,
        party_repo: PartyRepository,
        ledger_repo: PartyLedgerRepository,
        invoice_repo: InvoiceRepository,
        invoice_line_repo: InvoiceLineRepository,
    ):
        self.uow = uow
        self.party_repo = party_repo
        self.ledger_repo = ledger_repo
        self.invoice_repo = invoice_repo
        self.invoice_line_repo = invoice_line_repo

    async def execute(self, command: CreateInvoiceCommandDTO) -> Result[InvoiceResponseDTO]:
        """
        Execute invoice creation

        Args:
            command: CreateInvoiceCommandDTO with party, lines and amounts

        Returns:
            Result[InvoiceResponseDTO]: Created invoice with lines and the new party balance
        """
        try:
            # Step 1: Lock party
            party_kind = DOCUMENT_PARTY_KINDS[command.document_type]
            party = await self.party_repo.get_by_id(party_kind, command.party_id, for_update=True)

            if not party or party.tenant_id != command.tenant_id:
                return Return.err(
                    Error(
                        code="PARTY_NOT_FOUND",
                        message=f"{party_kind.value.capitalize()} {command.party_id} not found",
                        reason=f"A {command.document_type.value} must reference an existing {party_kind.value}",
                    )
                )

            # Step 2: Compute totals
            line_amounts = [
                compute_line_amounts(line.quantity, line.rate, line.vat_percent)
                for line in command.lines
            ]
            subtotal = money(command.subtotal) if command.subtotal is not None else sum(
                (net for net, _, _ in line_amounts), Decimal("0.00")
            )
            vat_amount = money(command.vat_amount) if command.vat_amount is not None else sum(
                (vat for _, vat, _ in line_amounts), Decimal("0.00")
            )
            discount = money(command.discount)
            total_amount = (
                money(command.total_amount)
                if command.total_amount is not None
                else subtotal + vat_amount - discount
            )
            paid_amount = money(command.paid_amount)

            if total_amount < 0 or paid_amount > total_amount:
                return Return.err(
                    Error(
                        code="INVALID_AMOUNT",
                        message=f"Invalid amounts: total={total_amount}, paid={paid_amount}",
                        reason="Total must be >= 0 and paid amount cannot exceed the total",
                    )
                )

            # Step 3: Insert invoice
            invoice = Invoice(
                tenant_id=command.tenant_id,
                document_type=command.document_type,
                invoice_number=generate_document_number(DOCUMENT_PREFIXES[command.document_type]),
                party_kind=party_kind,
                party_id=party.id,
                billing_date=command.billing_date,
                due_date=command.due_date,
                from_date=command.from_date,
                to_date=command.to_date,
                subtotal=subtotal,
                vat_amount=vat_amount,
                discount=discount,
                total_amount=total_amount,
                paid_amount=paid_amount,
                remarks=command.remarks,
                created_by=command.created_by,
            )
            invoice.recalculate()
            invoice = await self.invoice_repo.create(invoice)

            # Step 4: Insert line items
            lines = [
                InvoiceLine(
                    invoice_id=invoice.id,
                    item_id=line.item_id,
                    item_name=line.item_name,
                    description=line.description,
                    unit=line.unit,
                    quantity=line.quantity,
                    rate=line.rate,
                    vat_percent=line.vat_percent,
                    vat_amount=vat,
                    from_date=line.from_date,
                    to_date=line.to_date,
                    total=total,
                )
                for line, (_, vat, total) in zip(command.lines, line_amounts)
            ]
            if lines:
                lines = await self.invoice_line_repo.create_many(lines)

            # Step 5: Post unpaid amount to the party
            if invoice.due_amount > 0:
                await post_balance_change(
                    self.party_repo,
                    self.ledger_repo,
                    party,
                    invoice.due_amount,
                    LedgerEntryType.INVOICE_ISSUED,
                    reference_type="invoice",
                    reference_id=invoice.id,
                )

            # Step 6: Commit transaction
            await self.uow.commit()

            logger.info(
                f"Created {invoice.document_type.value} {invoice.invoice_number} "
                f"for {party_kind.value} {party.id}: total={invoice.total_amount}, due={invoice.due_amount}"
            )

            return Return.ok(to_invoice_response(invoice, lines, party_balance=balance_of(party)))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to create invoice for party {command.party_id}: {e}")
            return Return.err(
                Error(
                    code="CREATE_INVOICE_FAILED",
                    message="Failed to create invoice",
                    reason=str(e),
                )
            )
